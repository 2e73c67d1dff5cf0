import sys

import requests

from config.settings import LOCATION_SEARCH_COUNT
from fhir_api.fhir_client import search_locations
from offices.locations_table import build_locations_table
from office_hours.schedule_resolver import local_now


def main(search_text: str = ""):
    print("📌 FHIR 서버에서 Location 목록 수집 시작...")
    try:
        locations = search_locations(count=LOCATION_SEARCH_COUNT)
    except requests.RequestException as e:
        print(f"⚠️ Location 검색 실패 | {e}")
        locations = []

    print(f"✅ 수집된 Location 수: {len(locations)}")

    now = local_now()
    table = build_locations_table(locations, search_text=search_text, rows_per_page=25, now=now)

    for i, row in enumerate(table["rows"], start=1):
        print(f"[{i}/{table['count']}] {row['label']}")
        print(f"    주소: {row['address'] or '-'}")
        print(f"    오늘: {row['todays_hours']}")
        print(f"    변경: {row['upcoming_changes']}")

    print(f"✅ 완료! ({now.strftime('%Y-%m-%d %H:%M')})")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "")
