# offices/locations_table.py
from datetime import datetime
from typing import Dict, List

from fhir_api.models import Location, format_address
from office_hours.schedule_resolver import describe_today_hours, local_now, resolve_upcoming_changes

ROWS_PER_PAGE_OPTIONS = (1, 5, 10, 25)
DEFAULT_ROWS_PER_PAGE = 5
NONE_SCHEDULED = "None Scheduled"


def office_label(location: Location) -> str:
    """
    'TX - Spring Valley'
    """
    state = location.address.state if location.address else None
    name = location.name or ""
    return f"{state} - {name}" if state else name


def filter_locations(locations: List[Location], search_text: str = "") -> List[Location]:
    needle = (search_text or "").lower()
    filtered = [loc for loc in locations if loc.name and needle in loc.name.lower()]
    filtered.sort(key=lambda loc: office_label(loc).casefold())
    return filtered


def paginate(items: list, page: int, rows_per_page: int) -> list:
    if rows_per_page not in ROWS_PER_PAGE_OPTIONS:
        raise ValueError(f"rows_per_page must be one of {ROWS_PER_PAGE_OPTIONS}")
    if page < 0:
        raise ValueError("page must be >= 0")

    start = page * rows_per_page
    return items[start:start + rows_per_page]


def build_office_row(location: Location, now: datetime) -> Dict:
    changes = resolve_upcoming_changes(location, now)
    return {
        "id": location.id,
        "label": office_label(location),
        "link": f"/office/{location.id}",
        "address": format_address(location.address),
        "todays_hours": describe_today_hours(location, now),
        "upcoming_changes": changes or NONE_SCHEDULED,
        "has_upcoming_changes": changes is not None,
    }


def build_locations_table(
    locations: List[Location],
    search_text: str = "",
    page: int = 0,
    rows_per_page: int = DEFAULT_ROWS_PER_PAGE,
    now: datetime | None = None,
) -> Dict:
    """
    검색 -> 정렬 -> 페이지 자르기 -> 행 만들기
    count는 페이지 자르기 전 개수
    """
    now = now or local_now()

    filtered = filter_locations(locations, search_text)
    page_locations = paginate(filtered, page, rows_per_page)

    return {
        "count": len(filtered),
        "page": page,
        "rows_per_page": rows_per_page,
        "rows": [build_office_row(loc, now) for loc in page_locations],
    }
