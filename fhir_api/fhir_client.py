import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from config.settings import FHIR_API_URL, FHIR_ACCESS_TOKEN, HTTP_TIMEOUT_SEC, LOCATION_SEARCH_COUNT
from fhir_api.models import Location

logger = logging.getLogger(__name__)


class FhirConfigError(RuntimeError):
    pass


class MalformedResourceError(RuntimeError):
    pass


FHIR_HEADERS = {
    "accept": "application/fhir+json",
    "content-type": "application/fhir+json",
}


def _headers() -> dict:
    headers = dict(FHIR_HEADERS)
    if FHIR_ACCESS_TOKEN:
        headers["Authorization"] = f"Bearer {FHIR_ACCESS_TOKEN}"
    return headers


def _base_url() -> str:
    if not FHIR_API_URL:
        raise FhirConfigError("FHIR_API_URL가 없습니다. .env에 FHIR_API_URL=... 설정하세요.")
    return FHIR_API_URL


def _to_location(resource: dict) -> Optional[Location]:
    try:
        return Location.model_validate(resource)
    except ValidationError as e:
        logger.warning("skip invalid Location %s | %s", resource.get("id"), e)
        return None


def search_locations(count: int = LOCATION_SEARCH_COUNT) -> List[Location]:
    """
    Location 검색 (searchset Bundle)
    - _count 한 번으로 끝, 다음 페이지 링크는 따라가지 않는다
    """
    url = f"{_base_url()}/Location"
    r = requests.get(url, headers=_headers(), params={"_count": count}, timeout=HTTP_TIMEOUT_SEC)
    r.raise_for_status()
    bundle = r.json()

    locations = []
    for entry in (bundle.get("entry") or []):
        resource = entry.get("resource") or {}
        if resource.get("resourceType") != "Location":
            continue
        location = _to_location(resource)
        if location is not None:
            locations.append(location)

    logger.info("fetched %d locations (bundle total=%s)", len(locations), bundle.get("total"))
    return locations


def get_location(location_id: str) -> Optional[Location]:
    """
    Location 단건 조회
    - 404 -> None
    - 받았지만 Location 형태가 아니면 MalformedResourceError
    """
    url = f"{_base_url()}/Location/{location_id}"
    r = requests.get(url, headers=_headers(), timeout=HTTP_TIMEOUT_SEC)

    if r.status_code == 404:
        return None
    r.raise_for_status()

    try:
        return Location.model_validate(r.json())
    except ValidationError as e:
        raise MalformedResourceError(f"Location/{location_id} failed validation: {e.error_count()} error(s)") from e
