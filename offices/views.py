# offices/views.py
import logging

import requests
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from fhir_api.fhir_client import FhirConfigError, MalformedResourceError, get_location, search_locations
from office_hours.schedule_resolver import list_upcoming_changes, local_now

from .locations_table import build_locations_table, build_office_row
from .serializers import (
    OfficeDetailSerializer,
    OfficeListQuerySerializer,
    OfficeTableSerializer,
)

logger = logging.getLogger(__name__)


@extend_schema(
    parameters=[
        OpenApiParameter("search", OpenApiTypes.STR, description="이름 검색 (대소문자 무시)"),
        OpenApiParameter("page", OpenApiTypes.INT, description="0부터 시작"),
        OpenApiParameter("rows_per_page", OpenApiTypes.INT, enum=[1, 5, 10, 25]),
    ],
    responses={
        200: OfficeTableSerializer,
        400: OpenApiResponse(description="잘못된 쿼리 파라미터"),
        500: OpenApiResponse(description="FHIR 설정 누락"),
    },
)
@api_view(["GET"])
def offices(request):
    """
    GET /api/offices/?search=...&page=...&rows_per_page=...
    - FHIR에서 Location을 가져와 오늘 영업시간/일정 변경과 함께 표로 반환
    - FHIR 호출 실패 시 로그만 남기고 빈 목록
    """
    query = OfficeListQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data

    try:
        locations = search_locations()
    except FhirConfigError as e:
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except requests.RequestException as e:
        logger.warning("[offices] FHIR Location search failed | %s", e)
        locations = []

    table = build_locations_table(
        locations,
        search_text=params["search"],
        page=params["page"],
        rows_per_page=params["rows_per_page"],
        now=local_now(),
    )
    return Response(OfficeTableSerializer(table).data)


@extend_schema(
    responses={
        200: OfficeDetailSerializer,
        404: OpenApiResponse(description="해당 id의 Location 없음"),
        502: OpenApiResponse(description="FHIR 호출 실패 또는 Location 형식 오류"),
    },
)
@api_view(["GET"])
def office_detail(request, location_id: str):
    try:
        location = get_location(location_id)
    except FhirConfigError as e:
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except requests.RequestException as e:
        logger.warning("[office_detail] FHIR read failed %s | %s", location_id, e)
        return Response({"detail": "FHIR 서버 호출 실패"}, status=status.HTTP_502_BAD_GATEWAY)
    except MalformedResourceError as e:
        logger.error("[office_detail] malformed Location %s | %s", location_id, e)
        return Response({"detail": "FHIR Location 형식 오류"}, status=status.HTTP_502_BAD_GATEWAY)

    if location is None:
        return Response({"detail": "해당 id의 Location을 찾을 수 없습니다."}, status=status.HTTP_404_NOT_FOUND)

    now = local_now()
    data = build_office_row(location, now)
    data["name"] = location.name
    data["weekly_hours"] = [
        {
            "days_of_week": h.days_of_week,
            "opening_time": h.opening_time,
            "closing_time": h.closing_time,
        }
        for h in location.hours_of_operation
    ]
    data["schedule_changes"] = list_upcoming_changes(location, now)

    return Response(OfficeDetailSerializer(data).data)
