from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import serializers
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .confirmation import build_check_in_confirmation


class CheckInConfirmationSerializer(serializers.Serializer):
    title = serializers.CharField()
    description = serializers.CharField()
    check_in_time = serializers.CharField(allow_blank=True)
    confirmation_notice = serializers.CharField()
    financial_policy_notice = serializers.CharField()
    support_phone = serializers.CharField()
    can_cancel = serializers.BooleanField()


@extend_schema(
    parameters=[OpenApiParameter("slot", OpenApiTypes.STR, description="예약한 슬롯 시작 시각 (ISO 8601)")],
    responses={200: CheckInConfirmationSerializer},
)
@api_view(["GET"])
def check_in_confirmation(request):
    """
    GET /api/appointments/confirmation/?slot=2024-01-05T09:30:00
    """
    data = build_check_in_confirmation(request.query_params.get("slot"))
    return Response(CheckInConfirmationSerializer(data).data)
