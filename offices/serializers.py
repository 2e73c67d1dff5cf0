from rest_framework import serializers

from .locations_table import DEFAULT_ROWS_PER_PAGE, ROWS_PER_PAGE_OPTIONS


class OfficeListQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, default="")
    page = serializers.IntegerField(required=False, min_value=0, default=0)
    rows_per_page = serializers.ChoiceField(
        choices=ROWS_PER_PAGE_OPTIONS,
        required=False,
        default=DEFAULT_ROWS_PER_PAGE,
    )


class OfficeRowSerializer(serializers.Serializer):
    id = serializers.CharField(allow_null=True)
    label = serializers.CharField()
    link = serializers.CharField()
    address = serializers.CharField(allow_blank=True)
    todays_hours = serializers.CharField()
    upcoming_changes = serializers.CharField()
    has_upcoming_changes = serializers.BooleanField()


class OfficeTableSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    page = serializers.IntegerField()
    rows_per_page = serializers.IntegerField()
    rows = OfficeRowSerializer(many=True)


class WeeklyHoursSerializer(serializers.Serializer):
    days_of_week = serializers.ListField(child=serializers.CharField())
    opening_time = serializers.CharField(allow_null=True)
    closing_time = serializers.CharField(allow_null=True)


class OfficeDetailSerializer(OfficeRowSerializer):
    name = serializers.CharField(allow_null=True)
    weekly_hours = WeeklyHoursSerializer(many=True)
    schedule_changes = serializers.ListField(child=serializers.CharField())
