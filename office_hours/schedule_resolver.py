# office_hours/schedule_resolver.py
import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from config.settings import LOCAL_TIME_ZONE
from fhir_api.models import Location
from office_hours.date_formats import (
    format_schedule_change_date,
    format_simple_time,
    hour_to_time,
    parse_fhir_time,
    parse_override_date,
    parse_schedule_change_date,
)
from office_hours.schedule_extension import (
    ClosureType,
    InvalidScheduleError,
    Schedule,
    get_schedule_extension,
)

logger = logging.getLogger(__name__)

WEEKDAY_CODES = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
ENDPOINTS = ("open", "close")
NO_SCHEDULED_HOURS = "No scheduled hours"


def local_now() -> datetime:
    if LOCAL_TIME_ZONE:
        return datetime.now(ZoneInfo(LOCAL_TIME_ZONE))
    return datetime.now().astimezone()


def _load_schedule(location: Location) -> Schedule | None:
    try:
        return get_schedule_extension(location)
    except InvalidScheduleError as e:
        logger.warning("location %s (%s): %s", location.id, location.name, e)
        return None


def _override_for(schedule: Schedule, today: date):
    for date_key, override in schedule.schedule_overrides.items():
        if parse_override_date(date_key) == today:
            return override
    return None


def resolve_today_hours(location: Location, endpoint: str, now: datetime | None = None) -> str:
    """
    오늘 영업 시작/종료 시각 ('9:00 AM')
    1) schedule extension이 없으면 ''
    2) 오늘 날짜의 scheduleOverrides가 있으면 그 값
    3) 없으면 hoursOfOperation의 오늘 요일 값 (close가 없으면 24시)
    """
    if endpoint not in ENDPOINTS:
        raise ValueError(f"endpoint must be one of {ENDPOINTS}, got {endpoint!r}")

    schedule = _load_schedule(location)
    if schedule is None:
        return ""

    now = now or local_now()
    today = now.date()

    override = _override_for(schedule, today)
    if override is not None:
        hour = override.open if endpoint == "open" else override.close
        t = hour_to_time(hour) if hour is not None else None
        return format_simple_time(t) if t else ""

    weekday = WEEKDAY_CODES[today.weekday()]
    day_info = next((h for h in location.hours_of_operation if weekday in h.days_of_week), None)

    if endpoint == "open":
        t = parse_fhir_time(day_info.opening_time) if day_info else None
    else:
        closing = day_info.closing_time if day_info else None
        t = parse_fhir_time(closing) if closing else hour_to_time(24)

    return format_simple_time(t) if t else ""


def describe_today_hours(location: Location, now: datetime | None = None) -> str:
    now = now or local_now()
    open_t = resolve_today_hours(location, "open", now)
    close_t = resolve_today_hours(location, "close", now)
    if open_t and close_t:
        return f"{open_t} - {close_t}"
    return NO_SCHEDULED_HOURS


def _override_changes(schedule: Schedule, today: date) -> list:
    out = []
    for date_key in schedule.schedule_overrides:
        d = parse_override_date(date_key)
        if d and d >= today:
            out.append(format_schedule_change_date(d))
    return out


def _closure_changes(schedule: Schedule, today: date) -> list:
    out = []
    for closure in schedule.closures:
        start = parse_override_date(closure.start)
        if start is None:
            continue

        if closure.type == ClosureType.ONE_DAY:
            if start >= today:
                out.append(format_schedule_change_date(start))

        elif closure.type == ClosureType.PERIOD:
            end = parse_override_date(closure.end)
            if end is None:
                continue
            if start >= today or end >= today:
                out.append(f"{format_schedule_change_date(start)} - {format_schedule_change_date(end)}")

    return out


def _first_date_key(change: str):
    # 'Jan 5 - Jan 9'는 앞쪽 날짜 기준, 연도는 비교하지 않음
    key = parse_schedule_change_date(change.split(" - ")[0])
    return key or (13, 0)


def list_upcoming_changes(location: Location, now: datetime | None = None) -> list:
    schedule = _load_schedule(location)
    if schedule is None:
        return []

    today = (now or local_now()).date()

    changes = _override_changes(schedule, today) + _closure_changes(schedule, today)
    changes.sort(key=_first_date_key)

    return list(dict.fromkeys(changes))


def resolve_upcoming_changes(location: Location, now: datetime | None = None) -> str | None:
    """
    앞으로의 일정 변경 ('Jan 1, Feb 3 - Feb 5')
    없으면 None
    """
    changes = list_upcoming_changes(location, now)
    return ", ".join(changes) if changes else None
