from .schedule_extension import (
    SCHEDULE_EXTENSION_URL,
    InvalidScheduleError,
    Schedule,
    decode_schedule,
    get_schedule_extension,
)

from .schedule_resolver import (
    describe_today_hours,
    resolve_today_hours,
    resolve_upcoming_changes,
)

__all__ = [
    "SCHEDULE_EXTENSION_URL",
    "InvalidScheduleError",
    "Schedule",
    "decode_schedule",
    "get_schedule_extension",
    "describe_today_hours",
    "resolve_today_hours",
    "resolve_upcoming_changes",
]
