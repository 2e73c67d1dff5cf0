# office_hours/date_formats.py
from datetime import date, datetime, time as dtime

# scheduleOverrides / closures 날짜 키 형식 ('01/31/2025', '1/5/2025'도 허용)
OVERRIDE_DATE_FORMAT = "%m/%d/%Y"

# 'Jan 5' 같은 표시용 형식을 다시 파싱할 때 쓰는 윤년 (2/29 허용)
_SORT_YEAR = 2000


def parse_override_date(s) -> date | None:
    """
    '01/31/2025' -> date(2025, 1, 31)
    파싱 실패 시 None
    """
    if not isinstance(s, str) or not s.strip():
        return None
    try:
        return datetime.strptime(s.strip(), OVERRIDE_DATE_FORMAT).date()
    except ValueError:
        return None


def format_schedule_change_date(d: date) -> str:
    """
    date(2025, 1, 5) -> 'Jan 5'
    """
    return f"{d.strftime('%b')} {d.day}"


def parse_schedule_change_date(s: str) -> tuple[int, int] | None:
    """
    'Jan 5' -> (1, 5)
    연도 정보가 없으므로 (월, 일)만 돌려준다.
    """
    if not s:
        return None
    try:
        d = datetime.strptime(f"{s.strip()} {_SORT_YEAR}", "%b %d %Y")
    except ValueError:
        return None
    return d.month, d.day


def hour_to_time(hour: int) -> dtime | None:
    """
    9 -> time(9, 0)
    24 -> time(0, 0)  (하루 끝)
    """
    if hour == 24:
        return dtime(0, 0)
    if not (0 <= hour <= 23):
        return None
    return dtime(hour, 0)


def parse_fhir_time(s) -> dtime | None:
    """
    '09:00:00' / '09:00' -> time(9, 0)
    '24:00:00' -> time(0, 0)
    """
    if not isinstance(s, str) or not s.strip():
        return None

    s = s.strip()
    if s.startswith("24:"):
        return dtime(0, 0)
    try:
        return dtime.fromisoformat(s)
    except ValueError:
        return None


def format_simple_time(t: dtime) -> str:
    """
    time(9, 0) -> '9:00 AM', time(0, 0) -> '12:00 AM'
    """
    hour12 = t.hour % 12 or 12
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{hour12}:{t.minute:02d} {suffix}"


def format_check_in_time(dt: datetime) -> str:
    """
    datetime(2024, 1, 5, 9, 30) -> 'January 5, 9:30 AM'
    """
    return f"{dt.strftime('%B')} {dt.day}, {format_simple_time(dt.time())}"
