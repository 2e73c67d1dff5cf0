# office_hours/schedule_extension.py
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fhir_api.models import Location

SCHEDULE_EXTENSION_URL = "https://fhir.zapehr.com/r4/StructureDefinitions/schedule"


class InvalidScheduleError(ValueError):
    """schedule extension의 valueString이 JSON 객체가 아니거나 scheduleOverrides/closures 형태가 틀림"""


class ClosureType(str, Enum):
    ONE_DAY = "one-day"
    PERIOD = "period"


class ScheduleOverride(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # 시(hour) 단위만 사용, 24 = 하루 끝 / 범위 밖이거나 숫자가 아니면 None
    open: Optional[int] = None
    close: Optional[int] = None

    @field_validator("open", "close", mode="before")
    @classmethod
    def _hour_or_none(cls, v):
        try:
            hour = int(v)
        except (TypeError, ValueError):
            return None
        return hour if 0 <= hour <= 24 else None


class Closure(BaseModel):
    """
    휴무
    - ONE_DAY: start 하루
    - PERIOD: start ~ end
    날짜 문자열은 여기서 파싱하지 않는다 (깨진 날짜, 모르는 type은 resolver에서 조용히 버림)
    """
    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @field_validator("type", "start", "end", mode="before")
    @classmethod
    def _str_or_none(cls, v):
        return v if isinstance(v, str) else None


class Schedule(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    schedule_overrides: Dict[str, ScheduleOverride] = Field(default_factory=dict, alias="scheduleOverrides")
    closures: List[Closure] = Field(default_factory=list)

    @field_validator("schedule_overrides", mode="before")
    @classmethod
    def _overrides_as_dict(cls, v):
        if v is None:
            return {}
        if isinstance(v, dict):
            # 항목이 객체가 아니면 빈 override로 (날짜 키는 살려둔다)
            return {k: (item if isinstance(item, dict) else {}) for k, item in v.items()}
        return v

    @field_validator("closures", mode="before")
    @classmethod
    def _closures_as_list(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return [item for item in v if isinstance(item, dict)]
        return v


def decode_schedule(raw: str) -> Schedule:
    """
    valueString(JSON) -> Schedule
    """
    try:
        return Schedule.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidScheduleError(f"invalid schedule payload: {e.error_count()} error(s)") from e


def get_schedule_extension(location: Location) -> Optional[Schedule]:
    ext = location.find_extension(SCHEDULE_EXTENSION_URL)
    if ext is None or not ext.value_string:
        return None
    return decode_schedule(ext.value_string)
