# fhir_api/models.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FhirModel(BaseModel):
    # FHIR 리소스는 필드가 많으므로 모르는 필드는 무시
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Extension(FhirModel):
    url: str
    value_string: Optional[str] = Field(default=None, alias="valueString")


class Address(FhirModel):
    line: List[str] = Field(default_factory=list)
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    country: Optional[str] = None


class HoursOfOperation(FhirModel):
    """
    Location.hoursOfOperation 한 항목
    - days_of_week: ["mon"] 처럼 요일 코드
    - opening_time / closing_time: FHIR time 문자열 ('09:00:00')
    """
    days_of_week: List[str] = Field(default_factory=list, alias="daysOfWeek")
    all_day: Optional[bool] = Field(default=None, alias="allDay")
    opening_time: Optional[str] = Field(default=None, alias="openingTime")
    closing_time: Optional[str] = Field(default=None, alias="closingTime")


class Location(FhirModel):
    resource_type: str = Field(default="Location", alias="resourceType")
    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[Address] = None
    hours_of_operation: List[HoursOfOperation] = Field(default_factory=list, alias="hoursOfOperation")
    extension: List[Extension] = Field(default_factory=list)

    def find_extension(self, url: str) -> Optional[Extension]:
        return next((ext for ext in self.extension if ext.url == url), None)


def format_address(address: Optional[Address]) -> str:
    """
    '123 Main St, Suite 4, Austin, TX 78701' 형태로 합친다.
    """
    if address is None:
        return ""

    parts = [line.strip() for line in address.line if line and line.strip()]
    if address.city:
        parts.append(address.city)

    region = " ".join(p for p in (address.state, address.postal_code) if p)
    if region:
        parts.append(region)

    return ", ".join(parts)
