"""
Test helpers: FHIR-shaped Location payloads.
"""

import json
from datetime import datetime

from office_hours.schedule_extension import SCHEDULE_EXTENSION_URL


# Wednesday
FIXED_NOW = datetime(2025, 3, 12, 10, 30)

WEEKDAY_HOURS = [
    {"daysOfWeek": ["mon"], "openingTime": "08:00:00", "closingTime": "18:00:00"},
    {"daysOfWeek": ["tue"], "openingTime": "08:00:00", "closingTime": "18:00:00"},
    {"daysOfWeek": ["wed"], "openingTime": "09:00:00", "closingTime": "17:00:00"},
    {"daysOfWeek": ["thu"], "openingTime": "08:00:00", "closingTime": "18:00:00"},
    {"daysOfWeek": ["fri"], "openingTime": "08:00:00", "closingTime": "16:00:00"},
]


def location_resource(
    location_id="loc-1",
    name="Spring Valley",
    state="TX",
    hours=None,
    schedule=None,
    raw_schedule=None,
):
    resource = {
        "resourceType": "Location",
        "id": location_id,
        "name": name,
        "address": {
            "line": ["100 Main St"],
            "city": "Austin",
            "state": state,
            "postalCode": "78701",
        },
        "hoursOfOperation": WEEKDAY_HOURS if hours is None else hours,
        "extension": [],
    }
    if schedule is not None:
        raw_schedule = json.dumps(schedule)
    if raw_schedule is not None:
        resource["extension"].append({"url": SCHEDULE_EXTENSION_URL, "valueString": raw_schedule})
    return resource
