"""
Shared fixtures for the offices backend test suite.

Locations are built as FHIR-shaped dicts and validated into pydantic models,
the same way the FHIR client produces them.
"""

import pytest

from fhir_api.models import Location
from tests.utils import FIXED_NOW, location_resource


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def make_location():
    def _make(**kwargs):
        return Location.model_validate(location_resource(**kwargs))

    return _make


@pytest.fixture
def empty_schedule():
    return {"scheduleOverrides": {}, "closures": []}
