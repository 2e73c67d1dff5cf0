from .models import (
    Address,
    Extension,
    HoursOfOperation,
    Location,
    format_address,
)

from .fhir_client import FhirConfigError, MalformedResourceError, search_locations, get_location

__all__ = [
    "Address",
    "Extension",
    "HoursOfOperation",
    "Location",
    "format_address",
    "FhirConfigError",
    "MalformedResourceError",
    "search_locations",
    "get_location",
]
