"""Request body validation for the availability endpoint."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from workshop_availability.schemas.availability_schema import (
    AvailabilityRequest,
    ValidationErrorDetail,
)
from workshop_availability.utils import ISO_DATE_PATTERN, parse_iso_date

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of validating a raw request body."""

    valid: bool
    data: Optional[AvailabilityRequest] = None
    errors: list[ValidationErrorDetail] = field(default_factory=list)


def _string_entries(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _validate_start_date(value: Any) -> Optional[str]:
    """Return an error message for a bad startDate, or None if it is fine."""
    if not isinstance(value, str):
        return "startDate must be a string (YYYY-MM-DD)"
    if not ISO_DATE_PATTERN.fullmatch(value):
        return "startDate must be YYYY-MM-DD"
    try:
        parse_iso_date(value)
    except ValueError:
        return "startDate must be a valid date"
    return None


def validate_availability_request(body: Any) -> ValidationResult:
    """
    Validate a decoded JSON body.

    ``services`` and ``repairs`` must both be arrays; non-string entries are
    dropped and at least one id must remain. ``startDate`` is optional.
    """
    if not isinstance(body, dict):
        return ValidationResult(
            valid=False,
            errors=[ValidationErrorDetail(field="body", message="Request body must be a JSON object")],
        )

    errors: list[ValidationErrorDetail] = []
    if not isinstance(body.get("services"), list):
        errors.append(ValidationErrorDetail(
            field="services", message="services must be an array of strings"
        ))
    if not isinstance(body.get("repairs"), list):
        errors.append(ValidationErrorDetail(
            field="repairs", message="repairs must be an array of strings"
        ))

    services = _string_entries(body.get("services"))
    repairs = _string_entries(body.get("repairs"))
    if not services and not repairs:
        errors.append(ValidationErrorDetail(
            field="request", message="At least one service or repair must be requested"
        ))

    start_date = body.get("startDate")
    if start_date is not None:
        problem = _validate_start_date(start_date)
        if problem:
            errors.append(ValidationErrorDetail(field="startDate", message=problem))

    if errors:
        logger.debug("Rejected availability request: %s", [e.field for e in errors])
        return ValidationResult(valid=False, errors=errors)

    return ValidationResult(
        valid=True,
        data=AvailabilityRequest(services=services, repairs=repairs, start_date=start_date),
    )
