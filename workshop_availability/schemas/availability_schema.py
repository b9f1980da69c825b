"""Availability request and response models.

Responses serialise with camelCase keys (``checkIn``, ``totalWorkHours``,
``missingServicesOrRepairs``) to match the public API.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from workshop_availability.schemas.catalog_schema import JobKind


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AvailabilityRequest(ApiModel):
    """Validated availability query."""
    services: list[str] = Field(default_factory=list)
    repairs: list[str] = Field(default_factory=list)
    start_date: Optional[str] = None


class ScheduledJob(ApiModel):
    """One job placed on a bay, on a date, between two whole hours."""
    job_name: str
    job_type: JobKind
    bay_id: str
    date: str
    start_hour: int
    end_hour: int
    duration: int


class AvailableSlot(ApiModel):
    """One complete placement of every requested job at a workshop."""
    check_in: str
    check_out: str
    total_work_hours: int
    total_days: int
    schedule: list[ScheduledJob] = Field(default_factory=list)


class WorkshopAvailabilityResult(ApiModel):
    """Outcome for a single workshop."""
    workshop_id: str
    workshop_name: str
    can_fulfill_request: bool
    missing_services_or_repairs: Optional[list[str]] = None
    available_slots: list[AvailableSlot] = Field(default_factory=list)


class RequestSummary(ApiModel):
    services: list[str]
    repairs: list[str]
    total_requested_hours: int
    start_date: str
    end_date: str


class AvailabilityResponse(ApiModel):
    """Full availability query result."""
    success: Literal[True] = True
    request: RequestSummary
    results: list[WorkshopAvailabilityResult] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        """Wire representation: camelCase keys, absent optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ValidationErrorDetail(ApiModel):
    field: str
    message: str


class ErrorResponse(ApiModel):
    """Body returned for 4xx/5xx responses."""
    success: Literal[False] = False
    error: str
    message: Optional[str] = None
    details: Optional[list[ValidationErrorDetail]] = None
