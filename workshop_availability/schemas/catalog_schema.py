"""Workshop catalog models: services, repairs, workshops and their bays.

The catalog file uses camelCase keys (``durationHours``, ``workingDays``);
weekday indices follow the file's convention, 0 = Sunday ... 6 = Saturday.
"""

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Weekday = Annotated[int, Field(ge=0, le=6)]


class JobKind(str, Enum):
    SERVICE = "service"
    REPAIR = "repair"


class CatalogModel(BaseModel):
    """Immutable base for everything read from the catalog file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ServiceDef(CatalogModel):
    """A standalone maintenance service with a fixed duration."""
    id: str
    name: str
    duration_hours: int = Field(ge=1)


class RepairDef(CatalogModel):
    """A repair, optionally requiring one service to be completed first."""
    id: str
    name: str
    duration_hours: int = Field(ge=1)
    dependency: Optional[str] = None


class BayCapability(CatalogModel):
    """What one bay can do (a service or repair id) and on which weekdays."""
    kind: JobKind = Field(alias="type")
    id: str
    days: list[Weekday] = Field(default_factory=list)


class Bay(CatalogModel):
    id: str
    capabilities: list[BayCapability] = Field(default_factory=list)

    def supports(self, kind: JobKind, job_id: str, weekday: int) -> bool:
        """True if this bay can perform the job on the given weekday."""
        return any(
            cap.kind == kind and cap.id == job_id and weekday in cap.days
            for cap in self.capabilities
        )


class WorkingHours(CatalogModel):
    """Opening and closing hour, applied uniformly to every working day."""
    start_hour: int = Field(ge=0, le=24)
    end_hour: int = Field(ge=0, le=24)

    @model_validator(mode="after")
    def _check_order(self) -> "WorkingHours":
        if self.start_hour >= self.end_hour:
            raise ValueError(
                f"startHour must be before endHour, got {self.start_hour}-{self.end_hour}"
            )
        return self


class Workshop(CatalogModel):
    id: str
    name: str
    working_hours: WorkingHours
    working_days: list[Weekday] = Field(default_factory=list)
    bays: list[Bay] = Field(default_factory=list)


class WorkshopConfig(CatalogModel):
    """Complete read-only catalog shared by every request."""
    services: list[ServiceDef] = Field(default_factory=list)
    repairs: list[RepairDef] = Field(default_factory=list)
    workshops: list[Workshop] = Field(default_factory=list)

    def find_service(self, service_id: str) -> Optional[ServiceDef]:
        return next((s for s in self.services if s.id == service_id), None)

    def find_repair(self, repair_id: str) -> Optional[RepairDef]:
        return next((r for r in self.repairs if r.id == repair_id), None)
