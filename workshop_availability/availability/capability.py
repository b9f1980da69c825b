"""Per-workshop capability check: can some bay perform every requested job?"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from workshop_availability.schemas.catalog_schema import JobKind, Workshop, WorkshopConfig

logger = logging.getLogger(__name__)


@dataclass
class CapabilityCheck:
    """Feasibility verdict for one workshop."""

    feasible: bool
    missing: list[str] = field(default_factory=list)


def supported_ids(workshop: Workshop, kind: JobKind) -> set[str]:
    """Ids of the given kind that at least one bay supports, on any weekday."""
    return {
        cap.id
        for bay in workshop.bays
        for cap in bay.capabilities
        if cap.kind == kind
    }


def check_capabilities(
    workshop: Workshop,
    config: WorkshopConfig,
    service_ids: Iterable[str],
    repair_ids: Iterable[str],
) -> CapabilityCheck:
    """List requested services and repairs no bay in the workshop supports.

    Checks the raw request, so a dependency service that was only pulled in
    by a repair is not required here. Missing entries use the catalog
    display name, or the raw id when the catalog does not know it.
    """
    services = supported_ids(workshop, JobKind.SERVICE)
    repairs = supported_ids(workshop, JobKind.REPAIR)
    missing: list[str] = []

    for service_id in service_ids:
        if service_id not in services:
            known = config.find_service(service_id)
            missing.append(known.name if known else service_id)

    for repair_id in repair_ids:
        if repair_id not in repairs:
            known = config.find_repair(repair_id)
            missing.append(known.name if known else repair_id)

    if missing:
        logger.debug("Workshop %s cannot perform: %s", workshop.id, ", ".join(missing))
    return CapabilityCheck(feasible=not missing, missing=missing)
