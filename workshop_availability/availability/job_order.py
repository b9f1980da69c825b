"""
Dependency-aware job ordering.

Requested services come first in request order, then requested repairs in
request order. A repair whose prerequisite service has not been added yet
pulls that service in immediately before itself. Every id appears once.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from workshop_availability.schemas.catalog_schema import JobKind, WorkshopConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Job:
    """A single service or repair to place on the calendar."""

    kind: JobKind
    id: str
    name: str
    duration_hours: int


def build_job_order(
    config: WorkshopConfig,
    service_ids: Iterable[str],
    repair_ids: Iterable[str],
) -> list[Job]:
    """Resolve the order in which requested work must be scheduled.

    Unknown ids are dropped here; they still surface as missing in the
    per-workshop capability check.
    """
    services = {s.id: s for s in config.services}
    repairs = {r.id: r for r in config.repairs}
    jobs: list[Job] = []
    seen: set[str] = set()

    def add_service(service_id: str) -> None:
        if service_id in seen or service_id not in services:
            return
        service = services[service_id]
        jobs.append(Job(JobKind.SERVICE, service.id, service.name, service.duration_hours))
        seen.add(service_id)

    for service_id in service_ids:
        add_service(service_id)

    for repair_id in repair_ids:
        if repair_id in seen or repair_id not in repairs:
            continue
        repair = repairs[repair_id]
        if repair.dependency:
            add_service(repair.dependency)
        jobs.append(Job(JobKind.REPAIR, repair.id, repair.name, repair.duration_hours))
        seen.add(repair_id)

    logger.debug("Job order resolved: %s", [job.id for job in jobs])
    return jobs


def total_hours(jobs: Iterable[Job]) -> int:
    return sum(job.duration_hours for job in jobs)
