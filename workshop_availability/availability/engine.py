"""
Availability computation: which workshops can do the requested work, and when.

Resolves the job order once per request, then for each workshop checks bay
capabilities and, when every requested job is supported, tries a placement
from each working day in the 60-day horizon.
"""

import logging
from datetime import date
from typing import Optional

from workshop_availability.availability.capability import check_capabilities
from workshop_availability.availability.date_window import StartDateWindow, horizon_end
from workshop_availability.availability.job_order import Job, build_job_order, total_hours
from workshop_availability.availability.scheduler import schedule_jobs
from workshop_availability.availability.slots import SlotCollector
from workshop_availability.schemas.availability_schema import (
    AvailabilityRequest,
    AvailabilityResponse,
    AvailableSlot,
    RequestSummary,
    WorkshopAvailabilityResult,
)
from workshop_availability.schemas.catalog_schema import Workshop, WorkshopConfig
from workshop_availability.utils import parse_iso_date, utc_today

logger = logging.getLogger(__name__)


def resolve_period_start(
    request: AvailabilityRequest,
    period_start: Optional[date] = None,
    today: Optional[date] = None,
) -> date:
    """First day of the query window; never earlier than today."""
    today = today or utc_today()
    if period_start is None and request.start_date:
        period_start = parse_iso_date(request.start_date)
    if period_start is None or period_start < today:
        return today
    return period_start


def compute_workshop_slots(
    workshop: Workshop, jobs: list[Job], period_start: date
) -> list[AvailableSlot]:
    """Deduplicated slots for one workshop, in candidate start-date order."""
    if not jobs:
        logger.warning("Workshop %s: nothing to schedule", workshop.id)
        return []

    collector = SlotCollector()
    for start_date in StartDateWindow(period_start, workshop):
        schedule = schedule_jobs(workshop, jobs, start_date)
        if schedule is not None:
            collector.add(schedule)

    logger.debug("Workshop %s: %d slot(s) found", workshop.id, len(collector))
    return collector.slots


def compute_availability(
    config: WorkshopConfig,
    request: AvailabilityRequest,
    period_start: Optional[date] = None,
    *,
    today: Optional[date] = None,
) -> AvailabilityResponse:
    """Compute availability for every configured workshop.

    Args:
        config: The read-only workshop catalog.
        request: Requested service and repair ids, optional start date.
        period_start: Overrides ``request.start_date`` when given.
        today: Clock reading used for clamping; defaults to the UTC date.
    """
    start_date = resolve_period_start(request, period_start, today)
    end_date = horizon_end(start_date)
    jobs = build_job_order(config, request.services, request.repairs)

    results: list[WorkshopAvailabilityResult] = []
    for workshop in config.workshops:
        check = check_capabilities(workshop, config, request.services, request.repairs)
        slots = compute_workshop_slots(workshop, jobs, start_date) if check.feasible else []
        results.append(
            WorkshopAvailabilityResult(
                workshop_id=workshop.id,
                workshop_name=workshop.name,
                can_fulfill_request=check.feasible,
                missing_services_or_repairs=check.missing or None,
                available_slots=slots,
            )
        )

    logger.info(
        "Availability for services=%s repairs=%s from %s: %d/%d workshop(s) can fulfill",
        request.services,
        request.repairs,
        start_date.isoformat(),
        sum(1 for r in results if r.can_fulfill_request),
        len(results),
    )

    return AvailabilityResponse(
        request=RequestSummary(
            services=list(request.services),
            repairs=list(request.repairs),
            total_requested_hours=total_hours(jobs),
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
        ),
        results=results,
    )
