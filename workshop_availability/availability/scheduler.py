"""
Greedy forward-fill placement of an ordered job list into bay capacity.

Jobs run one after another (never in parallel), each on the first bay that
can take it. A time cursor only moves forward, so a prerequisite service
always finishes no later than the repair that depends on it starts.

Usage:
    schedule = schedule_jobs(workshop, jobs, date(2026, 2, 9))
    if schedule is None:
        ...  # nothing fits when starting on that date
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from workshop_availability.availability.date_window import HORIZON_DAYS
from workshop_availability.availability.job_order import Job
from workshop_availability.schemas.availability_schema import ScheduledJob
from workshop_availability.schemas.catalog_schema import Workshop
from workshop_availability.utils import day_of_week

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    """Earliest point in time the next job may start."""

    day: date
    hour: int

    def advance_to(self, day: date, hour: int, workshop: Workshop) -> "Cursor":
        """Cursor after a job ending at ``hour``; rolls to the next morning at closing."""
        hours = workshop.working_hours
        if hour >= hours.end_hour:
            return Cursor(day + timedelta(days=1), hours.start_hour)
        return Cursor(day, hour)


def place_job(
    workshop: Workshop, job: Job, cursor: Cursor
) -> Optional[tuple[ScheduledJob, Cursor]]:
    """Place one job at the earliest bay/day/hour at or after the cursor.

    Only the first examined day starts at the cursor hour; every later day
    starts at opening. Returns the scheduled job and the new cursor, or
    None when no day within the horizon has a usable bay with enough hours.
    """
    hours = workshop.working_hours
    working_days = set(workshop.working_days)

    for offset in range(HORIZON_DAYS):
        day = cursor.day + timedelta(days=offset)
        weekday = day_of_week(day)
        if weekday not in working_days:
            continue
        start = cursor.hour if offset == 0 else hours.start_hour
        end = start + job.duration_hours
        if end > hours.end_hour:
            continue
        bay = next(
            (b for b in workshop.bays if b.supports(job.kind, job.id, weekday)),
            None,
        )
        if bay is None:
            continue
        scheduled = ScheduledJob(
            job_name=job.name,
            job_type=job.kind,
            bay_id=bay.id,
            date=day.isoformat(),
            start_hour=start,
            end_hour=end,
            duration=job.duration_hours,
        )
        return scheduled, cursor.advance_to(day, end, workshop)

    return None


def schedule_jobs(
    workshop: Workshop,
    jobs: list[Job],
    start_date: date,
    start_hour: Optional[int] = None,
) -> Optional[list[ScheduledJob]]:
    """Try to place every job in order, starting at ``start_date``.

    ``start_hour`` defaults to the workshop's opening hour. Returns one
    ScheduledJob per input job in the same order, or None if any job cannot
    be placed; there is no backtracking to earlier jobs.
    """
    if start_hour is None:
        start_hour = workshop.working_hours.start_hour
    cursor = Cursor(start_date, start_hour)
    schedule: list[ScheduledJob] = []

    for job in jobs:
        placed = place_job(workshop, job, cursor)
        if placed is None:
            logger.debug(
                "Workshop %s: no room for %s when starting %s",
                workshop.id, job.id, start_date.isoformat(),
            )
            return None
        scheduled, cursor = placed
        schedule.append(scheduled)

    return schedule
