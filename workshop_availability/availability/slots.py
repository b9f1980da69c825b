"""Turn completed placements into slot summaries, dropping duplicates."""

import logging
from datetime import date

from workshop_availability.schemas.availability_schema import AvailableSlot, ScheduledJob
from workshop_availability.utils import format_date_hour, inclusive_day_span

logger = logging.getLogger(__name__)


class AvailabilityError(Exception):
    """Base class for availability engine failures."""


class EmptyScheduleError(AvailabilityError):
    """Raised when asked to summarise a placement with no jobs in it."""


def build_slot(schedule: list[ScheduledJob]) -> AvailableSlot:
    """Summarise a placement: check-in/out, total hours and day span."""
    if not schedule:
        raise EmptyScheduleError("Cannot build a slot from an empty schedule")
    first, last = schedule[0], schedule[-1]
    first_day = date.fromisoformat(first.date)
    last_day = date.fromisoformat(last.date)
    return AvailableSlot(
        check_in=format_date_hour(first_day, first.start_hour),
        check_out=format_date_hour(last_day, last.end_hour),
        total_work_hours=sum(job.duration for job in schedule),
        total_days=inclusive_day_span(first_day, last_day),
        schedule=list(schedule),
    )


class SlotCollector:
    """
    Accumulates one workshop's slots in candidate-date order.

    Placements sharing a (check_in, check_out) pair with an earlier slot
    are discarded; the first one wins.
    """

    def __init__(self) -> None:
        self._slots: list[AvailableSlot] = []
        self._seen: set[tuple[str, str]] = set()

    def add(self, schedule: list[ScheduledJob]) -> bool:
        """Record a placement. Returns False if it duplicated an earlier slot."""
        slot = build_slot(schedule)
        key = (slot.check_in, slot.check_out)
        if key in self._seen:
            logger.debug("Duplicate slot %s -> %s skipped", *key)
            return False
        self._seen.add(key)
        self._slots.append(slot)
        return True

    @property
    def slots(self) -> list[AvailableSlot]:
        return list(self._slots)

    def __len__(self) -> int:
        return len(self._slots)
