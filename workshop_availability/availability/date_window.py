"""Query horizon and candidate start dates for a workshop."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from workshop_availability.schemas.catalog_schema import Workshop
from workshop_availability.utils import day_of_week

HORIZON_DAYS = 60


def horizon_end(period_start: date) -> date:
    """Last day of the inclusive horizon that begins at ``period_start``."""
    return period_start + timedelta(days=HORIZON_DAYS - 1)


@dataclass(frozen=True)
class StartDateWindow:
    """
    The horizon's calendar days that fall on the workshop's working days.

    Iterating yields dates lazily and always starts again from
    ``period_start``, so one window can be walked any number of times.
    """

    period_start: date
    workshop: Workshop

    def __iter__(self) -> Iterator[date]:
        working_days = set(self.workshop.working_days)
        for offset in range(HORIZON_DAYS):
            candidate = self.period_start + timedelta(days=offset)
            if day_of_week(candidate) in working_days:
                yield candidate


def iter_start_dates(period_start: date, workshop: Workshop) -> Iterator[date]:
    return iter(StartDateWindow(period_start, workshop))
