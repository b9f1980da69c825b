from workshop_availability.availability.capability import CapabilityCheck, check_capabilities
from workshop_availability.availability.date_window import (
    HORIZON_DAYS,
    StartDateWindow,
    horizon_end,
    iter_start_dates,
)
from workshop_availability.availability.engine import compute_availability
from workshop_availability.availability.job_order import Job, build_job_order
from workshop_availability.availability.scheduler import Cursor, place_job, schedule_jobs
from workshop_availability.availability.slots import (
    AvailabilityError,
    EmptyScheduleError,
    SlotCollector,
    build_slot,
)

__all__ = [
    "compute_availability",
    "build_job_order", "Job",
    "check_capabilities", "CapabilityCheck",
    "StartDateWindow", "iter_start_dates", "horizon_end", "HORIZON_DAYS",
    "schedule_jobs", "place_job", "Cursor",
    "build_slot", "SlotCollector",
    "AvailabilityError", "EmptyScheduleError",
]
