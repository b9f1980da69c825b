"""Tests for slot summaries and deduplication."""

import pytest

from workshop_availability.availability.slots import (
    AvailabilityError,
    EmptyScheduleError,
    SlotCollector,
    build_slot,
)
from workshop_availability.schemas.availability_schema import ScheduledJob
from workshop_availability.schemas.catalog_schema import JobKind


def make_scheduled(
    name: str = "MOT",
    day: str = "2026-02-09",
    start: int = 9,
    end: int = 15,
    kind: JobKind = JobKind.SERVICE,
    bay: str = "Bay-1",
) -> ScheduledJob:
    return ScheduledJob(
        job_name=name, job_type=kind, bay_id=bay, date=day,
        start_hour=start, end_hour=end, duration=end - start,
    )


class TestBuildSlot:
    def test_single_day_slot(self):
        slot = build_slot([
            make_scheduled("MOT", start=9, end=15),
            make_scheduled("Brakes", start=15, end=16, kind=JobKind.REPAIR),
        ])
        assert slot.check_in == "2026-02-09T09:00"
        assert slot.check_out == "2026-02-09T16:00"
        assert slot.total_work_hours == 7
        assert slot.total_days == 1
        assert [j.job_name for j in slot.schedule] == ["MOT", "Brakes"]

    def test_multi_day_span_is_inclusive(self):
        slot = build_slot([
            make_scheduled("MOT", day="2026-02-13"),
            make_scheduled("ADR", day="2026-02-16"),
        ])
        assert slot.check_out == "2026-02-16T15:00"
        assert slot.total_days == 4
        assert slot.total_work_hours == 12

    def test_span_across_month_end(self):
        slot = build_slot([
            make_scheduled("MOT", day="2026-02-27"),
            make_scheduled("ADR", day="2026-03-02"),
        ])
        assert slot.total_days == 4

    def test_empty_schedule_is_an_error(self):
        with pytest.raises(EmptyScheduleError, match="empty schedule"):
            build_slot([])

    def test_empty_schedule_error_is_availability_error(self):
        assert issubclass(EmptyScheduleError, AvailabilityError)


class TestSlotCollector:
    def test_collects_distinct_slots_in_order(self):
        collector = SlotCollector()
        assert collector.add([make_scheduled(day="2026-02-09")]) is True
        assert collector.add([make_scheduled(day="2026-02-10")]) is True
        assert [s.check_in for s in collector.slots] == ["2026-02-09T09:00", "2026-02-10T09:00"]

    def test_identical_check_in_and_out_kept_once(self):
        collector = SlotCollector()
        collector.add([make_scheduled(day="2026-02-09")])
        assert collector.add([make_scheduled(day="2026-02-09", bay="Bay-2")]) is False
        assert len(collector) == 1
        assert collector.slots[0].schedule[0].bay_id == "Bay-1"

    def test_same_check_in_different_check_out_kept(self):
        collector = SlotCollector()
        collector.add([make_scheduled(start=9, end=15)])
        collector.add([make_scheduled(start=9, end=12)])
        assert len(collector) == 2

    def test_slots_property_is_a_copy(self):
        collector = SlotCollector()
        collector.add([make_scheduled()])
        collector.slots.clear()
        assert len(collector) == 1

    def test_empty_placement_raises(self):
        with pytest.raises(EmptyScheduleError):
            SlotCollector().add([])
