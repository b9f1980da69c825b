"""Shared test fixtures and helpers."""

from datetime import date
from pathlib import Path
from typing import Optional

import pytest

from workshop_availability.catalog.loader import get_workshop_config, reset_cache
from workshop_availability.schemas.catalog_schema import (
    Bay,
    BayCapability,
    JobKind,
    RepairDef,
    ServiceDef,
    WorkingHours,
    Workshop,
    WorkshopConfig,
)

REPO_ROOT = Path(__file__).resolve().parent.parent
SAMPLE_CATALOG = REPO_ROOT / "workshops.config.json"

WEEKDAYS = [1, 2, 3, 4, 5]
ALL_DAYS = [0, 1, 2, 3, 4, 5, 6]

# 2026-02-09 is a Monday.
MONDAY = date(2026, 2, 9)
FRIDAY = date(2026, 2, 13)
SUNDAY = date(2026, 2, 8)


def make_capability(kind: str, job_id: str, days: Optional[list[int]] = None) -> BayCapability:
    return BayCapability(kind=JobKind(kind), id=job_id, days=WEEKDAYS if days is None else days)


def make_workshop(
    workshop_id: str = "w1",
    name: str = "Test Workshop",
    bays: Optional[list[Bay]] = None,
    start_hour: int = 9,
    end_hour: int = 17,
    working_days: Optional[list[int]] = None,
) -> Workshop:
    """Helper to create a Workshop; defaults to one bay doing MOT and Brakes on weekdays."""
    if bays is None:
        bays = [
            Bay(id="Bay-1", capabilities=[
                make_capability("service", "MOT"),
                make_capability("repair", "Brakes"),
            ])
        ]
    return Workshop(
        id=workshop_id,
        name=name,
        working_hours=WorkingHours(start_hour=start_hour, end_hour=end_hour),
        working_days=WEEKDAYS if working_days is None else working_days,
        bays=bays,
    )


def make_config(workshops: Optional[list[Workshop]] = None) -> WorkshopConfig:
    """Catalog with MOT (6h), ADR (6h), CFK (3h) and Brakes (1h, needs MOT)."""
    return WorkshopConfig(
        services=[
            ServiceDef(id="MOT", name="MOT", duration_hours=6),
            ServiceDef(id="ADR", name="ADR", duration_hours=6),
            ServiceDef(id="CFK", name="Cabin Filter Check", duration_hours=3),
        ],
        repairs=[
            RepairDef(id="Brakes", name="Brakes", duration_hours=1, dependency="MOT"),
            RepairDef(id="Body", name="Body Work", duration_hours=5),
        ],
        workshops=workshops if workshops is not None else [make_workshop()],
    )


@pytest.fixture
def minimal_config() -> WorkshopConfig:
    return make_config()


@pytest.fixture
def workshop() -> Workshop:
    return make_workshop()


@pytest.fixture
def sample_catalog():
    """Load the bundled catalog into the process cache; clear it afterwards."""
    reset_cache()
    config = get_workshop_config(SAMPLE_CATALOG)
    yield config
    reset_cache()
