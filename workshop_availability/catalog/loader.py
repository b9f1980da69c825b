"""
Workshop catalog loading.

The catalog is a JSON file read once per process and cached; nothing in
the service mutates it afterwards.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from workshop_availability.config import settings
from workshop_availability.schemas.catalog_schema import WorkshopConfig

logger = logging.getLogger(__name__)

_cached_config: Optional[WorkshopConfig] = None


class WorkshopConfigError(Exception):
    """Raised when the workshop catalog cannot be loaded or is incomplete."""


def load_workshop_config(path: Union[str, Path]) -> WorkshopConfig:
    """Read and validate a catalog file. Does not touch the cache."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise WorkshopConfigError(f"Workshop config not found: {path}") from None
    except (OSError, json.JSONDecodeError) as e:
        raise WorkshopConfigError(f"Cannot read workshop config {path}: {e}") from e

    try:
        config = WorkshopConfig.model_validate(data)
    except ValidationError as e:
        raise WorkshopConfigError(f"Invalid workshop config {path}: {e}") from e

    logger.info(
        "Loaded workshop config from %s: %d service(s), %d repair(s), %d workshop(s)",
        path.name, len(config.services), len(config.repairs), len(config.workshops),
    )
    return config


def get_workshop_config(path: Union[str, Path, None] = None) -> WorkshopConfig:
    """Return the process-wide catalog, loading it on first use.

    Raises:
        WorkshopConfigError: If the file is unusable or has no workshops or services.
    """
    global _cached_config
    if _cached_config is None:
        _cached_config = load_workshop_config(path or settings.catalog.path)

    config = _cached_config
    if not config.workshops or not config.services:
        raise WorkshopConfigError(
            "Invalid workshop config: workshops and services are required"
        )
    return config


def reset_cache() -> None:
    """Forget the cached catalog. Used by test fixtures for isolation."""
    global _cached_config
    _cached_config = None
