from workshop_availability.catalog.loader import (
    WorkshopConfigError,
    get_workshop_config,
    load_workshop_config,
    reset_cache,
)

__all__ = [
    "WorkshopConfigError",
    "get_workshop_config",
    "load_workshop_config",
    "reset_cache",
]
