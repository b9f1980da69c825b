"""
Centralized configuration with environment variable overrides.

Server, catalog location and logging settings live here. The workshop
catalog itself (services, repairs, workshops, bays) is loaded separately
by ``workshop_availability.catalog.loader``.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from workshop_availability.logging_context import RequestIdFilter

load_dotenv()

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CATALOG_FILE = "workshops.config.json"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s [%(request_id)s]: %(message)s"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _default_catalog_path() -> str:
    """Repository-root catalog if present, otherwise relative to the cwd."""
    bundled = PROJECT_ROOT / DEFAULT_CATALOG_FILE
    if bundled.exists():
        return str(bundled)
    return str(Path.cwd() / DEFAULT_CATALOG_FILE)


@dataclass(frozen=True)
class ServerConfig:
    """HTTP listener settings."""

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = _safe_int("PORT", "3000")


@dataclass(frozen=True)
class CatalogConfig:
    """Where the read-only workshop catalog lives."""

    path: str = os.getenv("WORKSHOP_CONFIG_PATH") or _default_catalog_path()


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    server: ServerConfig = field(default_factory=ServerConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    service_name: str = os.getenv("SERVICE_NAME", "workshop-availability-service")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not 1 <= config.server.port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {config.server.port}")
    if not config.catalog.path.strip():
        raise ValueError("WORKSHOP_CONFIG_PATH must not be empty")
    if not config.service_name.strip():
        raise ValueError("SERVICE_NAME must not be empty")
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"LOG_LEVEL is not a known level: {config.log_level!r}")


def _configure_logging(level_name: str) -> None:
    handler = logging.StreamHandler()
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        handlers=[handler],
    )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    _configure_logging(config.log_level)
    logger.info("Configuration loaded for '%s'", config.service_name)
    return config


# Singleton instance
settings = load_config()
