"""Application configuration loader.

Loads configuration from data/config/app_config_v1.yaml, falling back to
built-in defaults when the file is missing.

Usage:
    from tracks.config.app_config import load_app_config, get_tracks_dir

    config = load_app_config()
    decimals = config.display.progress_decimals
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")

# Environment override for the tracks directory
TRACKS_DIR_ENV = "TRACKS_DATA_DIR"


@dataclass
class DisplayConfig:
    """Presentation settings for the CLI."""

    progress_decimals: int = 2
    duration_unit: str = "min"


@dataclass
class AppConfig:
    """Application-wide configuration."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    paths: dict[str, str] = field(default_factory=dict)


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "display": {
            "progress_decimals": 2,
            "duration_unit": "min",
        },
        "paths": {
            "tracks_dir": "data/tracks",
        },
    }


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    defaults = _get_defaults()

    display_data = data.get("display") or {}
    display = DisplayConfig(
        progress_decimals=int(display_data.get("progress_decimals", 2)),
        duration_unit=display_data.get("duration_unit", "min"),
    )

    paths = dict(defaults["paths"])
    paths.update(data.get("paths") or {})

    return AppConfig(display=display, paths=paths)


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config, or defaults when no file exists.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    if CONFIG_FILE.exists():
        logger.debug("loading_app_config", source=str(CONFIG_FILE))
        data = yaml.safe_load(CONFIG_FILE.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def get_tracks_dir() -> Path:
    """Directory holding track files.

    TRACKS_DATA_DIR takes precedence over the configured path.
    """
    if override := os.environ.get(TRACKS_DIR_ENV):
        return Path(override)
    return Path(load_app_config().paths["tracks_dir"])


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog for CLI use.

    Events go to stderr; only warnings and above unless verbose.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
