"""Configuration package for learning tracks."""

from tracks.config.app_config import (
    AppConfig,
    DisplayConfig,
    clear_config_cache,
    configure_logging,
    get_tracks_dir,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "DisplayConfig",
    "clear_config_cache",
    "configure_logging",
    "get_tracks_dir",
    "load_app_config",
]
