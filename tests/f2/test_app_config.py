"""Tests for app configuration.

Tests the configuration loading, defaults and the tracks directory override.
"""

from pathlib import Path

import pytest

from tracks.config import app_config
from tracks.config.app_config import (
    AppConfig,
    DisplayConfig,
    TRACKS_DIR_ENV,
    clear_config_cache,
    get_tracks_dir,
    load_app_config,
)


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch) -> Path:
    """Point CONFIG_FILE at a temporary path (not created)."""
    path = tmp_path / "app_config_v1.yaml"
    monkeypatch.setattr(app_config, "CONFIG_FILE", path)
    return path


class TestLoadAppConfig:
    """Tests for load_app_config function."""

    def test_defaults_when_file_missing(self, config_file):
        """Missing file yields default settings."""
        config = load_app_config()

        assert isinstance(config, AppConfig)
        assert config.display == DisplayConfig()
        assert config.display.progress_decimals == 2
        assert config.paths["tracks_dir"] == "data/tracks"

    def test_load_config_from_yaml(self, config_file):
        """Values in the YAML file override defaults."""
        config_file.write_text(
            "display:\n  progress_decimals: 1\n  duration_unit: h\n",
            encoding="utf-8",
        )

        config = load_app_config()

        assert config.display.progress_decimals == 1
        assert config.display.duration_unit == "h"
        assert config.paths["tracks_dir"] == "data/tracks"

    def test_empty_file_uses_defaults(self, config_file):
        config_file.write_text("", encoding="utf-8")
        assert load_app_config().display.progress_decimals == 2

    def test_config_is_cached(self, config_file):
        """Second load returns the cached object until forced."""
        first = load_app_config()
        config_file.write_text("display:\n  progress_decimals: 4\n", encoding="utf-8")

        assert load_app_config() is first
        assert load_app_config(force_reload=True).display.progress_decimals == 4

    def test_clear_config_cache(self, config_file):
        first = load_app_config()
        clear_config_cache()
        assert load_app_config() is not first


class TestGetTracksDir:
    """Tests for get_tracks_dir."""

    def test_uses_configured_path(self, config_file, monkeypatch):
        monkeypatch.delenv(TRACKS_DIR_ENV, raising=False)
        config_file.write_text("paths:\n  tracks_dir: otras/formaciones\n", encoding="utf-8")

        assert get_tracks_dir() == Path("otras/formaciones")

    def test_environment_override(self, config_file, monkeypatch, tmp_path):
        monkeypatch.setenv(TRACKS_DIR_ENV, str(tmp_path))
        assert get_tracks_dir() == tmp_path
