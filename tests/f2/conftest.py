"""Fixtures for F2 tests - Track files, configuration and CLI."""

from pathlib import Path

import pytest
import structlog

from tracks.config.app_config import TRACKS_DIR_ENV, clear_config_cache

SAMPLE_TRACK_YAML = """\
name: Kotlin básico
items:
  - {name: Conociendo Kotlin, level: basic, duration: 60}
  - {name: Introducción práctica, level: basic, duration: 120}
  - {name: Manejo de excepciones, level: intermediate, duration: 120}
users:
  - name: Hebert
    studied: [Conociendo Kotlin]
  - name: Maria
  - name: Marcos
    studied: [Conociendo Kotlin, Introducción práctica, Manejo de excepciones]
  - name: Joao
    enrolled: false
"""

EMPTY_TRACK_YAML = """\
name: Sin contenidos
users:
  - name: Ana
"""


@pytest.fixture(autouse=True)
def _fresh_config():
    """Each test starts without cached configuration or logging setup."""
    clear_config_cache()
    yield
    clear_config_cache()
    structlog.reset_defaults()


@pytest.fixture
def tracks_dir(tmp_path: Path, monkeypatch) -> Path:
    """Temporary tracks directory wired through TRACKS_DATA_DIR."""
    directory = tmp_path / "tracks"
    directory.mkdir()
    (directory / "kotlin.yaml").write_text(SAMPLE_TRACK_YAML, encoding="utf-8")
    (directory / "vacia.yaml").write_text(EMPTY_TRACK_YAML, encoding="utf-8")
    monkeypatch.setenv(TRACKS_DIR_ENV, str(directory))
    return directory
