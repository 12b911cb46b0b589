"""Track file loader.

Builds a Track and its users from a YAML description:

    name: Aprendiendo Kotlin
    items:
      - {name: Conociendo Kotlin, level: basic, duration: 60}
    users:
      - name: Hebert
        enrolled: true
        studied: [Conociendo Kotlin]

Validation rules:
- duration >= 0, level one of basic/intermediate/advanced
- item names and user names are unique within the file
- studied entries must name an item declared in the file
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError

from tracks.core.content import ContentItem, Level
from tracks.core.track import Track
from tracks.core.user import User

logger = structlog.get_logger(__name__)


class TrackLoadError(Exception):
    """Raised when a track description is invalid."""

    pass


# =============================================================================
# FILE SCHEMA
# =============================================================================


class ItemSpec(BaseModel):
    """A content item entry."""

    name: str = Field(..., min_length=1)
    level: Level
    duration: int = Field(..., ge=0)


class UserSpec(BaseModel):
    """A user entry."""

    name: str = Field(..., min_length=1)
    enrolled: bool = True
    studied: list[str] = Field(default_factory=list)


class TrackFile(BaseModel):
    """Top-level track description."""

    name: str = Field(..., min_length=1)
    items: list[ItemSpec] = Field(default_factory=list)
    users: list[UserSpec] = Field(default_factory=list)


# =============================================================================
# BUILDING
# =============================================================================


@dataclass
class TrackBundle:
    """A built track plus every user declared alongside it."""

    track: Track
    users: dict[str, User] = field(default_factory=dict)
    items: dict[str, ContentItem] = field(default_factory=dict)


def _unique(names: list[str], kind: str) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise TrackLoadError(f"{kind} duplicado: '{name}'")
        seen.add(name)


def build_track(data: dict[str, Any]) -> TrackBundle:
    """Build a track and its users from a parsed description.

    Args:
        data: Dictionary following the track file schema

    Returns:
        TrackBundle with the track, users and items keyed by name.

    Raises:
        TrackLoadError: If the description is invalid
    """
    try:
        spec = TrackFile.model_validate(data)
    except ValidationError as e:
        raise TrackLoadError(f"Formación inválida: {e}") from e

    _unique([i.name for i in spec.items], "Contenido")
    _unique([u.name for u in spec.users], "Usuario")

    items = {
        i.name: ContentItem(name=i.name, level=i.level, duration=i.duration)
        for i in spec.items
    }
    track = Track(spec.name)
    track.add_content(*items.values())

    users: dict[str, User] = {}
    for uspec in spec.users:
        user = User(uspec.name)
        for item_name in uspec.studied:
            if item_name not in items:
                raise TrackLoadError(
                    f"El usuario '{uspec.name}' estudió un contenido desconocido: "
                    f"'{item_name}'"
                )
            user.study(items[item_name])
        if uspec.enrolled:
            track.enroll(user)
        users[user.name] = user

    logger.debug(
        "track_built",
        track=track.name,
        items=len(items),
        users=len(users),
    )
    return TrackBundle(track=track, users=users, items=items)


def load_track_file(path: Path) -> TrackBundle:
    """Load a track from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        TrackLoadError: If the file is not valid YAML or not a valid track
    """
    if not path.exists():
        raise FileNotFoundError(f"Archivo de formación no encontrado: {path}")

    logger.debug("loading_track_file", path=str(path))
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise TrackLoadError(f"YAML inválido en {path}: {e}") from e

    if not isinstance(data, dict):
        raise TrackLoadError(f"{path} no contiene una formación")

    return build_track(data)


# =============================================================================
# DEMO SCENARIO
# =============================================================================

DEMO_TRACK: dict[str, Any] = {
    "name": "Aprendiendo Kotlin en la práctica con su documentación oficial",
    "items": [
        {"name": "Conociendo Kotlin y su documentación oficial", "level": "basic", "duration": 60},
        {"name": "Introducción práctica al lenguaje Kotlin", "level": "basic", "duration": 120},
        {"name": "Estructuras de control de flujo y colecciones en Kotlin", "level": "basic", "duration": 120},
        {"name": "Orientación a objetos y tipos de clases con Kotlin", "level": "basic", "duration": 120},
        {"name": "El poder de las funciones en Kotlin", "level": "basic", "duration": 120},
        {"name": "Manejo de excepciones en Kotlin", "level": "intermediate", "duration": 120},
    ],
    "users": [
        {"name": "Hebert", "studied": ["Conociendo Kotlin y su documentación oficial"]},
        {"name": "Maria"},
        {"name": "Joao", "enrolled": False},
    ],
}
