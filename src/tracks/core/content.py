"""Educational content catalog.

Value types shared by users and tracks:
- Level: difficulty classification (basic, intermediate, advanced)
- ContentItem: one piece of material with a level and a duration

ContentItem compares and hashes by all of its fields, so items built
independently with the same values collapse inside sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Level(Enum):
    """Difficulty level of a content item."""

    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class ContentItem:
    """A unit of educational material."""

    name: str
    level: Level
    duration: int  # minutes

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "level": self.level.value,
            "duration": self.duration,
        }
