"""Core domain model.

Modules:
- content: Level and ContentItem value types
- user: User and mark_studied
- track: Track aggregate, EmptyCatalogError, NotEnrolledError
- track_loader: YAML track files and the built-in demo scenario
"""

from tracks.core.content import ContentItem, Level
from tracks.core.track import EmptyCatalogError, NotEnrolledError, Track
from tracks.core.user import User, mark_studied

__all__ = [
    "ContentItem",
    "Level",
    "Track",
    "EmptyCatalogError",
    "NotEnrolledError",
    "User",
    "mark_studied",
]
