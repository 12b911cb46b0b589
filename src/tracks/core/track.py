"""Track aggregate.

A track offers a catalog of content items to the users enrolled in it.

Derived metrics (computed on every access):
- total_duration: sum of the offered items' durations
- dominant_level: most frequent level in the catalog
- progress_for(user): percentage of the catalog the user has studied

Guards:
- Metrics over an empty catalog raise EmptyCatalogError
- Progress for a user outside the enrollment list raises NotEnrolledError
  (checked before the catalog)
"""

from __future__ import annotations

from collections import Counter
from typing import Any

import structlog

from tracks.core.content import ContentItem, Level
from tracks.core.user import User

logger = structlog.get_logger(__name__)


class EmptyCatalogError(Exception):
    """Raised when a metric is requested on a track without content."""

    def __init__(self, track_name: str):
        self.track_name = track_name
        super().__init__(
            f"No hay contenidos educativos vinculados a la formación '{track_name}'"
        )


class NotEnrolledError(Exception):
    """Raised when progress is requested for a user not enrolled in the track."""

    def __init__(self, track_name: str, user_name: str):
        self.track_name = track_name
        self.user_name = user_name
        super().__init__(
            f"El usuario '{user_name}' no está inscrito en la formación '{track_name}'"
        )


class Track:
    """A named collection of content items with enrolled users."""

    def __init__(self, name: str):
        self.name = name
        self._items: set[ContentItem] = set()
        self._enrolled: list[User] = []

    def __repr__(self) -> str:
        return (
            f"Track(name={self.name!r}, items={len(self._items)}, "
            f"enrolled={len(self._enrolled)})"
        )

    @property
    def items(self) -> frozenset[ContentItem]:
        """Offered content items (read-only view)."""
        return frozenset(self._items)

    @property
    def enrolled(self) -> tuple[User, ...]:
        """Enrolled users in enrollment order (read-only view)."""
        return tuple(self._enrolled)

    def add_content(self, *items: ContentItem) -> int:
        """Add items to the catalog.

        Items equal by value to one already offered are ignored.

        Returns:
            Number of items that were not in the catalog before.
        """
        before = len(self._items)
        self._items.update(items)
        added = len(self._items) - before
        logger.debug("track.content_added", track=self.name, added=added)
        return added

    def enroll(self, *users: User) -> None:
        """Append users to the enrollment list, in call order."""
        self._enrolled.extend(users)
        logger.debug(
            "track.users_enrolled",
            track=self.name,
            users=[u.name for u in users],
        )

    def is_enrolled(self, user: User) -> bool:
        return user in self._enrolled

    def _require_content(self) -> None:
        if not self._items:
            logger.warning("track.empty_catalog", track=self.name)
            raise EmptyCatalogError(self.name)

    @property
    def total_duration(self) -> int:
        """Sum of the durations of all offered items.

        Raises:
            EmptyCatalogError: If the track has no content
        """
        self._require_content()
        return sum(item.duration for item in self._items)

    @property
    def dominant_level(self) -> Level:
        """Level shared by the largest number of offered items.

        Ties go to the level declared first in `Level`.

        Raises:
            EmptyCatalogError: If the track has no content
        """
        self._require_content()
        tally = Counter(item.level for item in self._items)
        return max(Level, key=lambda level: tally[level])

    def progress_for(self, user: User) -> float:
        """Percentage (0-100) of the catalog that `user` has studied.

        Args:
            user: An enrolled user

        Returns:
            Studied share of the offered items, as a percentage.

        Raises:
            NotEnrolledError: If `user` is not enrolled in this track
            EmptyCatalogError: If the track has no content
        """
        if not self.is_enrolled(user):
            logger.warning("track.not_enrolled", track=self.name, user=user.name)
            raise NotEnrolledError(self.name, user.name)
        self._require_content()

        studied = len(self._items & user.studied_items)
        return studied / len(self._items) * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "name": self.name,
            "items": [
                i.to_dict() for i in sorted(self._items, key=lambda i: i.name)
            ],
            "enrolled": [u.name for u in self._enrolled],
        }
        if self._items:
            result["total_duration"] = self.total_duration
            result["dominant_level"] = self.dominant_level.value
        return result
