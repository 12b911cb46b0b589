"""Learner model.

A user owns the set of content items it has studied. The set only grows,
through `User.study` or the `mark_studied` helper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from tracks.core.content import ContentItem

logger = structlog.get_logger(__name__)


@dataclass
class User:
    """A learner that can enroll into tracks."""

    name: str
    _studied: set[ContentItem] = field(default_factory=set, init=False, repr=False)

    @property
    def studied_items(self) -> frozenset[ContentItem]:
        """Items this user has studied (read-only view)."""
        return frozenset(self._studied)

    def study(self, item: ContentItem) -> bool:
        """Mark an item as studied.

        Returns:
            True if the item was not studied before, False otherwise.
        """
        if item in self._studied:
            return False
        self._studied.add(item)
        logger.debug("user.studied", user=self.name, item=item.name)
        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "studied": [
                i.to_dict() for i in sorted(self._studied, key=lambda i: i.name)
            ],
        }


def mark_studied(user: User, item: ContentItem) -> bool:
    """Record that `user` studied `item`. Idempotent."""
    return user.study(item)
