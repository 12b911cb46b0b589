"""Fixtures for F1 tests - Content, User and Track model."""

import pytest

from tracks.core.content import ContentItem, Level
from tracks.core.track import Track
from tracks.core.user import User


@pytest.fixture
def item_a() -> ContentItem:
    return ContentItem("A", Level.BASIC, 60)


@pytest.fixture
def item_b() -> ContentItem:
    return ContentItem("B", Level.BASIC, 120)


@pytest.fixture
def item_c() -> ContentItem:
    return ContentItem("C", Level.INTERMEDIATE, 120)


@pytest.fixture
def sample_track(item_a, item_b, item_c) -> Track:
    """Track "T" offering A(basic, 60), B(basic, 120), C(intermediate, 120)."""
    track = Track("T")
    track.add_content(item_a, item_b, item_c)
    return track


@pytest.fixture
def user() -> User:
    return User("u1")
