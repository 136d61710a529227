"""Mock providers for testing."""

from .contentful import SAMPLE_POSTS, MockContentfulProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "SAMPLE_POSTS",
    "MockContentfulProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
