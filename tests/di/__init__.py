"""Mock providers for testing."""

from .notifier import MockNotifierProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockNotifierProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
