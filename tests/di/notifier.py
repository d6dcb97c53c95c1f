"""Mock notifier providers for testing."""

from dishka import Scope, provide

from flowthread.adapter.notifier import RecordingRemovalNotifier
from flowthread.domain.service import RemovalNotifier
from flowthread.util.di.adapter import NotifierProvider


class MockNotifierProvider(NotifierProvider):
    """Mock notifier provider recording removals in memory.

    Uses REQUEST scope so each test sees only its own removals.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_removal_notifier(self) -> RemovalNotifier:
        """Provide recording removal notifier."""
        return RecordingRemovalNotifier()
