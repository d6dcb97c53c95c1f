"""Adapter DI providers."""

from dishka import Scope, provide

from flowthread.adapter.notifier import LogfireRemovalNotifier
from flowthread.domain.service import RemovalNotifier
from flowthread.util.di.base import ProviderBase


class NotifierProvider(ProviderBase):
    """Removal notifier component base."""

    __mock_component__ = "notifier"


class ProdNotifierProvider(NotifierProvider):
    """Production notifier provider emitting removals to logfire."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_removal_notifier(self) -> RemovalNotifier:
        """Provide removal notifier."""
        return LogfireRemovalNotifier()
