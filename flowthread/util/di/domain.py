"""Domain layer DI providers."""

from dishka import Scope, provide

from flowthread.config import CommentSettings
from flowthread.domain.repository import CommentRepository
from flowthread.domain.service import (
    CommentEraseService,
    CommentQueryService,
    RemovalNotifier,
)
from flowthread.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_query_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentQueryService:
        """Provide comment query domain service."""
        return CommentQueryService(
            comment_repository=comment_repository,
            expansion_policy=comment_settings.expansion_policy,
        )

    @provide
    def get_erase_service(
        self,
        comment_repository: CommentRepository,
        removal_notifier: RemovalNotifier,
    ) -> CommentEraseService:
        """Provide comment erase domain service."""
        return CommentEraseService(
            comment_repository=comment_repository,
            removal_notifier=removal_notifier,
        )
