"""Application layer DI providers."""

from dishka import Scope, provide

from flowthread.application.usecase.comment import (
    GetPageCommentsUseCase,
    ListCommentsUseCase,
)
from flowthread.application.usecase.page import PurgePageCommentsUseCase
from flowthread.config import CommentSettings, Settings
from flowthread.domain.service import CommentEraseService, CommentQueryService
from flowthread.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_page_comments_use_case(
        self,
        query_service: CommentQueryService,
        comment_settings: CommentSettings,
    ) -> GetPageCommentsUseCase:
        """Provide get page comments use case."""
        return GetPageCommentsUseCase(
            query_service=query_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        query_service: CommentQueryService,
        comment_settings: CommentSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            query_service=query_service, comment_settings=comment_settings
        )

    # Page lifecycle use cases
    @provide(scope=Scope.REQUEST)
    def get_purge_page_comments_use_case(
        self,
        query_service: CommentQueryService,
        erase_service: CommentEraseService,
        settings: Settings,
    ) -> PurgePageCommentsUseCase:
        """Provide purge page comments use case."""
        return PurgePageCommentsUseCase(
            query_service=query_service,
            erase_service=erase_service,
            strict=settings.strict_page_purge,
        )
