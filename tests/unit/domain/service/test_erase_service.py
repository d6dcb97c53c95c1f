"""Unit tests for CommentEraseService."""

import pytest

from flowthread.adapter.notifier import RecordingRemovalNotifier
from flowthread.domain.model import CommentQueryResult
from flowthread.domain.repository import CommentRepository
from flowthread.domain.service import (
    CommentEraseService,
    CommentQueryService,
    RemovalNotifier,
)
from flowthread.domain.value import CommentId, CommentQuery, PageId
from flowthread.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PAGE = PageId(42)


class FailingCommentRepository(InMemoryCommentRepository):
    """In-memory repository whose n-th delete raises."""

    def __init__(self, fail_on: int) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.deletes = 0

    async def delete(self, comment_id: CommentId) -> bool:
        self.deletes += 1
        if self.deletes == self.fail_on:
            raise ConnectionError("connection lost")
        return await super().delete(comment_id)


async def _fetch_page(unit_env, *comments) -> CommentQueryResult:
    repo = await unit_env.get(CommentRepository)
    for comment in comments:
        await repo.save(comment)
    query_service = await unit_env.get(CommentQueryService)
    return await query_service.fetch(CommentQuery.for_page_purge(PAGE))


class TestErase:
    """Tests for erase method."""

    @pytest.mark.asyncio
    async def test_erase_deletes_all_and_clears_result(self, unit_env):
        """Every fetched comment is deleted and the result emptied."""
        # Arrange
        erase_service = await unit_env.get(CommentEraseService)
        repo = await unit_env.get(CommentRepository)

        a = make_comment()
        b = make_comment(parent=a)
        other_page = make_comment(page_id=7)
        result = await _fetch_page(unit_env, a, b, other_page)

        # Act
        erased = await erase_service.erase(result)

        # Assert
        assert erased == 2
        assert result.comments == []
        assert await repo.find_by_id(a.id) is None
        assert await repo.find_by_id(b.id) is None
        assert await repo.find_by_id(other_page.id) == other_page

    @pytest.mark.asyncio
    async def test_erase_empty_result_is_noop(self, unit_env):
        """An empty result touches no storage."""
        # Arrange
        erase_service = await unit_env.get(CommentEraseService)
        repo = await unit_env.get(CommentRepository)
        notifier = await unit_env.get(RemovalNotifier)

        # Act
        erased = await erase_service.erase(
            CommentQueryResult(query=CommentQuery(page_id=PAGE)), notify=True
        )

        # Assert
        assert erased == 0
        assert repo.calls == []
        assert notifier.removed == []

    @pytest.mark.asyncio
    async def test_erase_twice_is_idempotent(self, unit_env):
        """Comments already gone are skipped and not counted."""
        # Arrange
        erase_service = await unit_env.get(CommentEraseService)

        comments = [make_comment(), make_comment()]
        first = await _fetch_page(unit_env, *comments)
        second = CommentQueryResult(query=first.query, comments=list(first.comments))

        # Act
        assert await erase_service.erase(first) == 2
        erased_again = await erase_service.erase(second)

        # Assert
        assert erased_again == 0
        assert second.comments == []

    @pytest.mark.asyncio
    async def test_erase_without_notify_sends_nothing(self, unit_env):
        """Notifications are suppressed unless requested."""
        # Arrange
        erase_service = await unit_env.get(CommentEraseService)
        notifier = await unit_env.get(RemovalNotifier)
        result = await _fetch_page(unit_env, make_comment())

        # Act
        await erase_service.erase(result, notify=False)

        # Assert
        assert notifier.removed == []

    @pytest.mark.asyncio
    async def test_erase_with_notify_signals_each_removed_comment(self, unit_env):
        """Each removed comment is signalled once."""
        # Arrange
        erase_service = await unit_env.get(CommentEraseService)
        notifier = await unit_env.get(RemovalNotifier)
        a = make_comment()
        b = make_comment(parent=a)
        result = await _fetch_page(unit_env, a, b)
        fetched = list(result.comments)

        # Act
        await erase_service.erase(result, notify=True)

        # Assert
        assert notifier.removed == fetched

    @pytest.mark.asyncio
    async def test_failed_delete_rolls_back_whole_cascade(self):
        """A failing delete restores earlier deletes and keeps the result."""
        # Arrange
        repo = FailingCommentRepository(fail_on=2)
        notifier = RecordingRemovalNotifier()
        erase_service = CommentEraseService(repo, notifier)

        comments = [make_comment() for _ in range(3)]
        for comment in comments:
            await repo.save(comment)
        result = await CommentQueryService(repo).fetch(
            CommentQuery.for_page_purge(PAGE)
        )

        # Act / Assert
        with pytest.raises(ConnectionError):
            await erase_service.erase(result, notify=True)

        assert len(result.comments) == 3
        for comment in comments:
            assert await repo.find_by_id(comment.id) == comment
        assert notifier.removed == []

    @pytest.mark.asyncio
    async def test_notify_flag_does_not_leak_between_calls(self):
        """A suppressed erase leaves later notifying erases unaffected."""
        # Arrange
        repo = InMemoryCommentRepository()
        notifier = RecordingRemovalNotifier()
        erase_service = CommentEraseService(repo, notifier)
        query_service = CommentQueryService(repo)

        quiet = make_comment(page_id=1)
        loud = make_comment(page_id=2)
        await repo.save(quiet)
        await repo.save(loud)

        # Act
        await erase_service.erase(
            await query_service.fetch(CommentQuery.for_page_purge(PageId(1)))
        )
        await erase_service.erase(
            await query_service.fetch(CommentQuery.for_page_purge(PageId(2))),
            notify=True,
        )

        # Assert
        assert notifier.removed == [loud]
