"""Unit tests for CommentQueryService."""

import pytest

from flowthread.domain.repository import CommentRepository
from flowthread.domain.service import CommentQueryService
from flowthread.domain.value import (
    CommentQuery,
    CommentStatus,
    ExpansionPolicy,
    PageId,
    SortDirection,
    StatusFilter,
)
from flowthread.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

PAGE = PageId(42)


async def _save_all(repo, *comments):
    for comment in comments:
        await repo.save(comment)
    repo.calls.clear()


class TestThreadMode:
    """Tests for thread-mode fetches."""

    @pytest.mark.asyncio
    async def test_fetch_rebuilds_chain_in_level_order(self, unit_env):
        """A root with a reply chain comes back root first with resolved parents."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        a = make_comment()
        b = make_comment(parent=a)
        c = make_comment(parent=b)
        await _save_all(repo, a, b, c)

        # Act
        result = await service.fetch(CommentQuery(page_id=PAGE))

        # Assert
        assert result.comments == [a, b, c]
        assert result.parent_of(c) is result.comments[1]
        assert result.parent_of(b) is result.comments[0]
        assert result.parent_of(a) is None
        assert result.total_count == 1

    @pytest.mark.asyncio
    async def test_normal_filter_does_not_reach_below_spam_reply(self, unit_env):
        """A SPAM reply cuts off its subtree under the NORMAL filter."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        a = make_comment()
        b = make_comment(parent=a, status=CommentStatus.SPAM)
        c = make_comment(parent=b)
        await _save_all(repo, a, b, c)

        # Act
        result = await service.fetch(
            CommentQuery(page_id=PAGE, status_filter=StatusFilter.NORMAL)
        )

        # Assert
        assert result.comments == [a]
        assert result.total_count == 1

    @pytest.mark.asyncio
    async def test_total_count_ignores_pagination(self, unit_env):
        """total_count counts every matching root, not only the page returned."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        roots = [make_comment() for _ in range(5)]
        replies = [make_comment(parent=root) for root in roots]
        await _save_all(repo, *roots, *replies)

        # Act
        result = await service.fetch(CommentQuery(page_id=PAGE, offset=1, limit=2))

        # Assert
        assert result.total_count == 5
        assert len(result.roots()) == 2
        assert len(result.comments) == 4

    @pytest.mark.asyncio
    async def test_pagination_applies_to_roots_only(self, unit_env):
        """Replies of a returned root are included beyond the limit."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        root = make_comment()
        replies = [make_comment(parent=root) for _ in range(3)]
        await _save_all(repo, root, *replies)

        # Act
        result = await service.fetch(CommentQuery(page_id=PAGE, limit=1))

        # Assert
        assert result.comments[0] == root
        assert len(result.comments) == 4
        assert all(result.parent_of(r) is root for r in result.comments[1:])

    @pytest.mark.asyncio
    async def test_one_round_trip_per_level(self, unit_env):
        """Expansion issues one children query per level plus the empty one."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        a = make_comment()
        b1 = make_comment(parent=a)
        b2 = make_comment(parent=a)
        c = make_comment(parent=b2)
        other_root = make_comment()
        await _save_all(repo, a, b1, b2, c, other_root)

        # Act
        await service.fetch(CommentQuery(page_id=PAGE))

        # Assert
        assert repo.calls == [
            "find",
            "count_roots",
            "find_children",  # replies to roots
            "find_children",  # replies to replies
            "find_children",  # empty level ends the loop
        ]

    @pytest.mark.asyncio
    async def test_each_comment_returned_once(self, unit_env):
        """Every comment of a wide, deep forest appears exactly once."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        saved = []
        for _ in range(3):
            root = make_comment()
            saved.append(root)
            level = [root]
            for _ in range(3):
                level = [make_comment(parent=p) for p in level for _ in range(2)]
                saved.extend(level)
        await _save_all(repo, *saved)

        # Act
        result = await service.fetch(CommentQuery(page_id=PAGE))

        # Assert
        ids = [c.id for c in result.comments]
        assert len(ids) == len(set(ids)) == len(saved)
        assert max(result.depth_of(c) for c in result.comments) == 3

    @pytest.mark.asyncio
    async def test_replies_across_pages_stay_out(self, unit_env):
        """Expansion is scoped to the queried page."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        root = make_comment()
        stray = make_comment(page_id=7, parent=root)
        await _save_all(repo, root, stray)

        # Act
        result = await service.fetch(CommentQuery(page_id=PAGE))

        # Assert
        assert result.comments == [root]

    @pytest.mark.asyncio
    async def test_filtered_roots_keep_normal_replies_by_default(self, unit_env):
        """REPORTED selects roots only; their NORMAL replies are all included."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        reported = make_comment(report_count=2)
        clean_root = make_comment()
        reply = make_comment(parent=reported)
        deleted_reply = make_comment(parent=reported, status=CommentStatus.DELETED)
        await _save_all(repo, reported, clean_root, reply, deleted_reply)

        # Act
        result = await service.fetch(
            CommentQuery(page_id=PAGE, status_filter=StatusFilter.REPORTED)
        )

        # Assert
        assert result.comments == [reported, reply]
        assert result.total_count == 1

    @pytest.mark.asyncio
    async def test_inherit_policy_applies_filter_to_replies(self):
        """Under INHERIT, reply levels use the same filter as the roots."""
        # Arrange
        repo = InMemoryCommentRepository()
        service = CommentQueryService(repo, expansion_policy=ExpansionPolicy.INHERIT)

        reported = make_comment(report_count=1)
        reported_reply = make_comment(parent=reported, report_count=1)
        clean_reply = make_comment(parent=reported)
        await _save_all(repo, reported, reported_reply, clean_reply)

        # Act
        result = await service.fetch(
            CommentQuery(page_id=PAGE, status_filter=StatusFilter.REPORTED)
        )

        # Assert
        assert result.comments == [reported, reported_reply]

    @pytest.mark.asyncio
    async def test_direction_orders_roots_and_levels(self, unit_env):
        """Newer sorts ascending by id, older descending."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        first = make_comment()
        second = make_comment()
        reply_1 = make_comment(parent=first)
        reply_2 = make_comment(parent=second)
        await _save_all(repo, first, second, reply_1, reply_2)

        # Act
        newer = await service.fetch(
            CommentQuery(page_id=PAGE, direction=SortDirection.NEWER)
        )
        older = await service.fetch(
            CommentQuery(page_id=PAGE, direction=SortDirection.OLDER)
        )

        # Assert
        assert newer.comments == [first, second, reply_1, reply_2]
        assert older.comments == [second, first, reply_2, reply_1]

    @pytest.mark.asyncio
    async def test_empty_page(self, unit_env):
        """No roots yields an empty result with a zero count."""
        service = await unit_env.get(CommentQueryService)

        result = await service.fetch(CommentQuery(page_id=PAGE))

        assert result.comments == []
        assert result.total_count == 0


class TestFlatMode:
    """Tests for flat-mode fetches."""

    @pytest.mark.asyncio
    async def test_flat_fetch_never_expands(self, unit_env):
        """Flat mode returns matching rows from one query and no count."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        root = make_comment(author="alice")
        reply = make_comment(parent=root, author="bob")
        nested = make_comment(parent=reply, author="alice")
        await _save_all(repo, root, reply, nested)

        # Act
        result = await service.fetch(
            CommentQuery(page_id=PAGE, author="alice", thread_mode=False)
        )

        # Assert
        assert result.comments == [nested, root]
        assert result.total_count is None
        assert result.parent_of(nested) is None
        assert repo.calls == ["find"]

    @pytest.mark.asyncio
    async def test_flat_fetch_respects_pagination_window(self, unit_env):
        """Result size equals the matching rows inside the window."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        comments = [make_comment() for _ in range(5)]
        await _save_all(repo, *comments)

        # Act
        result = await service.fetch(
            CommentQuery(
                page_id=PAGE,
                thread_mode=False,
                direction=SortDirection.NEWER,
                offset=3,
                limit=10,
            )
        )

        # Assert
        assert result.comments == comments[3:]

    @pytest.mark.asyncio
    async def test_keyword_matches_substring_across_pages(self, unit_env):
        """Page id 0 searches every page."""
        # Arrange
        service = await unit_env.get(CommentQueryService)
        repo = await unit_env.get(CommentRepository)

        hit_1 = make_comment(page_id=1, text="a 100% match")
        hit_2 = make_comment(page_id=2, text="100% again")
        miss = make_comment(page_id=2, text="nothing here")
        await _save_all(repo, hit_1, hit_2, miss)

        # Act
        result = await service.fetch(
            CommentQuery(
                keyword="100%", thread_mode=False, direction=SortDirection.NEWER
            )
        )

        # Assert
        assert result.comments == [hit_1, hit_2]


class TestDescendantFilter:
    """Tests for the reply-level filter."""

    @pytest.mark.parametrize(
        "status_filter,expected",
        [
            (StatusFilter.ALL, StatusFilter.ALL),
            (StatusFilter.NORMAL, StatusFilter.NORMAL),
            (StatusFilter.REPORTED, StatusFilter.NORMAL),
            (StatusFilter.DELETED, StatusFilter.NORMAL),
            (StatusFilter.SPAM, StatusFilter.NORMAL),
        ],
    )
    def test_collapse_policy(self, status_filter, expected):
        service = CommentQueryService(InMemoryCommentRepository())
        assert service.descendant_filter(status_filter) is expected

    def test_inherit_policy(self):
        service = CommentQueryService(
            InMemoryCommentRepository(), expansion_policy=ExpansionPolicy.INHERIT
        )
        assert service.descendant_filter(StatusFilter.SPAM) is StatusFilter.SPAM
