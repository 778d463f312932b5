"""Unit tests for CommentService."""

import asyncio
from uuid import uuid4

import pytest

from prompthub.domain.error import NotFoundError, ValidationError
from prompthub.domain.model.common import utcnow
from prompthub.domain.repository import CommentRepository, PostRepository
from prompthub.domain.service import CommentService
from prompthub.domain.value import ROOT_ANCESTOR_ID, CommentId, PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def save_post(unit_env):
    post_repo = await unit_env.get(PostRepository)
    return await post_repo.save(make_post(UserId(uuid4())))


class TestValidateContent:
    """Tests for validate_content."""

    def test_trims_whitespace(self):
        assert CommentService.validate_content("  nice prompt \n") == "nice prompt"

    def test_rejects_blank_content(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            CommentService.validate_content("   ")

    def test_accepts_exactly_1000_characters(self):
        assert len(CommentService.validate_content("a" * 1000)) == 1000

    def test_rejects_more_than_1000_characters(self):
        with pytest.raises(ValidationError, match="cannot exceed 1000"):
            CommentService.validate_content("a" * 1001)

    def test_length_is_checked_after_trimming(self):
        assert CommentService.validate_content(" " + "a" * 1000 + " ") == "a" * 1000


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment_uses_root_ancestor(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)

        # Act
        comment = await comment_service.create_comment(
            post_id=post.id, author_id=UserId(uuid4()), content="First!"
        )

        # Assert
        assert comment.parent_comment_id is None
        assert comment.ancestor_comment_id == ROOT_ANCESTOR_ID
        assert comment.reply_count == 0
        assert comment.is_active

    @pytest.mark.asyncio
    async def test_reply_increments_parent_reply_count(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await save_post(unit_env)
        parent = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Parent"
        )

        # Act
        reply = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Reply", parent_comment_id=parent.id
        )

        # Assert
        assert reply.parent_comment_id == parent.id
        assert reply.ancestor_comment_id == str(parent.id)
        stored_parent = await comment_repo.find_by_id(parent.id)
        assert stored_parent.reply_count == 1

    @pytest.mark.asyncio
    async def test_nested_reply_keeps_thread_root(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)
        top = await comment_service.create_comment(post.id, UserId(uuid4()), "Top")
        child = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Child", parent_comment_id=top.id
        )

        grandchild = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Grandchild", parent_comment_id=child.id
        )

        assert grandchild.parent_comment_id == child.id
        assert grandchild.ancestor_comment_id == str(top.id)

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                post.id,
                UserId(uuid4()),
                "Reply",
                parent_comment_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_reply_with_parent_on_other_post_creates_nothing(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await save_post(unit_env)
        other_post = await save_post(unit_env)
        parent = await comment_service.create_comment(
            other_post.id, UserId(uuid4()), "On another post"
        )

        # Act
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                post.id, UserId(uuid4()), "Reply", parent_comment_id=parent.id
            )

        # Assert
        assert await comment_repo.find_top_level(post.id) == []
        stored_parent = await comment_repo.find_by_id(parent.id)
        assert stored_parent.reply_count == 0

    @pytest.mark.asyncio
    async def test_reply_to_deleted_parent_raises_not_found(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await save_post(unit_env)
        parent = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Soon gone"
        )
        await comment_repo.save(parent.model_copy(update={"deleted_at": utcnow()}))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                post.id, UserId(uuid4()), "Reply", parent_comment_id=parent.id
            )

    @pytest.mark.asyncio
    async def test_concurrent_replies_are_all_counted(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await save_post(unit_env)
        parent = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Parent"
        )

        # Act
        await asyncio.gather(
            *(
                comment_service.create_comment(
                    post.id, UserId(uuid4()), f"Reply {i}", parent_comment_id=parent.id
                )
                for i in range(25)
            )
        )

        # Assert
        stored_parent = await comment_repo.find_by_id(parent.id)
        assert stored_parent.reply_count == 25
        assert len(await comment_repo.find_replies(parent.id)) == 25


class TestListComments:
    """Tests for list_top_level and list_replies."""

    @pytest.mark.asyncio
    async def test_top_level_is_newest_first(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)
        created = [
            await comment_service.create_comment(post.id, UserId(uuid4()), f"c{i}")
            for i in range(4)
        ]

        # Act
        listed = await comment_service.list_top_level(post.id)

        # Assert
        assert [c.id for c in listed] == [c.id for c in reversed(created)]

    @pytest.mark.asyncio
    async def test_top_level_excludes_replies(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)
        parent = await comment_service.create_comment(post.id, UserId(uuid4()), "p")
        await comment_service.create_comment(
            post.id, UserId(uuid4()), "r", parent_comment_id=parent.id
        )

        listed = await comment_service.list_top_level(post.id)

        assert [c.id for c in listed] == [parent.id]

    @pytest.mark.asyncio
    async def test_replies_are_oldest_first(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)
        parent = await comment_service.create_comment(post.id, UserId(uuid4()), "p")
        replies = [
            await comment_service.create_comment(
                post.id, UserId(uuid4()), f"r{i}", parent_comment_id=parent.id
            )
            for i in range(4)
        ]

        # Act
        listed = await comment_service.list_replies(post.id, parent.id)

        # Assert
        assert [c.id for c in listed] == [r.id for r in replies]

    @pytest.mark.asyncio
    async def test_listings_report_live_reply_counts(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)
        top = await comment_service.create_comment(post.id, UserId(uuid4()), "top")
        child = await comment_service.create_comment(
            post.id, UserId(uuid4()), "child", parent_comment_id=top.id
        )
        for text in ("a", "b"):
            await comment_service.create_comment(
                post.id, UserId(uuid4()), text, parent_comment_id=child.id
            )

        # Act
        [listed_top] = await comment_service.list_top_level(post.id)
        [listed_child] = await comment_service.list_replies(post.id, top.id)

        # Assert
        assert listed_top.reply_count == 1
        assert listed_child.reply_count == 2

    @pytest.mark.asyncio
    async def test_replies_of_missing_comment_raise_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)

        with pytest.raises(NotFoundError):
            await comment_service.list_replies(post.id, CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_replies_under_wrong_post_raise_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await save_post(unit_env)
        parent = await comment_service.create_comment(post.id, UserId(uuid4()), "p")

        with pytest.raises(NotFoundError):
            await comment_service.list_replies(PostId(uuid4()), parent.id)
