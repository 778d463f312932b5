"""Unit tests for the comment use cases."""

import asyncio
from uuid import UUID, uuid4

import pytest

from prompthub.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
)
from prompthub.domain.error import NotFoundError, ValidationError
from prompthub.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from prompthub.domain.value import CommentId, PostStatus
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(unit_env, **post_overrides):
    """Save a commenter and a post to comment on."""
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    user = await user_repo.save(make_user(name="Grace"))
    post = await post_repo.save(make_post(user.id, **post_overrides))
    return user, post


class TestCreateComment:
    @pytest.mark.asyncio
    async def test_comment_bumps_post_comment_count(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        user, post = await seed(unit_env)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_id=post.id, content="  Works great  ", author_id=str(user.id)
            )
        )

        # Assert
        assert response.comment.content == "Works great"
        assert response.comment.author.name == "Grace"
        assert response.comment.reply_count == 0
        stored = await post_repo.find_by_id(post.id)
        assert stored.comment_count == 1

    @pytest.mark.asyncio
    async def test_replies_count_towards_post_total(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        user, post = await seed(unit_env)
        parent = await use_case.execute(
            CreateCommentRequest(post_id=post.id, content="Q", author_id=str(user.id))
        )

        await use_case.execute(
            CreateCommentRequest(
                post_id=post.id,
                content="A",
                author_id=str(user.id),
                parent_comment_id=parent.comment.id,
            )
        )

        stored = await post_repo.find_by_id(post.id)
        assert stored.comment_count == 2

    @pytest.mark.asyncio
    async def test_concurrent_replies_bump_both_counters(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user, post = await seed(unit_env)
        parent = await use_case.execute(
            CreateCommentRequest(post_id=post.id, content="Q", author_id=str(user.id))
        )

        # Act
        await asyncio.gather(
            *(
                use_case.execute(
                    CreateCommentRequest(
                        post_id=post.id,
                        content=f"A{i}",
                        author_id=str(user.id),
                        parent_comment_id=parent.comment.id,
                    )
                )
                for i in range(10)
            )
        )

        # Assert
        stored_post = await post_repo.find_by_id(post.id)
        parent_id = CommentId(UUID(parent.comment.id))
        stored_parent = await comment_repo.find_by_id(parent_id)
        assert stored_post.comment_count == 11
        assert stored_parent.reply_count == 10

    @pytest.mark.asyncio
    async def test_blank_content_changes_nothing(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        user, post = await seed(unit_env)

        # Act
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=post.id, content="   ", author_id=str(user.id)
                )
            )

        # Assert
        stored = await post_repo.find_by_id(post.id)
        assert stored.comment_count == 0

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=uuid4(), content="Hello", author_id=str(uuid4())
                )
            )


class TestListComments:
    @pytest.mark.asyncio
    async def test_hidden_post_comments_are_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        _, post = await seed(unit_env, status=PostStatus.HIDDEN)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_id=post.id))

    @pytest.mark.asyncio
    async def test_thread_listing(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        get_replies = await unit_env.get(GetRepliesUseCase)
        user, post = await seed(unit_env)
        top = await create.execute(
            CreateCommentRequest(post_id=post.id, content="Top", author_id=str(user.id))
        )
        await create.execute(
            CreateCommentRequest(
                post_id=post.id,
                content="Reply",
                author_id=str(user.id),
                parent_comment_id=top.comment.id,
            )
        )

        # Act
        comments = await get_comments.execute(GetCommentsRequest(post_id=post.id))
        replies = await get_replies.execute(
            GetRepliesRequest(post_id=post.id, comment_id=top.comment.id)
        )

        # Assert
        assert [c.content for c in comments.comments] == ["Top"]
        assert comments.comments[0].reply_count == 1
        assert [c.content for c in replies.replies] == ["Reply"]
