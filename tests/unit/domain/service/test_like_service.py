"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from prompthub.domain.error import NotFoundError
from prompthub.domain.repository import LikeRepository, PostRepository
from prompthub.domain.service import LikeService
from prompthub.domain.value import LikeAction, PostId, PostStatus, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def save_post(unit_env, **overrides):
    post_repo = await unit_env.get(PostRepository)
    return await post_repo.save(make_post(UserId(uuid4()), **overrides))


class TestToggleLike:
    @pytest.mark.asyncio
    async def test_like_increments_once(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        post = await save_post(unit_env)
        user_id = UserId(uuid4())

        # Act
        first = await like_service.toggle_like(post.id, user_id, LikeAction.INCREMENT)
        second = await like_service.toggle_like(post.id, user_id, LikeAction.INCREMENT)

        # Assert
        assert first == (1, True)
        assert second == (1, True)
        post_repo = await unit_env.get(PostRepository)
        assert (await post_repo.find_by_id(post.id)).like_count == 1

    @pytest.mark.asyncio
    async def test_unlike_when_never_liked_is_a_no_op(self, unit_env):
        like_service = await unit_env.get(LikeService)
        post = await save_post(unit_env, like_count=3)

        result = await like_service.toggle_like(
            post.id, UserId(uuid4()), LikeAction.DECREMENT
        )

        assert result == (3, False)

    @pytest.mark.asyncio
    async def test_unlike_after_like(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        post = await save_post(unit_env)
        user_id = UserId(uuid4())
        await like_service.toggle_like(post.id, user_id, LikeAction.INCREMENT)

        # Act
        result = await like_service.toggle_like(post.id, user_id, LikeAction.DECREMENT)

        # Assert
        assert result == (0, False)
        assert await like_repo.find(post.id, user_id) is None

    @pytest.mark.asyncio
    async def test_like_count_never_goes_below_zero(self, unit_env):
        # Arrange: a like row exists but the counter drifted to 0
        like_service = await unit_env.get(LikeService)
        post = await save_post(unit_env)
        user_id = UserId(uuid4())
        await like_service.toggle_like(post.id, user_id, LikeAction.INCREMENT)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.decrement_like_count(post.id)

        # Act
        like_count, is_liked = await like_service.toggle_like(
            post.id, user_id, LikeAction.DECREMENT
        )

        # Assert
        assert like_count == 0
        assert is_liked is False

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(
                PostId(uuid4()), UserId(uuid4()), LikeAction.INCREMENT
            )

    @pytest.mark.asyncio
    async def test_hidden_post_cannot_be_liked(self, unit_env):
        like_service = await unit_env.get(LikeService)
        post = await save_post(unit_env, status=PostStatus.HIDDEN)

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(
                post.id, UserId(uuid4()), LikeAction.INCREMENT
            )


class TestLikedPostIds:
    @pytest.mark.asyncio
    async def test_anonymous_viewer_likes_nothing(self, unit_env):
        like_service = await unit_env.get(LikeService)
        post = await save_post(unit_env)

        assert await like_service.liked_post_ids(None, [post.id]) == set()

    @pytest.mark.asyncio
    async def test_returns_only_liked_posts(self, unit_env):
        like_service = await unit_env.get(LikeService)
        liked = await save_post(unit_env)
        other = await save_post(unit_env)
        user_id = UserId(uuid4())
        await like_service.toggle_like(liked.id, user_id, LikeAction.INCREMENT)

        result = await like_service.liked_post_ids(user_id, [liked.id, other.id])

        assert result == {liked.id}


class TestLikeActionParse:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("increment", LikeAction.INCREMENT),
            ("decrement", LikeAction.DECREMENT),
            (None, LikeAction.INCREMENT),
            ("sideways", LikeAction.INCREMENT),
        ],
    )
    def test_missing_or_unknown_means_increment(self, value, expected):
        assert LikeAction.parse(value) == expected
