"""Domain layer DI providers."""

from dishka import Scope, provide

from prompthub.config import AuthSettings, StorageSettings
from prompthub.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    PromptRepository,
    UserRepository,
)
from prompthub.domain.service import (
    AvatarService,
    CommentService,
    JWTService,
    LikeService,
    ObjectStorage,
    PostService,
    PromptService,
    UserService,
)
from prompthub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_repository=post_repository,
            post_service=post_service,
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_prompt_service(self, prompt_repository: PromptRepository) -> PromptService:
        """Provide prompt domain service."""
        return PromptService(prompt_repository=prompt_repository)

    @provide
    def get_avatar_service(
        self, storage: ObjectStorage, storage_settings: StorageSettings
    ) -> AvatarService:
        """Provide avatar domain service."""
        return AvatarService(storage=storage, storage_settings=storage_settings)
