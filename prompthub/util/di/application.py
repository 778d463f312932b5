"""Application layer DI providers."""

from dishka import Scope, provide

from prompthub.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from prompthub.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
)
from prompthub.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from prompthub.application.usecase.prompt import (
    CreatePromptUseCase,
    DeletePromptUseCase,
    GetPromptUseCase,
    ListPromptsUseCase,
    UpdatePromptUseCase,
)
from prompthub.application.usecase.user import (
    CreateAvatarUploadUseCase,
    GetUserPostsUseCase,
    UpdateAvatarUseCase,
)
from prompthub.domain.service import (
    AvatarService,
    CommentService,
    JWTService,
    LikeService,
    PostService,
    PromptService,
    UserService,
)
from prompthub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        return RegisterUseCase(user_service=user_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide
    def get_get_replies_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Post use cases
    @provide
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        like_service: LikeService,
        user_service: UserService,
    ) -> ListPostsUseCase:
        return ListPostsUseCase(
            post_service=post_service,
            like_service=like_service,
            user_service=user_service,
        )

    @provide
    def get_get_post_use_case(
        self,
        post_service: PostService,
        like_service: LikeService,
        user_service: UserService,
    ) -> GetPostUseCase:
        return GetPostUseCase(
            post_service=post_service,
            like_service=like_service,
            user_service=user_service,
        )

    @provide
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> UpdatePostUseCase:
        return UpdatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_like_post_use_case(self, like_service: LikeService) -> LikePostUseCase:
        return LikePostUseCase(like_service=like_service)

    # Prompt use cases
    @provide
    def get_list_prompts_use_case(
        self, prompt_service: PromptService
    ) -> ListPromptsUseCase:
        return ListPromptsUseCase(prompt_service=prompt_service)

    @provide
    def get_get_prompt_use_case(
        self, prompt_service: PromptService
    ) -> GetPromptUseCase:
        return GetPromptUseCase(prompt_service=prompt_service)

    @provide
    def get_create_prompt_use_case(
        self, prompt_service: PromptService
    ) -> CreatePromptUseCase:
        return CreatePromptUseCase(prompt_service=prompt_service)

    @provide
    def get_update_prompt_use_case(
        self, prompt_service: PromptService
    ) -> UpdatePromptUseCase:
        return UpdatePromptUseCase(prompt_service=prompt_service)

    @provide
    def get_delete_prompt_use_case(
        self, prompt_service: PromptService
    ) -> DeletePromptUseCase:
        return DeletePromptUseCase(prompt_service=prompt_service)

    # User use cases
    @provide
    def get_get_user_posts_use_case(
        self,
        post_service: PostService,
        like_service: LikeService,
        user_service: UserService,
    ) -> GetUserPostsUseCase:
        """Provide get user posts use case."""
        return GetUserPostsUseCase(
            post_service=post_service,
            like_service=like_service,
            user_service=user_service,
        )

    @provide
    def get_create_avatar_upload_use_case(
        self, avatar_service: AvatarService
    ) -> CreateAvatarUploadUseCase:
        return CreateAvatarUploadUseCase(avatar_service=avatar_service)

    @provide
    def get_update_avatar_use_case(
        self, avatar_service: AvatarService, user_service: UserService
    ) -> UpdateAvatarUseCase:
        return UpdateAvatarUseCase(
            avatar_service=avatar_service, user_service=user_service
        )
