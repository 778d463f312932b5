"""Comment domain service."""

from uuid import uuid4

import logfire

from prompthub.domain.error import NotFoundError, ValidationError
from prompthub.domain.model.comment import Comment
from prompthub.domain.model.common import utcnow
from prompthub.domain.repository import CommentRepository
from prompthub.domain.value import ROOT_ANCESTOR_ID, CommentId, PostId, UserId

from .base import Service

MAX_COMMENT_LENGTH = 1000


class CommentService(Service):
    """Domain service for the comment tree.

    Listings report live reply counts, computed in one batched query per
    listing. The cached reply_count column is still bumped on every reply.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    @staticmethod
    def validate_content(content: str) -> str:
        """Trim comment content and check its length.

        Args:
            content: Raw content as submitted

        Returns:
            The trimmed content

        Raises:
            ValidationError: If empty after trimming or too long
        """
        text = content.strip()
        if not text:
            raise ValidationError("Comment content cannot be empty")
        if len(text) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment content cannot exceed {MAX_COMMENT_LENGTH} characters"
            )
        return text

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The post itself must already be checked by the caller. For replies
        the parent's reply_count is incremented in the same transaction.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment content
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the parent is missing, deleted or on another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            text = self.validate_content(content)

            ancestor_id = ROOT_ANCESTOR_ID
            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent or not parent.is_active or parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment not found on post",
                        parent_comment_id=str(parent_comment_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_comment_id))
                # Replies share the thread root of their parent
                ancestor_id = (
                    str(parent.id)
                    if parent.ancestor_comment_id == ROOT_ANCESTOR_ID
                    else parent.ancestor_comment_id
                )

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=text,
                parent_comment_id=parent_comment_id,
                ancestor_comment_id=ancestor_id,
                reply_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            if parent_comment_id:
                await self.comment_repository.increment_reply_count(parent_comment_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=parent_comment_id is not None,
            )
            return saved

    async def list_top_level(self, post_id: PostId) -> list[Comment]:
        """List a post's top-level comments, newest first, with live reply counts.

        Args:
            post_id: Post ID

        Returns:
            Comments ordered by created_at descending
        """
        with logfire.span("comment_service.list_top_level", post_id=str(post_id)):
            comments = await self.comment_repository.find_top_level(post_id)
            return await self._with_live_reply_counts(comments)

    async def list_replies(
        self, post_id: PostId, parent_comment_id: CommentId
    ) -> list[Comment]:
        """List the direct replies of a comment, oldest first.

        Args:
            post_id: Post the parent must belong to
            parent_comment_id: Parent comment ID

        Returns:
            Replies ordered by created_at ascending, with live reply counts

        Raises:
            NotFoundError: If the parent is missing, deleted or on another post
        """
        with logfire.span(
            "comment_service.list_replies",
            post_id=str(post_id),
            parent_comment_id=str(parent_comment_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_comment_id)
            if not parent or not parent.is_active or parent.post_id != post_id:
                logfire.warn(
                    "Comment not found for replies",
                    parent_comment_id=str(parent_comment_id),
                )
                raise NotFoundError("Comment", str(parent_comment_id))

            replies = await self.comment_repository.find_replies(parent_comment_id)
            return await self._with_live_reply_counts(replies)

    async def _with_live_reply_counts(self, comments: list[Comment]) -> list[Comment]:
        if not comments:
            return []
        counts = await self.comment_repository.count_replies([c.id for c in comments])
        return [
            c.model_copy(update={"reply_count": counts.get(c.id, 0)}) for c in comments
        ]
