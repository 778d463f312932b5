"""Client side assembly of a post's comment tree.

Replies are fetched one level at a time and cached by *path*: the ids from
the top-level comment down to the comment whose replies they are, joined by
``"."``. A reply to ``B`` under top-level comment ``A`` lives under ``"A.B"``.
"""

import logging

import httpx

from prompthub.application.usecase.comment import CommentItem

logger = logging.getLogger(__name__)

MAX_INDENT = 5


class CommentTreeError(Exception):
    """An API call made by the tree client failed."""

    def __init__(self, status_code: int, message: str, code: str | None = None):
        self.status_code = status_code
        self.code = code
        super().__init__(message)


def path_for(comment_id: str, parent_path: str = "") -> str:
    """Path key of a comment's reply bucket.

    Examples:
        >>> path_for("B", "A")
        'A.B'
        >>> path_for("A")
        'A'
    """
    return f"{parent_path}.{comment_id}" if parent_path else comment_id


def indent_for(path: str) -> int:
    """Visual indent of the replies cached under ``path``.

    Nesting is unlimited, indentation stops growing at ``MAX_INDENT``.
    """
    depth = len(path.split(".")) if path else 0
    return min(depth, MAX_INDENT)


class CommentTreeClient:
    """Lazy comment tree of one post over the HTTP API.

    Args:
        client: HTTP client pointed at the API, carrying the session cookie
            for posting
        post_id: Post whose comments are shown
    """

    def __init__(self, client: httpx.AsyncClient, post_id: str) -> None:
        self.client = client
        self.post_id = post_id
        self.comments: list[CommentItem] = []
        self.replies: dict[str, list[CommentItem]] = {}
        self.expanded: set[str] = set()

    async def _request(self, method: str, url: str, **kwargs) -> dict:
        response = await self.client.request(method, url, **kwargs)
        body = response.json() if response.content else {}
        if response.is_error:
            raise CommentTreeError(
                response.status_code,
                body.get("error", response.reason_phrase),
                body.get("code"),
            )
        return body

    async def load_comments(self) -> list[CommentItem]:
        """Fetch the top-level comments, newest first."""
        body = await self._request("GET", f"/api/posts/{self.post_id}/comments")
        self.comments = [CommentItem.model_validate(c) for c in body["data"]]
        return self.comments

    async def fetch_replies(
        self, comment_id: str, parent_path: str = ""
    ) -> list[CommentItem]:
        """Fetch a comment's replies, replacing whatever was cached, and expand."""
        path = path_for(comment_id, parent_path)
        body = await self._request(
            "GET", f"/api/posts/{self.post_id}/comments/{comment_id}/replies"
        )
        self.replies[path] = [CommentItem.model_validate(c) for c in body["data"]]
        self.expanded.add(path)
        return self.replies[path]

    async def toggle(self, comment_id: str, parent_path: str = "") -> bool:
        """Expand or collapse a comment's replies.

        Collapsing keeps the cache, so expanding again makes no request.

        Returns:
            Whether the replies are expanded afterwards
        """
        path = path_for(comment_id, parent_path)
        if path in self.expanded:
            self.expanded.discard(path)
            return False
        if path in self.replies:
            self.expanded.add(path)
            return True
        await self.fetch_replies(comment_id, parent_path)
        return True

    def is_expanded(self, path: str) -> bool:
        return path in self.expanded

    def replies_for(self, path: str) -> list[CommentItem]:
        return self.replies.get(path, [])

    def find_parent_path(self, comment_id: str) -> str:
        """Path of the cached bucket holding ``comment_id``.

        Comments never seen in a reply bucket, top-level ones included,
        resolve to the empty path.
        """
        for path, bucket in self.replies.items():
            if any(reply.id == comment_id for reply in bucket):
                return path
        return ""

    async def post_comment(
        self, content: str, parent_comment_id: str | None = None
    ) -> CommentItem:
        """Post a comment or a reply and refresh the affected part of the tree.

        A new top-level comment is put first. For a reply, the parent's reply
        bucket is fetched again and expanded.
        """
        payload: dict[str, str] = {"content": content}
        if parent_comment_id:
            payload["parent_comment_id"] = parent_comment_id
        body = await self._request(
            "POST", f"/api/posts/{self.post_id}/comments", json=payload
        )
        comment = CommentItem.model_validate(body["data"])

        if parent_comment_id:
            parent_path = self.find_parent_path(parent_comment_id)
            logger.debug(
                f"Refreshing replies of {parent_comment_id} under '{parent_path}'"
            )
            await self.fetch_replies(parent_comment_id, parent_path)
        else:
            self.comments.insert(0, comment)
        return comment
