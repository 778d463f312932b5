"""HTTP client helpers."""

from .comment_tree import (
    CommentTreeClient,
    CommentTreeError,
    indent_for,
    path_for,
)

__all__ = ["CommentTreeClient", "CommentTreeError", "indent_for", "path_for"]
