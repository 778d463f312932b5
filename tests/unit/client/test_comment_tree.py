"""Unit tests for the comment tree client."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from prompthub.client import (
    CommentTreeClient,
    CommentTreeError,
    indent_for,
    path_for,
)

POST_ID = "post-1"
BASE = f"/api/posts/{POST_ID}/comments"


def comment(comment_id: str, reply_count: int = 0) -> dict:
    now = datetime(2026, 1, 1, tzinfo=timezone.utc).isoformat()
    return {
        "id": comment_id,
        "content": f"comment {comment_id}",
        "author": {"id": "00000000-0000-0000-0000-000000000001", "name": "Ada"},
        "like_count": 0,
        "reply_count": reply_count,
        "created_at": now,
        "updated_at": now,
    }


class FakeApi:
    """Serves a fixed thread and records every request."""

    def __init__(self) -> None:
        self.top_level = [comment("A", reply_count=1)]
        self.replies = {"A": [comment("B")], "B": []}
        self.requests: list[tuple[str, str]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append((request.method, path))

        if request.method == "POST" and path == BASE:
            body = json.loads(request.content)
            if not body["content"].strip():
                return httpx.Response(
                    400,
                    json={
                        "error": "Comment cannot be empty",
                        "code": "VALIDATION_ERROR",
                    },
                )
            new = comment(f"N{len(self.requests)}")
            parent = body.get("parent_comment_id")
            if parent:
                self.replies.setdefault(parent, []).append(new)
            else:
                self.top_level.insert(0, new)
            return httpx.Response(200, json={"data": new})

        if path == BASE:
            return httpx.Response(200, json={"data": self.top_level})

        if path.startswith(BASE + "/") and path.endswith("/replies"):
            comment_id = path[len(BASE) + 1 : -len("/replies")]
            if comment_id not in self.replies:
                return httpx.Response(
                    404, json={"error": "Comment not found", "code": "NOT_FOUND"}
                )
            return httpx.Response(200, json={"data": self.replies[comment_id]})

        return httpx.Response(404, json={"error": "Not found", "code": "NOT_FOUND"})

    def count(self, path: str) -> int:
        return sum(1 for _, p in self.requests if p == path)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def tree(api):
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(api), base_url="http://testserver"
    )
    return CommentTreeClient(client, POST_ID)


class TestPaths:
    def test_path_joins_ancestors(self):
        assert path_for("C", path_for("B", "A")) == "A.B.C"

    @pytest.mark.parametrize(
        ("path", "indent"),
        [("", 0), ("A", 1), ("A.B", 2), ("A.B.C.D.E", 5), ("A.B.C.D.E.F.G", 5)],
    )
    def test_indent_is_capped(self, path, indent):
        assert indent_for(path) == indent


class TestToggle:
    @pytest.mark.asyncio
    async def test_first_expand_fetches_and_second_collapses(self, tree, api):
        # Act
        expanded = await tree.toggle("A")
        collapsed = await tree.toggle("A")

        # Assert
        assert expanded is True
        assert collapsed is False
        assert [r.id for r in tree.replies_for("A")] == ["B"]
        assert api.count(f"{BASE}/A/replies") == 1

    @pytest.mark.asyncio
    async def test_expanding_again_uses_cache(self, tree, api):
        await tree.toggle("A")
        await tree.toggle("A")

        assert await tree.toggle("A") is True
        assert tree.is_expanded("A")
        assert api.count(f"{BASE}/A/replies") == 1

    @pytest.mark.asyncio
    async def test_nested_replies_are_keyed_by_path(self, tree):
        await tree.toggle("A")
        await tree.toggle("B", parent_path="A")

        assert tree.is_expanded("A.B")
        assert tree.replies_for("A.B") == []


class TestPostComment:
    @pytest.mark.asyncio
    async def test_top_level_comment_goes_first(self, tree):
        await tree.load_comments()

        new = await tree.post_comment("Hello")

        assert [c.id for c in tree.comments] == [new.id, "A"]

    @pytest.mark.asyncio
    async def test_reply_refreshes_parent_bucket(self, tree, api):
        # Arrange
        await tree.load_comments()
        await tree.toggle("A")
        await tree.toggle("B", parent_path="A")

        # Act
        reply = await tree.post_comment("Deep reply", parent_comment_id="B")

        # Assert
        assert [r.id for r in tree.replies_for("A.B")] == [reply.id]
        assert tree.is_expanded("A.B")
        assert api.count(f"{BASE}/B/replies") == 2

    @pytest.mark.asyncio
    async def test_reply_to_top_level_comment(self, tree):
        await tree.load_comments()

        reply = await tree.post_comment("Reply", parent_comment_id="A")

        assert tree.is_expanded("A")
        assert reply.id in [r.id for r in tree.replies_for("A")]

    @pytest.mark.asyncio
    async def test_api_errors_are_raised_with_code(self, tree):
        with pytest.raises(CommentTreeError) as exc_info:
            await tree.post_comment("   ")

        assert exc_info.value.status_code == 400
        assert exc_info.value.code == "VALIDATION_ERROR"
        assert str(exc_info.value) == "Comment cannot be empty"
