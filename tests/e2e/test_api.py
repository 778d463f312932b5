"""End to end tests of the HTTP API over in-memory infrastructure."""

from urllib.parse import parse_qs, urlsplit
from uuid import uuid4

from prompthub.config import AuthSettings
from tests.harness import create_client_fixture

api_client = create_client_fixture()
renamed_cookie_client = create_client_fixture(
    auth=AuthSettings(
        jwt_secret="test-secret", password_hash_rounds=4, cookie_name="session"
    )
)

PASSWORD = "secret123"


def sign_up(client, email: str, name: str = "Ada") -> dict:
    """Register and log in, leaving the session cookie on the client."""
    response = client.post(
        "/api/auth/register",
        json={
            "email": email,
            "password": PASSWORD,
            "confirm_password": PASSWORD,
            "name": name,
        },
    )
    assert response.status_code == 200, response.text
    response = client.post(
        "/api/auth/login", json={"email": email, "password": PASSWORD}
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]


def log_in(client, email: str) -> None:
    response = client.post(
        "/api/auth/login", json={"email": email, "password": PASSWORD}
    )
    assert response.status_code == 200, response.text


def create_post(client, **fields) -> dict:
    payload = {"title": "Summarize a paper", "content": "Summarize this.", **fields}
    response = client.post("/api/posts", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["data"]


class TestHealth:
    def test_health(self, api_client):
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuth:
    def test_session_lifecycle(self, api_client):
        # Anonymous
        assert api_client.get("/api/auth/me").json() == {
            "authenticated": False,
            "user": None,
        }

        # Signed in
        user = sign_up(api_client, "ada@example.com")
        assert "auth_token" in api_client.cookies
        me = api_client.get("/api/auth/me").json()
        assert me["authenticated"] is True
        assert me["user"]["id"] == user["id"]
        assert "password_hash" not in me["user"]

        # Signed out
        response = api_client.post("/api/auth/logout")
        assert response.json() == {"data": {"message": "Successfully logged out"}}
        assert api_client.get("/api/auth/me").json()["authenticated"] is False

    def test_password_needs_letters_and_digits(self, api_client):
        response = api_client.post(
            "/api/auth/register",
            json={
                "email": "ada@example.com",
                "password": "abcdefgh",
                "confirm_password": "abcdefgh",
                "name": "Ada",
            },
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Password must contain both letters and digits",
            "code": "VALIDATION_ERROR",
        }

    def test_passwords_must_match(self, api_client):
        response = api_client.post(
            "/api/auth/register",
            json={
                "email": "ada@example.com",
                "password": PASSWORD,
                "confirm_password": "secret124",
                "name": "Ada",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Passwords do not match"

    def test_duplicate_email(self, api_client):
        sign_up(api_client, "ada@example.com")

        response = api_client.post(
            "/api/auth/register",
            json={
                "email": "ada@example.com",
                "password": PASSWORD,
                "confirm_password": PASSWORD,
                "name": "Other",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "This email is already registered"

    def test_bad_credentials(self, api_client):
        response = api_client.post(
            "/api/auth/login", json={"email": "nobody@example.com", "password": "x"}
        )

        assert response.status_code == 401
        assert response.json() == {
            "error": "Invalid email or password",
            "code": "UNAUTHORIZED",
        }


class TestGatekeeper:
    def test_protected_api_without_session(self, api_client):
        response = api_client.get("/api/prompts")

        assert response.status_code == 401
        assert response.json() == {
            "error": "Please log in first",
            "code": "UNAUTHORIZED",
        }

    def test_protected_page_redirects_to_login(self, api_client):
        response = api_client.get("/posts/new", follow_redirects=False)

        assert response.status_code == 307
        location = urlsplit(response.headers["location"])
        assert location.path == "/login"
        assert parse_qs(location.query)["callbackUrl"] == ["/posts/new"]

    def test_preflight_is_answered_directly(self, api_client):
        response = api_client.options(
            "/api/prompts",
            headers={
                "Origin": "https://prompthub.example",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert (
            response.headers["access-control-allow-origin"]
            == "https://prompthub.example"
        )
        assert response.headers["access-control-allow-credentials"] == "true"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_cors_headers_on_regular_responses(self, api_client):
        response = api_client.get("/health", headers={"Origin": "https://a.example"})

        assert response.headers["access-control-allow-origin"] == "https://a.example"
        assert "Origin" in response.headers["vary"]

    def test_invalid_cookie_is_not_a_session(self, api_client):
        api_client.cookies.set("auth_token", "forged")

        response = api_client.get("/api/user/posts")

        assert response.status_code == 401

    def test_prefix_does_not_match_longer_segment(self, api_client):
        response = api_client.get("/postscript", follow_redirects=False)

        assert response.status_code == 404


class TestSessionCookieName:
    def test_session_uses_configured_cookie(self, renamed_cookie_client):
        user = sign_up(renamed_cookie_client, "ada@example.com")

        assert "session" in renamed_cookie_client.cookies
        assert "auth_token" not in renamed_cookie_client.cookies
        me = renamed_cookie_client.get("/api/auth/me").json()
        assert me["authenticated"] is True
        assert me["user"]["id"] == user["id"]

    def test_protected_routes_accept_configured_cookie(self, renamed_cookie_client):
        sign_up(renamed_cookie_client, "ada@example.com")

        post = create_post(renamed_cookie_client)
        response = renamed_cookie_client.get("/api/user/posts")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()["data"]] == [post["id"]]

    def test_logout_clears_configured_cookie(self, renamed_cookie_client):
        sign_up(renamed_cookie_client, "ada@example.com")

        renamed_cookie_client.post("/api/auth/logout")

        me = renamed_cookie_client.get("/api/auth/me").json()
        assert me["authenticated"] is False


class TestComments:
    def test_comment_thread(self, api_client):
        # Arrange
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)
        comments_url = f"/api/posts/{post['id']}/comments"

        # Act
        top = api_client.post(comments_url, json={"content": "Nice one"}).json()["data"]
        reply = api_client.post(
            comments_url, json={"content": "Agreed", "parent_comment_id": top["id"]}
        ).json()["data"]

        # Assert
        listed = api_client.get(comments_url).json()["data"]
        assert [c["id"] for c in listed] == [top["id"]]
        assert listed[0]["reply_count"] == 1
        assert listed[0]["author"]["name"] == "Ada"

        replies = api_client.get(f"{comments_url}/{top['id']}/replies").json()["data"]
        assert [c["id"] for c in replies] == [reply["id"]]

        post_after = api_client.get(f"/api/posts/{post['id']}").json()["data"]
        assert post_after["comment_count"] == 2

    def test_comments_are_public(self, api_client):
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)
        api_client.post("/api/auth/logout")

        response = api_client.get(f"/api/posts/{post['id']}/comments")

        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_commenting_requires_session(self, api_client):
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)
        api_client.post("/api/auth/logout")

        response = api_client.post(
            f"/api/posts/{post['id']}/comments", json={"content": "Hi"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_blank_comment(self, api_client):
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)

        response = api_client.post(
            f"/api/posts/{post['id']}/comments", json={"content": "   "}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Comment content cannot be empty",
            "code": "VALIDATION_ERROR",
        }

    def test_missing_post(self, api_client):
        sign_up(api_client, "ada@example.com")

        response = api_client.post(
            f"/api/posts/{uuid4()}/comments", json={"content": "Hello"}
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found", "code": "NOT_FOUND"}

    def test_missing_parent(self, api_client):
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)

        response = api_client.post(
            f"/api/posts/{post['id']}/comments",
            json={"content": "Hello", "parent_comment_id": str(uuid4())},
        )

        assert response.status_code == 404
        assert response.json()["error"] == "Comment not found"

    def test_malformed_post_id(self, api_client):
        response = api_client.get("/api/posts/not-a-uuid/comments")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestPosts:
    def test_like_flow(self, api_client):
        # Arrange
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)
        like_url = f"/api/posts/{post['id']}/like"

        # Act
        first = api_client.post(like_url)
        again = api_client.post(like_url, json={"action": "increment"})
        undone = api_client.post(like_url, json={"action": "decrement"})

        # Assert
        assert first.json() == {
            "data": {"like_count": 1, "is_liked": True},
            "action": "increment",
        }
        assert again.json()["data"] == {"like_count": 1, "is_liked": True}
        assert undone.json() == {
            "data": {"like_count": 0, "is_liked": False},
            "action": "decrement",
        }

    def test_listing_envelope(self, api_client):
        sign_up(api_client, "ada@example.com")
        create_post(api_client, tags=["coding"])
        create_post(api_client, title="Another", tags=["writing"])

        body = api_client.get("/api/posts", params={"tag": "coding"}).json()

        assert [p["tags"] for p in body["data"]] == [["coding"]]
        assert body["pagination"]["total"] == 1
        assert body["pagination"]["page"] == 1

    def test_only_author_may_edit(self, api_client):
        # Arrange
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)
        sign_up(api_client, "grace@example.com", name="Grace")

        # Act
        response = api_client.patch(f"/api/posts/{post['id']}", json={"title": "Mine"})

        # Assert
        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_author_edits_and_deletes(self, api_client):
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)

        edited = api_client.patch(
            f"/api/posts/{post['id']}", json={"title": "Better title"}
        ).json()["data"]
        deleted = api_client.delete(f"/api/posts/{post['id']}")

        assert edited["title"] == "Better title"
        assert edited["content"] == post["content"]
        assert deleted.json() == {"data": {"message": "Post deleted"}}
        assert api_client.get(f"/api/posts/{post['id']}").status_code == 404


class TestPrompts:
    def test_prompt_crud(self, api_client):
        # Arrange
        sign_up(api_client, "ada@example.com")

        # Act
        created = api_client.post(
            "/api/prompts", json={"title": "Tutor", "content": "Explain simply"}
        ).json()["data"]
        updated = api_client.patch(
            f"/api/prompts/{created['id']}", json={"description": "For kids"}
        ).json()["data"]
        listed = api_client.get("/api/prompts").json()

        # Assert
        assert created["type"] == "BACKGROUND"
        assert updated["description"] == "For kids"
        assert updated["title"] == "Tutor"
        assert [p["id"] for p in listed["data"]] == [created["id"]]
        assert listed["pagination"]["total"] == 1

        api_client.delete(f"/api/prompts/{created['id']}")
        assert api_client.get(f"/api/prompts/{created['id']}").status_code == 404

    def test_prompts_are_private(self, api_client):
        sign_up(api_client, "ada@example.com")
        created = api_client.post(
            "/api/prompts", json={"title": "Tutor", "content": "Explain simply"}
        ).json()["data"]
        sign_up(api_client, "grace@example.com", name="Grace")

        response = api_client.get(f"/api/prompts/{created['id']}")

        assert response.status_code == 404
        assert response.json() == {"error": "Prompt not found", "code": "NOT_FOUND"}


class TestUser:
    def test_avatar_upload(self, api_client):
        # Arrange
        sign_up(api_client, "ada@example.com")

        # Act
        upload = api_client.post(
            "/api/user/avatar/presign",
            json={"filename": "me.png", "mime_type": "image/png", "size": 2048},
        ).json()["data"]
        updated = api_client.patch(
            "/api/user/avatar", json={"avatar_url": upload["avatar_url"]}
        )

        # Assert
        assert upload["upload_url"].startswith("https://storage.test/avatars/")
        assert updated.json() == {"data": {"avatar": upload["avatar_url"]}}
        assert api_client.get("/api/auth/me").json()["user"]["avatar"] == (
            upload["avatar_url"]
        )

    def test_avatar_type_is_checked(self, api_client):
        sign_up(api_client, "ada@example.com")

        response = api_client.post(
            "/api/user/avatar/presign",
            json={"filename": "me.gif", "mime_type": "image/gif", "size": 10},
        )

        assert response.status_code == 400

    def test_own_posts(self, api_client):
        sign_up(api_client, "ada@example.com")
        post = create_post(api_client)
        api_client.patch(f"/api/posts/{post['id']}", json={"status": "hidden"})

        body = api_client.get("/api/user/posts").json()

        assert [p["id"] for p in body["data"]] == [post["id"]]
        assert body["data"][0]["status"] == "hidden"
