"""End-to-end tests for comment endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from roost.config import Settings
from roost.domain.repository import PostRepository
from roost.domain.service import JWTService
from roost.interface.api.app import create_app
from roost.util.di.container import setup_di
from tests.conftest import make_post
from tests.di import build_test_container


@pytest.fixture
def test_container():
    return build_test_container()


@pytest.fixture
def client(test_container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, test_container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def post(client, test_container):
    """A post saved through the container's repository."""
    post = make_post()
    repository = client.portal.call(test_container.get, PostRepository)
    client.portal.call(repository.save, post)
    return post


@pytest.fixture
def auth_cookies():
    token = JWTService(Settings().auth).create_token(str(uuid4()), "carol")
    return {"auth_token": token}


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "0.1.0"


class TestCommentEndpoints:
    """End-to-end tests for comment API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_comments_for_unknown_post(self, client):
        """Should return 404 for a post that does not exist."""
        response = client.get(f"/comments/post/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"]["type"] == "NOT_FOUND"

    def test_malformed_post_id(self, client):
        response = client.get("/comments/post/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["detail"]["type"] == "VALIDATION_ERROR"

    def test_limit_out_of_range(self, client, post):
        """Query parameter validation failures are reported as 400."""
        response = client.get(f"/comments/post/{post.id}", params={"limit": 0})

        assert response.status_code == 400
        assert response.json()["detail"]["type"] == "VALIDATION_ERROR"

    def test_create_without_auth_fails(self, client, post):
        """Should return 401 when not authenticated."""
        response = client.post(
            "/comments", json={"post_id": str(post.id), "content": "Hello"}
        )

        assert response.status_code == 401
        assert "Authentication required" in response.json()["detail"]

    def test_create_with_empty_content_fails(self, client, post, auth_cookies):
        response = client.post(
            "/comments",
            json={"post_id": str(post.id), "content": "   "},
            cookies=auth_cookies,
        )

        assert response.status_code == 400

    def test_create_reply_and_read_thread(self, client, post, auth_cookies):
        """Comments created over HTTP show up nested in the thread."""
        # Act
        created = client.post(
            "/comments",
            json={"post_id": str(post.id), "content": "First!"},
            cookies=auth_cookies,
        )
        parent_id = created.json()["comment"]["id"]
        reply = client.post(
            "/comments",
            json={
                "post_id": str(post.id),
                "content": "Second",
                "parent_id": parent_id,
            },
            cookies=auth_cookies,
        )
        thread = client.get(f"/comments/post/{post.id}")

        # Assert
        assert created.status_code == 201
        assert created.json()["message"] == "Comment created successfully"
        assert reply.status_code == 201
        assert reply.json()["message"] == "Reply created successfully"

        body = thread.json()
        assert thread.status_code == 200
        assert body["total_count"] == 2
        [top] = body["comments"]
        assert top["id"] == parent_id
        assert [r["content"] for r in top["replies"]] == ["Second"]

    def test_hierarchical_thread_includes_metrics(self, client, post, auth_cookies):
        client.post(
            "/comments",
            json={"post_id": str(post.id), "content": "Ranked"},
            cookies=auth_cookies,
        )

        response = client.get(
            f"/comments/post/{post.id}/hierarchical", params={"sort": "best"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["sort"] == "best"
        assert body["comments"][0]["metrics"] is not None

    def test_edit_by_other_user_is_forbidden(self, client, post, auth_cookies):
        created = client.post(
            "/comments",
            json={"post_id": str(post.id), "content": "Mine"},
            cookies=auth_cookies,
        )
        other = JWTService(Settings().auth).create_token(str(uuid4()), "dave")

        response = client.put(
            f"/comments/{created.json()['comment']['id']}",
            json={"content": "Yours"},
            cookies={"auth_token": other},
        )

        assert response.status_code == 403
        assert response.json()["detail"]["type"] == "FORBIDDEN"

    def test_delete_own_comment(self, client, post, auth_cookies):
        created = client.post(
            "/comments",
            json={"post_id": str(post.id), "content": "Short lived"},
            cookies=auth_cookies,
        )
        comment_id = created.json()["comment"]["id"]

        response = client.delete(f"/comments/{comment_id}", cookies=auth_cookies)

        assert response.status_code == 200
        assert response.json()["message"] == "Comment deleted successfully"
        assert client.get(f"/comments/{comment_id}").status_code == 404
