"""End-to-end tests for thread, comment and vote endpoints."""

import asyncio
from uuid import UUID, uuid4

import pytest
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from discuss.config import Settings
from discuss.domain.repository import ParentEntityPort
from discuss.domain.service import JWTService
from discuss.domain.value import ParentId, ParentKind
from discuss.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container shared by the app and the test body."""
    return build_test_container(extra_providers=[FastapiProvider()])


@pytest.fixture
def ports(container) -> dict[ParentKind, ParentEntityPort]:
    """In-memory parent entity ports backing the app."""
    return asyncio.run(container.get(dict[ParentKind, ParentEntityPort]))


@pytest.fixture
def client(container):
    """Create test client with test container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def post_id(ports) -> str:
    """An existing post with no comments yet."""
    parent_id = ParentId(uuid4())
    ports[ParentKind.POST].add(parent_id)
    return str(parent_id)


def login(client: TestClient, user_id: str) -> None:
    """Authenticate subsequent requests as ``user_id``."""
    token = JWTService(Settings().auth).issue_token(user_id)
    client.cookies.set("auth_token", token)


def comment_count(ports, kind: ParentKind, parent_id: str) -> int:
    return asyncio.run(ports[kind].get_comment_count(ParentId(UUID(parent_id))))


def find_node(items: list[dict], comment_id: str) -> dict | None:
    """Depth-first search of a listing for a comment."""
    stack = list(items)
    while stack:
        node = stack.pop()
        if node["comment_id"] == comment_id:
            return node
        stack.extend(node["replies"])
    return None


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestThreadLifecycle:
    """Walks one thread through create, reply, vote and delete."""

    def test_full_thread_lifecycle(self, client, ports, post_id):
        author = str(uuid4())
        voter = str(uuid4())
        login(client, author)

        # Root comment C1
        response = client.post(f"/posts/{post_id}/comments", json={"content": "C1"})
        assert response.status_code == 201
        c1 = response.json()["comment_id"]
        assert comment_count(ports, ParentKind.POST, post_id) == 1
        assert client.get(f"/posts/{post_id}/comments").json()["total"] == 1

        # Reply C2 under C1
        response = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "C2", "parent_comment_id": c1},
        )
        assert response.status_code == 201
        c2 = response.json()["comment_id"]
        assert comment_count(ports, ParentKind.POST, post_id) == 2
        listing = client.get(f"/posts/{post_id}/comments").json()
        assert listing["total"] == 1
        assert listing["items"][0]["replies"][0]["comment_id"] == c2

        # Voter upvotes C2 twice
        login(client, voter)
        for _ in range(2):
            response = client.post(f"/comments/{c2}/upvote")
            assert response.status_code == 200
        assert response.json()["upvotes"] == 1
        node = find_node(client.get(f"/posts/{post_id}/comments").json()["items"], c2)
        assert node["upvotes"] == 1
        assert node["viewer_vote"] == "UPVOTE"

        # Delete C1, which has a reply
        login(client, author)
        response = client.delete(f"/comments/{c1}")
        assert response.status_code == 200
        assert response.json()["removed"] is False
        assert comment_count(ports, ParentKind.POST, post_id) == 2
        items = client.get(f"/posts/{post_id}/comments").json()["items"]
        root = find_node(items, c1)
        assert root["content"] == "[deleted]"
        assert root["deleted"] is True
        assert root["replies"][0]["comment_id"] == c2

        # Delete C2, now a leaf
        response = client.delete(f"/comments/{c2}")
        assert response.status_code == 200
        assert response.json()["removed"] is True
        assert comment_count(ports, ParentKind.POST, post_id) == 1
        items = client.get(f"/posts/{post_id}/comments").json()["items"]
        assert find_node(items, c2) is None
        assert find_node(items, c1)["replies"] == []

    def test_downvote_then_remove_vote(self, client, post_id):
        login(client, str(uuid4()))
        c1 = client.post(f"/posts/{post_id}/comments", json={"content": "Hmm"}).json()[
            "comment_id"
        ]

        response = client.post(f"/comments/{c1}/downvote")
        assert response.json()["downvotes"] == 1

        response = client.delete(f"/comments/{c1}/vote")
        assert response.status_code == 200
        assert response.json()["success"] is True

        response = client.delete(f"/comments/{c1}/vote")
        assert response.status_code == 404

    def test_edit_comment(self, client, post_id):
        author = str(uuid4())
        login(client, author)
        c1 = client.post(f"/posts/{post_id}/comments", json={"content": "Typo"}).json()[
            "comment_id"
        ]

        response = client.patch(f"/comments/{c1}", json={"content": "Fixed"})

        assert response.status_code == 200
        assert response.json()["content"] == "Fixed"

    def test_review_threads(self, client, ports):
        review_id = ParentId(uuid4())
        ports[ParentKind.REVIEW].add(review_id)
        login(client, str(uuid4()))

        response = client.post(
            f"/reviews/{review_id}/comments", json={"content": "On a review"}
        )

        assert response.status_code == 201
        assert response.json()["parent_kind"] == "review"
        listing = client.get(f"/reviews/{review_id}/comments").json()
        assert listing["total"] == 1
        # Same ID under posts is a different, empty thread
        assert client.get(f"/posts/{review_id}/comments").json()["total"] == 0


class TestPagination:
    def test_roots_are_paged_newest_first(self, client, post_id):
        login(client, str(uuid4()))
        created = [
            client.post(
                f"/posts/{post_id}/comments", json={"content": f"Root {i}"}
            ).json()["comment_id"]
            for i in range(3)
        ]

        first = client.get(f"/posts/{post_id}/comments?page=1&limit=2").json()
        second = client.get(f"/posts/{post_id}/comments?page=2&limit=2").json()

        assert [item["comment_id"] for item in first["items"]] == created[:0:-1]
        assert [item["comment_id"] for item in second["items"]] == [created[0]]
        assert first["total"] == second["total"] == 3
        assert first["pagination"]["pages"] == 2

    def test_out_of_range_values_are_clamped(self, client, post_id):
        response = client.get(f"/posts/{post_id}/comments?page=0&limit=0")

        assert response.status_code == 200
        pagination = response.json()["pagination"]
        assert (pagination["page"], pagination["limit"]) == (1, 1)


class TestErrors:
    def test_create_requires_auth(self, client, post_id):
        response = client.post(f"/posts/{post_id}/comments", json={"content": "Hi"})

        assert response.status_code == 401

    def test_invalid_token_is_unauthenticated(self, client, post_id):
        client.cookies.set("auth_token", "not-a-jwt")

        response = client.post(f"/posts/{post_id}/comments", json={"content": "Hi"})

        assert response.status_code == 401

    def test_unknown_post_is_not_found(self, client):
        login(client, str(uuid4()))

        response = client.post(f"/posts/{uuid4()}/comments", json={"content": "Hi"})

        assert response.status_code == 404

    def test_malformed_id_is_bad_request(self, client):
        response = client.get("/posts/not-a-uuid/comments")

        assert response.status_code == 400

    def test_blank_content_is_rejected(self, client, post_id):
        login(client, str(uuid4()))

        response = client.post(f"/posts/{post_id}/comments", json={"content": "   "})

        assert response.status_code == 400

    def test_non_author_cannot_edit_or_delete(self, client, post_id):
        login(client, str(uuid4()))
        c1 = client.post(f"/posts/{post_id}/comments", json={"content": "Mine"}).json()[
            "comment_id"
        ]

        login(client, str(uuid4()))
        assert client.patch(f"/comments/{c1}", json={"content": "Ours"}).status_code == 403
        assert client.delete(f"/comments/{c1}").status_code == 403

        items = client.get(f"/posts/{post_id}/comments").json()["items"]
        assert find_node(items, c1)["content"] == "Mine"

    def test_reply_to_other_thread_conflicts(self, client, ports, post_id):
        other_post = ParentId(uuid4())
        ports[ParentKind.POST].add(other_post)
        login(client, str(uuid4()))
        elsewhere = client.post(
            f"/posts/{other_post}/comments", json={"content": "Elsewhere"}
        ).json()["comment_id"]

        response = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "Reply", "parent_comment_id": elsewhere},
        )

        assert response.status_code == 409


class TestUserComments:
    def test_lists_user_comments(self, client, post_id):
        author = str(uuid4())
        login(client, author)
        for i in range(3):
            client.post(f"/posts/{post_id}/comments", json={"content": f"#{i}"})

        response = client.get(f"/users/{author}/comments?limit=2")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert len(data["items"]) == 2
