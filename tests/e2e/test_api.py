"""End-to-end tests through the HTTP API.

The app runs on a test container with in-memory persistence, so state
persists across requests within a test.
"""

from uuid import uuid4

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError

from linkboard.config import Settings
from linkboard.domain.model import Profile
from linkboard.interface.api.app import create_app
from linkboard.persistence.error import backing_store_errors
from linkboard.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryVoteRepository,
)
from linkboard.util.jwt import create_token
from tests.conftest import make_profile
from tests.di import build_test_container


class Board:
    """HTTP client plus direct access to the backing store."""

    def __init__(self, client: httpx.AsyncClient, store: InMemoryStore) -> None:
        self.client = client
        self.store = store

    def add_profile(self, name: str, is_admin: bool = False) -> Profile:
        profile = make_profile(name, is_admin)
        self.store.profiles[profile.id] = profile
        return profile

    @staticmethod
    def auth(profile: Profile) -> dict[str, str]:
        return Board.session(str(profile.id))

    @staticmethod
    def session(subject: str) -> dict[str, str]:
        token = create_token(subject, Settings().auth)
        return {"Cookie": f"auth_token={token}"}

    async def submit(self, author: Profile, **fields) -> httpx.Response:
        body = {"title": "A link worth reading", "url": "https://example.com/a"}
        body.update(fields)
        return await self.client.post("/posts", json=body, headers=self.auth(author))

    async def decide(self, admin: Profile, post_id: str, decision: str):
        return await self.client.post(
            f"/moderation/posts/{post_id}/decision",
            json={"decision": decision},
            headers=self.auth(admin),
        )

    async def vote(self, voter: Profile, post_id: str, value: int):
        return await self.client.post(
            f"/posts/{post_id}/vote", json={"value": value}, headers=self.auth(voter)
        )


@pytest_asyncio.fixture
async def board():
    container = build_test_container()
    app = create_app(container)
    store = await container.get(InMemoryStore)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield Board(client, store)

    await container.close()


class TestHealthAndIdentity:
    """Health and /me endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, board):
        response = await board.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_me(self, board):
        admin = board.add_profile("Root", is_admin=True)

        response = await board.client.get("/me", headers=board.auth(admin))

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == str(admin.id)
        assert data["display_name"] == "Root"
        assert data["is_admin"] is True

    @pytest.mark.asyncio
    async def test_me_requires_token(self, board):
        assert (await board.client.get("/me")).status_code == 401

        response = await board.client.get(
            "/me", headers={"Cookie": "auth_token=not-a-jwt"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_token_with_non_uuid_subject(self, board):
        """A signed token must still name an identity."""
        headers = board.session("not-a-uuid")

        me = await board.client.get("/me", headers=headers)
        submitted = await board.client.post(
            "/posts", json={"title": "Hello"}, headers=headers
        )

        assert me.status_code == 401
        assert submitted.status_code == 401
        assert board.store.posts == {}


class TestModerationFlow:
    """Submission, moderation and the public feed."""

    @pytest.mark.asyncio
    async def test_submit_approve_and_list(self, board):
        """A post reaches the feed only after approval."""
        # Arrange
        alice = board.add_profile("Alice")
        admin = board.add_profile("Root", is_admin=True)

        # Act
        submitted = await board.submit(alice, body="Short summary")
        post_id = submitted.json()["post_id"]
        feed_before = (await board.client.get("/posts")).json()
        queue = await board.client.get("/moderation/posts", headers=board.auth(admin))
        decided = await board.decide(admin, post_id, "approved")
        feed_after = (await board.client.get("/posts")).json()

        # Assert
        assert submitted.status_code == 201
        assert submitted.json()["status"] == "pending"
        assert feed_before["count"] == 0
        assert [p["post_id"] for p in queue.json()["posts"]] == [post_id]
        assert decided.status_code == 200
        assert decided.json()["status"] == "approved"
        assert decided.json()["moderator_id"] == str(admin.id)
        assert feed_after["count"] == 1
        assert feed_after["posts"][0]["author_display_name"] == "Alice"
        assert feed_after["posts"][0]["body"] == "Short summary"

    @pytest.mark.asyncio
    async def test_second_decision_conflicts(self, board):
        alice = board.add_profile("Alice")
        admin = board.add_profile("Root", is_admin=True)
        post_id = (await board.submit(alice)).json()["post_id"]
        await board.decide(admin, post_id, "rejected")

        response = await board.decide(admin, post_id, "approved")

        assert response.status_code == 409
        assert (await board.client.get("/posts")).json()["count"] == 0

    @pytest.mark.asyncio
    async def test_member_cannot_moderate(self, board):
        """Status stays pending and the queue stays hidden."""
        alice = board.add_profile("Alice")
        post_id = (await board.submit(alice)).json()["post_id"]

        decided = await board.decide(alice, post_id, "approved")
        queue = await board.client.get("/moderation/posts", headers=board.auth(alice))

        assert decided.status_code == 403
        assert queue.status_code == 403

    @pytest.mark.asyncio
    async def test_decision_on_unknown_post(self, board):
        admin = board.add_profile("Root", is_admin=True)

        response = await board.decide(admin, str(uuid4()), "approved")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_pending_is_not_a_valid_decision(self, board):
        alice = board.add_profile("Alice")
        admin = board.add_profile("Root", is_admin=True)
        post_id = (await board.submit(alice)).json()["post_id"]

        response = await board.decide(admin, post_id, "pending")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_anonymous_submission(self, board):
        """Nothing is stored."""
        response = await board.client.post("/posts", json={"title": "Hello"})

        assert response.status_code == 401
        assert board.store.posts == {}

    @pytest.mark.asyncio
    async def test_validation_error_names_field(self, board):
        alice = board.add_profile("Alice")

        response = await board.submit(alice, url="example dot com")

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "url"
        assert board.store.posts == {}


class TestVoting:
    """Voting over HTTP."""

    async def _approved_post(self, board) -> str:
        author = board.add_profile("Author")
        admin = board.add_profile("Root", is_admin=True)
        post_id = (await board.submit(author)).json()["post_id"]
        await board.decide(admin, post_id, "approved")
        return post_id

    @pytest.mark.asyncio
    async def test_vote_toggle_and_swing(self, board):
        """Up, then swing down, then retract."""
        # Arrange
        post_id = await self._approved_post(board)
        voter = board.add_profile("Voter")

        # Act
        up = await board.vote(voter, post_id, 1)
        swing = await board.vote(voter, post_id, -1)
        retract = await board.vote(voter, post_id, -1)

        # Assert
        assert up.json() == {"post_id": post_id, "vote_count": 1, "user_vote": 1}
        assert swing.json()["vote_count"] == -1
        assert swing.json()["user_vote"] == -1
        assert retract.json()["vote_count"] == 0
        assert retract.json()["user_vote"] == 0

    @pytest.mark.asyncio
    async def test_feed_reports_caller_vote(self, board):
        post_id = await self._approved_post(board)
        voter = board.add_profile("Voter")
        await board.vote(voter, post_id, 1)

        mine = (await board.client.get("/posts", headers=board.auth(voter))).json()
        anonymous = (await board.client.get("/posts")).json()

        assert mine["posts"][0]["user_vote"] == 1
        assert mine["posts"][0]["vote_count"] == 1
        assert anonymous["posts"][0]["user_vote"] == 0

    @pytest.mark.asyncio
    async def test_vote_requires_authentication(self, board):
        post_id = await self._approved_post(board)

        response = await board.client.post(
            f"/posts/{post_id}/vote", json={"value": 1}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_vote_on_pending_post_conflicts(self, board):
        author = board.add_profile("Author")
        post_id = (await board.submit(author)).json()["post_id"]

        response = await board.vote(author, post_id, 1)

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_vote_value_must_be_plus_or_minus_one(self, board):
        post_id = await self._approved_post(board)
        voter = board.add_profile("Voter")

        response = await board.vote(voter, post_id, 3)

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "value"

    @pytest.mark.asyncio
    async def test_vote_on_unknown_post(self, board):
        voter = board.add_profile("Voter")

        response = await board.vote(voter, str(uuid4()), 1)

        assert response.status_code == 404


class TestSession:
    """Profile registration and logout."""

    @pytest.mark.asyncio
    async def test_register_then_resolve(self, board):
        """A fresh identity names itself and can then submit."""
        # Arrange
        headers = board.session(str(uuid4()))

        # Act
        unknown = await board.client.get("/me", headers=headers)
        registered = await board.client.put(
            "/me", json={"display_name": "Alice"}, headers=headers
        )
        me = await board.client.get("/me", headers=headers)
        submitted = await board.client.post(
            "/posts", json={"title": "Hello"}, headers=headers
        )

        # Assert
        assert unknown.status_code == 401
        assert registered.status_code == 200
        assert registered.json()["is_admin"] is False
        assert me.json()["display_name"] == "Alice"
        assert submitted.status_code == 201

    @pytest.mark.asyncio
    async def test_register_requires_token(self, board):
        response = await board.client.put("/me", json={"display_name": "Alice"})

        assert response.status_code == 401
        assert board.store.profiles == {}

    @pytest.mark.asyncio
    async def test_register_rejects_blank_name(self, board):
        response = await board.client.put(
            "/me", json={"display_name": "  "}, headers=board.session(str(uuid4()))
        )

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "display_name"

    @pytest.mark.asyncio
    async def test_logout_clears_cookie(self, board):
        alice = board.add_profile("Alice")

        response = await board.client.post("/auth/logout", headers=board.auth(alice))

        assert response.status_code == 200
        assert response.json()["success"] is True
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("auth_token=")
        assert "Max-Age=0" in cookie


class TestStorageFailure:
    """Backing store outages surface as 503."""

    @pytest.mark.asyncio
    async def test_feed_unavailable(self, board, monkeypatch):
        # Arrange
        async def failing_find_by_status(self, status):
            with backing_store_errors("find_by_status"):
                raise OperationalError(
                    "SELECT * FROM posts", {}, ConnectionRefusedError("refused")
                )

        monkeypatch.setattr(
            InMemoryPostRepository, "find_by_status", failing_find_by_status
        )

        # Act
        response = await board.client.get("/posts")

        # Assert
        assert response.status_code == 503
        assert "refused" not in response.text

    @pytest.mark.asyncio
    async def test_vote_unavailable(self, board, monkeypatch):
        author = board.add_profile("Author")
        admin = board.add_profile("Root", is_admin=True)
        post_id = (await board.submit(author)).json()["post_id"]
        await board.decide(admin, post_id, "approved")

        async def failing_apply_vote(self, post_id, voter_id, value):
            with backing_store_errors("apply_vote"):
                raise OperationalError("UPDATE posts", {}, TimeoutError("timeout"))

        monkeypatch.setattr(InMemoryVoteRepository, "apply_vote", failing_apply_vote)

        response = await board.vote(author, post_id, 1)

        assert response.status_code == 503
