"""Shared in-memory backing store."""

import asyncio
from collections import defaultdict

from linkboard.domain.model import Post, Profile, Vote
from linkboard.domain.value import PostId, UserId


class InMemoryStore:
    """Process-local tables shared by the in-memory repositories.

    Repositories are created per request; the store outlives them so state
    is visible across requests in the same container. ``post_locks`` holds
    at most one lock per stored post.
    """

    def __init__(self) -> None:
        self.profiles: dict[UserId, Profile] = {}
        self.posts: dict[PostId, Post] = {}
        self.votes: dict[tuple[PostId, UserId], Vote] = {}
        self.post_locks: defaultdict[PostId, asyncio.Lock] = defaultdict(asyncio.Lock)
