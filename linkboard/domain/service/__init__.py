"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .post_service import PostService
from .profile_service import ProfileService
from .vote_service import VoteService

__all__ = [
    "JWTService",
    "PostService",
    "ProfileService",
    "Service",
    "VoteService",
]
