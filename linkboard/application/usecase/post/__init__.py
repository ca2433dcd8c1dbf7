"""Post use cases."""

from .list_posts import (
    ListPendingPostsRequest,
    ListPendingPostsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostListItem,
)
from .moderate_post import (
    ModeratePostRequest,
    ModeratePostResponse,
    ModeratePostUseCase,
)
from .submit_post import SubmitPostRequest, SubmitPostResponse, SubmitPostUseCase

__all__ = [
    "ListPendingPostsRequest",
    "ListPendingPostsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "ModeratePostRequest",
    "ModeratePostResponse",
    "ModeratePostUseCase",
    "PostListItem",
    "SubmitPostRequest",
    "SubmitPostResponse",
    "SubmitPostUseCase",
]
