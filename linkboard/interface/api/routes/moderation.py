"""Moderation routes (administrators only)."""

from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from linkboard.application.usecase.post import (
    ListPendingPostsRequest,
    ListPendingPostsUseCase,
    ListPostsResponse,
    ModeratePostRequest,
    ModeratePostResponse,
    ModeratePostUseCase,
)
from linkboard.domain.error import DomainError
from linkboard.domain.service import JWTService
from linkboard.interface.api.errors import (
    domain_error_to_http,
    require_user_id,
    unexpected_error_to_http,
)

router = APIRouter(prefix="/moderation", tags=["moderation"], route_class=DishkaRoute)


class DecisionAPIRequest(BaseModel):
    """API request for a moderation decision."""

    decision: Literal["approved", "rejected"]


@router.get("/posts", response_model=ListPostsResponse)
async def list_pending_posts(
    use_case: FromDishka[ListPendingPostsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts awaiting review, newest first."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await use_case.execute(ListPendingPostsRequest(user_id=user_id))
    except DomainError as e:
        raise domain_error_to_http(e, "list pending posts")
    except Exception as e:
        raise unexpected_error_to_http(e, "list pending posts")


@router.post("/posts/{post_id}/decision", response_model=ModeratePostResponse)
async def decide_post(
    post_id: UUID,
    request: DecisionAPIRequest,
    use_case: FromDishka[ModeratePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModeratePostResponse:
    """Approve or reject a pending post.

    A post can be decided once; later decisions are refused with 409.

    Args:
        post_id: Post UUID
        request: Decision
        use_case: Moderate post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Post status after the decision
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await use_case.execute(
            ModeratePostRequest(
                post_id=str(post_id),
                decision=request.decision,
                moderator_id=user_id,
            )
        )
    except DomainError as e:
        raise domain_error_to_http(e, "moderate post")
    except Exception as e:
        raise unexpected_error_to_http(e, "moderate post")
