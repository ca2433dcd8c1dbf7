"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from linkboard.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from linkboard.domain.error import DomainError
from linkboard.domain.service import JWTService
from linkboard.interface.api.errors import (
    domain_error_to_http,
    require_user_id,
    unexpected_error_to_http,
)

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    value: int  # 1 or -1


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    post_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an approved post.

    Casting the vote you already hold retracts it; casting the opposite
    value replaces it.

    Args:
        post_id: Post UUID
        request: Vote value
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Post's vote count and the caller's vote after the cast

    Raises:
        HTTPException: If not authenticated, post not found or not approved
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(post_id=str(post_id), user_id=user_id, value=request.value)
        )
    except DomainError as e:
        raise domain_error_to_http(e, "cast vote")
    except Exception as e:
        raise unexpected_error_to_http(e, "cast vote")
