"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from linkboard.application.usecase.post import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    SubmitPostRequest,
    SubmitPostResponse,
    SubmitPostUseCase,
)
from linkboard.domain.error import DomainError
from linkboard.domain.service import JWTService
from linkboard.interface.api.errors import (
    domain_error_to_http,
    require_user_id,
    unexpected_error_to_http,
)

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class SubmitPostAPIRequest(BaseModel):
    """API request for submitting a post.

    Lengths and URL shape are checked by the domain so the offending
    field is reported consistently.
    """

    title: str
    body: str | None = None
    url: str | None = None


@router.post("", response_model=SubmitPostResponse, status_code=status.HTTP_201_CREATED)
async def submit_post(
    request: SubmitPostAPIRequest,
    submit_post_use_case: FromDishka[SubmitPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SubmitPostResponse:
    """Submit a post for moderation.

    Requires authentication. The post stays hidden until approved.

    Args:
        request: Post data
        submit_post_use_case: Submit post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Stored post in the pending state

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await submit_post_use_case.execute(
            SubmitPostRequest(
                title=request.title,
                body=request.body,
                url=request.url,
                author_id=user_id,
            )
        )
    except DomainError as e:
        raise domain_error_to_http(e, "submit post")
    except Exception as e:
        raise unexpected_error_to_http(e, "submit post")


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List approved posts, newest first.

    Authentication is optional; signed-in callers also get their own vote
    on each post.

    Args:
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Approved posts with author display names
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await list_posts_use_case.execute(ListPostsRequest(user_id=user_id))
    except DomainError as e:
        raise domain_error_to_http(e, "list posts")
    except Exception as e:
        raise unexpected_error_to_http(e, "list posts")
