"""Authentication routes.

Session tokens are signed by the identity provider with the shared
``jwt_secret``; these routes resolve, name and end a session.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from linkboard.application.usecase.auth import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
    RegisterProfileRequest,
    RegisterProfileResponse,
    RegisterProfileUseCase,
)
from linkboard.config import AuthSettings
from linkboard.domain.error import DomainError, NotFoundError
from linkboard.interface.api.errors import (
    domain_error_to_http,
    unexpected_error_to_http,
)
from linkboard.util.jwt import JWTError

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


class RegisterProfileAPIRequest(BaseModel):
    """API request for naming the caller's profile."""

    display_name: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _require_token(auth_token: str | None) -> str:
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return auth_token


@router.get("/me", response_model=GetCurrentIdentityResponse)
async def get_current_identity(
    use_case: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentIdentityResponse:
    """Get the signed-in identity.

    Args:
        use_case: Get current identity use case from DI
        auth_token: JWT token from cookie

    Returns:
        Display name and admin flag of the caller

    Raises:
        HTTPException: 401 if not authenticated or the profile is gone
    """
    token = _require_token(auth_token)

    try:
        return await use_case.execute(GetCurrentIdentityRequest(token=token))
    except (JWTError, NotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except DomainError as e:
        raise domain_error_to_http(e, "get current identity")


@router.put("/me", response_model=RegisterProfileResponse)
async def register_profile(
    request: RegisterProfileAPIRequest,
    use_case: FromDishka[RegisterProfileUseCase],
    auth_token: str | None = Cookie(default=None),
) -> RegisterProfileResponse:
    """Create or rename the signed-in identity's profile.

    Args:
        request: Chosen display name
        use_case: Register profile use case from DI
        auth_token: JWT token from cookie

    Returns:
        Saved profile

    Raises:
        HTTPException: 401 if not authenticated, 422 for a bad display name
    """
    token = _require_token(auth_token)

    try:
        return await use_case.execute(
            RegisterProfileRequest(token=token, display_name=request.display_name)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except DomainError as e:
        raise domain_error_to_http(e, "register profile")
    except Exception as e:
        raise unexpected_error_to_http(e, "register profile")


@router.post("/auth/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    auth_settings: FromDishka[AuthSettings],
) -> LogoutResponse:
    """Logout by clearing the session cookie.

    Args:
        response: FastAPI response object
        auth_settings: Authentication settings from DI

    Returns:
        Logout success message
    """
    response.delete_cookie(key=auth_settings.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")
