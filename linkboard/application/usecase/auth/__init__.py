"""Auth use cases."""

from .get_current_identity import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
)
from .register_profile import (
    RegisterProfileRequest,
    RegisterProfileResponse,
    RegisterProfileUseCase,
)

__all__ = [
    "GetCurrentIdentityRequest",
    "GetCurrentIdentityResponse",
    "GetCurrentIdentityUseCase",
    "RegisterProfileRequest",
    "RegisterProfileResponse",
    "RegisterProfileUseCase",
]
