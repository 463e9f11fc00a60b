"""Pydantic request/response schemas."""

from recipebook.presentation.api.schemas.common import ErrorResponse, HealthResponse
from recipebook.presentation.api.schemas.users import (
    ChangePasswordRequest,
    CreateUserRequest,
    ProfileResponse,
    SignupFormResponse,
    UserActionResponse,
    UserResponse,
)

__all__ = [
    "ChangePasswordRequest",
    "CreateUserRequest",
    "ErrorResponse",
    "HealthResponse",
    "ProfileResponse",
    "SignupFormResponse",
    "UserActionResponse",
    "UserResponse",
]
