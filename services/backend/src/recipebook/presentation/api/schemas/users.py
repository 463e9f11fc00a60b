"""User account schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from recipebook_auth import PasswordHashingService
from recipebook_identity import ProfileView, UserProjection

PASSWORD_MIN_LENGTH = 8
# bcrypt ignores (and newer releases reject) anything past 72 bytes
PASSWORD_MAX_LENGTH = PasswordHashingService.MAX_BYTES


def _check_password_bytes(value: str) -> str:
    """Non-ASCII characters take several bytes; bcrypt counts bytes."""
    if len(value.encode("utf-8")) > PASSWORD_MAX_LENGTH:
        msg = f"Password cannot exceed {PASSWORD_MAX_LENGTH} bytes in UTF-8"
        raise ValueError(msg)
    return value


class CreateUserRequest(BaseModel):
    """Request schema for signing up."""

    user_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., description="Contact address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password (8-72 characters, at most 72 bytes in UTF-8)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_name": "alice",
                "email": "alice@example.com",
                "password": "securepassword123",
            },
        },
    )

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_bytes(v)


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a user's password."""

    new_password1: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )
    new_password2: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )

    @field_validator("new_password1", "new_password2")
    @classmethod
    def _passwords_fit_bcrypt(cls, v: str) -> str:
        return _check_password_bytes(v)


class UserResponse(BaseModel):
    """Response schema for user data."""

    id: int
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_projection(cls, projection: UserProjection) -> "UserResponse":
        return cls.model_validate(projection)


class UserActionResponse(BaseModel):
    """Response schema for a successful sign-up or password change."""

    user: UserResponse
    message: str | None = None


class ProfileResponse(BaseModel):
    """Profile page data; either the user or an error is set."""

    user: UserResponse | None = None
    recipe_count: int | None = None
    error: str | None = None

    @classmethod
    def from_view(cls, view: ProfileView) -> "ProfileResponse":
        return cls(
            user=UserResponse.from_projection(view.user),
            recipe_count=view.recipe_count,
        )


class SignupFormResponse(BaseModel):
    """Describes the fields the sign-up endpoint expects."""

    action: str
    fields: dict[str, str]
