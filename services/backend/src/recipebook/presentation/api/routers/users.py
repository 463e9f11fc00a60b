"""User account router: profiles, sign-up and password changes."""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import JSONResponse

from recipebook.presentation.api.dependencies import (
    CurrentPrincipal,
    IdentityService,
    Profiles,
)
from recipebook.presentation.api.exception_handlers import (
    failure_response,
    status_for_failure,
)
from recipebook.presentation.api.schemas import (
    ChangePasswordRequest,
    CreateUserRequest,
    ErrorResponse,
    ProfileResponse,
    SignupFormResponse,
    UserActionResponse,
    UserResponse,
)
from recipebook_auth import Role
from recipebook_identity import (
    ChangePasswordRequest as ChangePasswordCommand,
)
from recipebook_identity import (
    CreateUserRequest as CreateUserCommand,
)
from recipebook_identity import (
    Outcome,
    ProfileView,
    UserProjection,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _profile_response(outcome: Outcome[ProfileView]) -> JSONResponse | ProfileResponse:
    if outcome.failure is not None:
        body = ProfileResponse(error=outcome.failure.message)
        return JSONResponse(
            status_code=status_for_failure(outcome.failure),
            content=body.model_dump(mode="json"),
        )
    return ProfileResponse.from_view(outcome.unwrap())


def _action_response(outcome: Outcome[UserProjection]) -> UserActionResponse:
    return UserActionResponse(
        user=UserResponse.from_projection(outcome.unwrap()),
        message=outcome.message,
    )


@router.get(
    "/",
    summary="Look up a user by name",
    response_model=ProfileResponse,
    responses={404: {"model": ProfileResponse, "description": "User not found"}},
)
async def get_user_by_name(
    _principal: CurrentPrincipal,  # Used for authorization check
    profiles: Profiles,
    name: Annotated[str, Query(min_length=1)],
) -> JSONResponse | ProfileResponse:
    outcome = await profiles.by_name(name)
    return _profile_response(outcome)


@router.get(
    "/details",
    summary="Show the caller's own profile",
    response_model=ProfileResponse,
    responses={404: {"model": ProfileResponse, "description": "User not found"}},
)
async def show_details(
    principal: CurrentPrincipal,
    profiles: Profiles,
) -> JSONResponse | ProfileResponse:
    """Profile of the authenticated user, including their recipe count."""
    outcome = await profiles.for_principal(principal)
    return _profile_response(outcome)


@router.get(
    "/id/{user_id}",
    summary="Look up a user by id",
    response_model=ProfileResponse,
    responses={404: {"model": ProfileResponse, "description": "User not found"}},
)
async def get_user_by_id(
    user_id: int,
    _principal: CurrentPrincipal,  # Used for authorization check
    profiles: Profiles,
) -> JSONResponse | ProfileResponse:
    outcome = await profiles.by_id(user_id)
    return _profile_response(outcome)


@router.get(
    "/signup",
    summary="Describe the sign-up form",
)
async def sign_up() -> SignupFormResponse:
    return SignupFormResponse(
        action="/user/create",
        fields={
            "user_name": "Login name, must be unique",
            "email": "Contact address",
            "password": "Password, 8 to 72 characters",
        },
    )


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new account",
    response_model=UserActionResponse,
    responses={
        201: {"description": "User created successfully"},
        409: {"model": ErrorResponse, "description": "User name already taken"},
        500: {"model": ErrorResponse, "description": "Account could not be created"},
    },
)
async def create_new_user(
    request: CreateUserRequest,
    identity: IdentityService,
) -> JSONResponse | UserActionResponse:
    outcome = await identity.create_user(
        CreateUserCommand(
            user_name=request.user_name,
            email=request.email,
            password=request.password,
        ),
    )
    if outcome.failure is not None:
        return failure_response(outcome.failure)
    return _action_response(outcome)


@router.post(
    "/{user_id}/change-password",
    summary="Change a user's password",
    response_model=UserActionResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Passwords do not match"},
        403: {"description": "Not allowed to change this password"},
        404: {"model": ErrorResponse, "description": "User not found"},
        500: {"model": ErrorResponse, "description": "Password could not be changed"},
    },
)
async def change_user_password(
    user_id: int,
    request: ChangePasswordRequest,
    principal: CurrentPrincipal,
    identity: IdentityService,
) -> JSONResponse | UserActionResponse:
    target = await identity.find_by_id(user_id)
    if (
        target is not None
        and target.name != principal.username
        and not principal.has_role(Role.ADMIN)
    ):
        logger.warning(
            "User %s tried to change the password of user %s",
            principal.username,
            user_id,
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only change your own password",
        )

    outcome = await identity.change_password(
        user_id,
        ChangePasswordCommand(
            new_password1=request.new_password1,
            new_password2=request.new_password2,
        ),
    )
    if outcome.failure is not None:
        previous = UserProjection.from_user(target) if target is not None else None
        return failure_response(outcome.failure, user=previous)
    return _action_response(outcome)
