"""User Routes — create, replace, patch, delete and range-search user profiles.

Invariants:
    - Field checks (core/validate_user_fields.py) run before the service is called;
      any violation raises FieldValidationError and the service never runs
    - Responses are UserResponse views (no address / phoneNumber)
    - DELETE answers with a plain-text confirmation message

Design Decisions:
    - POST /_search over GET with query params: the date window travels as a JSON
      body, same shape as every other request
"""

from datetime import date

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from userprofile.api.deps import get_user_service
from userprofile.core.domain_types import UserId
from userprofile.core.errors import FieldValidationError
from userprofile.core.validate_user_fields import (
    validate_user_fields_update,
    validate_user_request,
)
from userprofile.schemas.user import (
    UserDateRange,
    UserRequest,
    UserResponse,
    UserUpdateFields,
)
from userprofile.services.user_service import UserService

router = APIRouter(prefix="/api/user", tags=["users"])

DELETED_MESSAGE = "User was deleted successfully"


def _require_valid_user_request(body: UserRequest) -> None:
    violations = validate_user_request(
        body.email, body.first_name, body.last_name, body.birth_date, date.today(),
    )
    if violations:
        raise FieldValidationError(violations)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserRequest, service: UserService = Depends(get_user_service),
):
    """Create a new user profile."""
    _require_valid_user_request(body)
    view = await service.create_user(body.to_user_data())
    return UserResponse.model_validate(view)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UserRequest,
    service: UserService = Depends(get_user_service),
):
    """Replace every field of an existing user."""
    _require_valid_user_request(body)
    view = await service.update_user(UserId(user_id), body.to_user_data())
    return UserResponse.model_validate(view)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user_fields(
    user_id: int,
    body: UserUpdateFields,
    service: UserService = Depends(get_user_service),
):
    """Replace only the supplied fields of an existing user."""
    violations = validate_user_fields_update(
        body.email, body.birth_date, date.today(),
    )
    if violations:
        raise FieldValidationError(violations)
    view = await service.update_user_fields(UserId(user_id), body.to_user_data())
    return UserResponse.model_validate(view)


@router.delete("/{user_id}", response_class=PlainTextResponse)
async def remove_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    """Delete a user permanently."""
    await service.remove_user(UserId(user_id))
    return DELETED_MESSAGE


@router.post("/_search", response_model=list[UserResponse])
async def find_users_by_birth_date_range(
    body: UserDateRange, service: UserService = Depends(get_user_service),
):
    """List users born within [startDate, endDate], both inclusive."""
    views = await service.find_users_by_birth_date_range(
        body.start_date, body.end_date,
    )
    return [UserResponse.model_validate(v) for v in views]
