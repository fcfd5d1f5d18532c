"""User Schemas — Pydantic request/response models for the /api/user boundary.

Invariants:
    - JSON keys are camelCase (firstName, birthDate, startDate...); Python names are snake_case
    - Pydantic parses types only (ISO dates, strings); presence and format rules
      run afterwards in core/validate_user_fields.py
    - UserResponse never exposes address or phoneNumber

Design Decisions:
    - alias_generator=to_camel + populate_by_name: accepts both spellings on input,
      FastAPI serializes responses by alias
    - UserDateRange keeps both dates required at the shape level: a range search
      without bounds is malformed, not a business-rule violation
"""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from userprofile.services.user_service import UserData


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_user_data(self) -> UserData:
        return UserData(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            birth_date=self.birth_date,
            address=self.address,
            phone_number=self.phone_number,
        )


class UserRequest(_CamelModel):
    """Create / full-update payload."""
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    address: str | None = None
    phone_number: str | None = None


class UserUpdateFields(_CamelModel):
    """Partial-update payload — omitted and null fields are left unchanged."""
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    address: str | None = None
    phone_number: str | None = None


class UserDateRange(BaseModel):
    """Inclusive birth-date window for range search."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start_date: date
    end_date: date


class UserResponse(BaseModel):
    """User view — public-facing user data."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int | None
    email: str | None
    first_name: str | None
    last_name: str | None
    birth_date: str | None
