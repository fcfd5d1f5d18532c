"""User Service — create, update, partially update, remove and range-search users.

Invariants:
    - Every rule check runs before any store write; a failed check writes nothing
    - create_user writes exactly once on success
    - Email uniqueness and minimum age are checked at creation only, never on update
    - update_user overwrites all six fields, None included
    - update_user_fields overwrites only fields supplied as non-None
    - Errors propagate untouched to api/error_handlers.py

Design Decisions:
    - Store, min_age and the clock are constructor arguments (composed in api/deps.py)
    - Check-then-write for email uniqueness is two store calls; concurrent creates
      with one email can both succeed (accepted, see DESIGN.md)
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from userprofile.core.domain_types import UserId
from userprofile.core.enforce_user_rules import check_date_range, check_minimum_age
from userprofile.core.errors import EmailAlreadyExistsError, UserNotFoundError
from userprofile.core.repository_protocols import UserLike, UserStore
from userprofile.core.user_view import UserView, to_user_view
from userprofile.models.user import User

logger = logging.getLogger(__name__)

USER_FIELDS = (
    "email", "first_name", "last_name", "birth_date", "address", "phone_number",
)


@dataclass
class UserData:
    """The six mutable User fields as supplied by a caller."""
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    address: str | None = None
    phone_number: str | None = None


class UserService:
    """Business rules and orchestration for the User entity."""

    def __init__(
        self,
        store: UserStore,
        min_age: int,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.min_age = min_age
        self._today = today

    async def create_user(self, data: UserData) -> UserView:
        if await self.store.exists_by_email(data.email):
            raise EmailAlreadyExistsError(data.email)
        check_minimum_age(data.birth_date, self._today(), self.min_age)

        user = User()
        _apply(user, data, skip_none=False)
        saved = await self.store.save(user)
        logger.info(f"User {saved.id} created", extra={"user_id": saved.id})
        return to_user_view(saved)

    async def update_user(self, user_id: UserId, data: UserData) -> UserView:
        user = await self._get_or_raise(user_id)
        _apply(user, data, skip_none=False)
        saved = await self.store.save(user)
        logger.info(f"User {user_id} replaced", extra={"user_id": user_id})
        return to_user_view(saved)

    async def update_user_fields(self, user_id: UserId, data: UserData) -> UserView:
        user = await self._get_or_raise(user_id)
        _apply(user, data, skip_none=True)
        saved = await self.store.save(user)
        logger.info(f"User {user_id} patched", extra={"user_id": user_id})
        return to_user_view(saved)

    async def remove_user(self, user_id: UserId) -> None:
        if not await self.store.exists_by_id(user_id):
            raise UserNotFoundError(user_id)
        await self.store.delete(user_id)
        logger.info(f"User {user_id} deleted", extra={"user_id": user_id})

    async def find_users_by_birth_date_range(
        self, start_date: date, end_date: date,
    ) -> list[UserView]:
        check_date_range(start_date, end_date)
        users = await self.store.find_by_birth_date_range(start_date, end_date)
        return [to_user_view(u) for u in users]

    async def _get_or_raise(self, user_id: UserId) -> UserLike:
        user = await self.store.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user


def _apply(user: UserLike, data: UserData, skip_none: bool) -> None:
    """Copy fields from data onto user; with skip_none, None means 'not supplied'."""
    for name in USER_FIELDS:
        value = getattr(data, name)
        if skip_none and value is None:
            continue
        setattr(user, name, value)
