"""Boundary Protocols — contracts between the user service and its store.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every store call is atomic on its own; no cross-call transaction is promised
    - find_by_birth_date_range is inclusive on both ends

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL store and the test fake
      share no base class
    - Async methods: implementations do IO; the rules in enforce_user_rules.py
      stay synchronous and pure
"""

from datetime import date
from typing import Protocol, Sequence

from userprofile.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for User records handed between store and service.

    Lets the service and the view projection work on ORM rows and test
    doubles alike without importing the ORM model.
    """
    id: int | None
    email: str | None
    first_name: str | None
    last_name: str | None
    birth_date: date | None
    address: str | None
    phone_number: str | None


class UserStore(Protocol):
    """Contract for user persistence — implemented by infrastructure/user_store.py."""
    async def get(self, user_id: UserId) -> UserLike | None: ...
    async def save(self, user: UserLike) -> UserLike: ...
    async def delete(self, user_id: UserId) -> None: ...
    async def exists_by_email(self, email: str) -> bool: ...
    async def exists_by_id(self, user_id: UserId) -> bool: ...
    async def find_by_birth_date_range(
        self, start: date, end: date,
    ) -> Sequence[UserLike]: ...
