"""User View — explicit projection of a stored User onto its wire-visible subset.

Invariants:
    - The view carries id, email, first/last name and birth date only
    - address and phone_number never leave the service
    - birth_date is rendered as an ISO date string (YYYY-MM-DD)
"""

from dataclasses import dataclass

from userprofile.core.repository_protocols import UserLike


@dataclass(frozen=True)
class UserView:
    """Externally visible projection of a User record."""
    id: int | None
    email: str | None
    first_name: str | None
    last_name: str | None
    birth_date: str | None


def to_user_view(user: UserLike) -> UserView:
    return UserView(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        birth_date=user.birth_date.isoformat() if user.birth_date else None,
    )
