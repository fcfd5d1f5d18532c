"""User View — tests for the explicit wire projection."""

from dataclasses import asdict
from datetime import date

from userprofile.core.user_view import to_user_view
from userprofile.models.user import User


def test_to_user_view_projects_visible_fields_only():
    user = User(
        id=7, email="a@x.com", first_name="Ann", last_name="Lee",
        birth_date=date(2000, 1, 1), address="1 Main St", phone_number="555",
    )
    view = to_user_view(user)
    assert asdict(view) == {
        "id": 7,
        "email": "a@x.com",
        "first_name": "Ann",
        "last_name": "Lee",
        "birth_date": "2000-01-01",
    }


def test_to_user_view_keeps_missing_birth_date_as_none():
    view = to_user_view(User(id=1, email="a@x.com"))
    assert view.birth_date is None
