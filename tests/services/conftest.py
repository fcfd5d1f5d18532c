"""Service test fixtures — UserService over an in-memory store with a fixed clock.

Invariants:
    - Every test gets a fresh InMemoryUserStore
    - "today" is pinned to TODAY so age boundaries are deterministic
"""

from datetime import date

import pytest

from userprofile.models.user import User
from userprofile.services.user_service import UserService
from tests.services.fake_user_store import InMemoryUserStore

TODAY = date(2026, 10, 19)
MIN_AGE = 18


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def service(store):
    return UserService(store, MIN_AGE, today=lambda: TODAY)


@pytest.fixture
def existing_user(store):
    """A stored user with every field populated."""
    return store.seed(User(
        email="existing@example.com",
        first_name="FirstName",
        last_name="LastName",
        birth_date=date(1990, 1, 1),
        address="1234 Street",
        phone_number="1234567890",
    ))
