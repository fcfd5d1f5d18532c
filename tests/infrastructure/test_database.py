"""Database Session Manager — SQLAlchemy failures surface as DatabaseError.

Tests cover:
    - Each SQLAlchemy exception family maps to DatabaseError with its operation
    - Domain errors pass through the session untouched
    - health_check reports True against a live engine
"""

import pytest
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)

from userprofile.core.errors import DatabaseError, UserNotFoundError
from userprofile.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


@pytest.mark.parametrize("raised, operation", [
    (IntegrityError("INSERT", {}, Exception("dup")), "commit"),
    (OperationalError("SELECT 1", {}, Exception("down")), "execute"),
    (DBAPIError("SELECT 1", {}, Exception("driver")), "query"),
    (SQLAlchemyError("boom"), "unknown"),
])
async def test_session_maps_sqlalchemy_errors_to_database_error(
    manager, raised, operation,
):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session():
            raise raised

    assert exc_info.value.operation == operation
    assert exc_info.value.code == "DATABASE_ERROR"
    assert exc_info.value.http_status == 503


async def test_session_lets_domain_errors_through(manager):
    with pytest.raises(UserNotFoundError):
        async with manager.session():
            raise UserNotFoundError(1)


async def test_health_check_against_live_engine(manager):
    assert await manager.health_check() is True
