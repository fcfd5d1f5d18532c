"""SQL User Store — tests against an in-memory SQLite database.

Tests cover:
    - save assigns an id on insert and keeps it on update
    - get / exists_by_id / exists_by_email
    - delete removes the row
    - find_by_birth_date_range is inclusive and ordered by id
"""

from datetime import date

from userprofile.infrastructure.user_store import SqlUserStore
from userprofile.models.user import User


def _user(email, birth_date=date(1990, 1, 1)):
    return User(
        email=email, first_name="F", last_name="L", birth_date=birth_date,
    )


async def test_save_assigns_id(test_db):
    store = SqlUserStore(test_db)

    saved = await store.save(_user("a@x.com"))

    assert saved.id is not None
    assert (await store.get(saved.id)).email == "a@x.com"


async def test_save_existing_user_updates_in_place(test_db):
    store = SqlUserStore(test_db)
    saved = await store.save(_user("a@x.com"))
    original_id = saved.id

    saved.first_name = "Changed"
    again = await store.save(saved)

    assert again.id == original_id
    assert (await store.get(original_id)).first_name == "Changed"


async def test_get_missing_returns_none(test_db):
    assert await SqlUserStore(test_db).get(404) is None


async def test_exists_by_email(test_db):
    store = SqlUserStore(test_db)
    await store.save(_user("a@x.com"))

    assert await store.exists_by_email("a@x.com") is True
    assert await store.exists_by_email("b@x.com") is False


async def test_exists_by_id(test_db):
    store = SqlUserStore(test_db)
    saved = await store.save(_user("a@x.com"))

    assert await store.exists_by_id(saved.id) is True
    assert await store.exists_by_id(saved.id + 1) is False


async def test_delete_removes_user(test_db):
    store = SqlUserStore(test_db)
    saved = await store.save(_user("a@x.com"))

    await store.delete(saved.id)

    assert await store.exists_by_id(saved.id) is False


async def test_find_by_birth_date_range_inclusive_and_ordered(test_db):
    store = SqlUserStore(test_db)
    await store.save(_user("late@x.com", date(2020, 12, 31)))
    await store.save(_user("early@x.com", date(2020, 1, 1)))
    await store.save(_user("outside@x.com", date(2019, 12, 31)))

    found = await store.find_by_birth_date_range(date(2020, 1, 1), date(2020, 12, 31))

    assert [u.email for u in found] == ["late@x.com", "early@x.com"]
