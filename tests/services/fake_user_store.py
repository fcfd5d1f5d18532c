"""In-Memory User Store — UserStore double that records every write.

Invariants:
    - Assigns sequential integer ids on first save, like the SQL store
    - get() returns the stored object itself, so in-place mutation is visible
    - writes / deletes count store mutations for "no write on failure" assertions
    - find_by_birth_date_range is inclusive and ordered by id

Design Decisions:
    - Flat class, no inheritance: satisfies the UserStore Protocol structurally
"""

from datetime import date


class InMemoryUserStore:
    def __init__(self):
        self.users = {}
        self.writes = 0
        self.deletes = 0
        self._next_id = 1

    def seed(self, user):
        """Insert without counting a write (test setup)."""
        if user.id is None:
            user.id = self._next_id
            self._next_id += 1
        self.users[user.id] = user
        return user

    async def get(self, user_id):
        return self.users.get(user_id)

    async def save(self, user):
        self.writes += 1
        return self.seed(user)

    async def delete(self, user_id):
        self.deletes += 1
        self.users.pop(user_id, None)

    async def exists_by_email(self, email):
        return any(u.email == email for u in self.users.values())

    async def exists_by_id(self, user_id):
        return user_id in self.users

    async def find_by_birth_date_range(self, start: date, end: date):
        return [
            u for _, u in sorted(self.users.items())
            if u.birth_date is not None and start <= u.birth_date <= end
        ]
