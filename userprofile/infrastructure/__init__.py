"""Infrastructure — database sessions, the SQL user store, and logging setup.

Invariants:
    - Everything here does IO; nothing here makes business decisions
"""
