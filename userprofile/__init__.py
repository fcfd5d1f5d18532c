"""User Profile Service — CRUD and birth-date search for user profiles.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
