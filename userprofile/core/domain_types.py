"""Domain Types — identity and field-name types shared across the codebase.

Invariants:
    - UserId wraps the store-assigned integer id — never set by callers
    - UserField enumerates the six mutable fields; its values are the wire (camelCase) names

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for field names: violations and logs carry the same names the client sent
"""

from enum import Enum
from typing import NewType


UserId = NewType("UserId", int)


class UserField(str, Enum):
    """Mutable User fields, valued by their JSON name."""
    EMAIL = "email"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    BIRTH_DATE = "birthDate"
    ADDRESS = "address"
    PHONE_NUMBER = "phoneNumber"
