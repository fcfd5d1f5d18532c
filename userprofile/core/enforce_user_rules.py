"""User Rule Enforcement — pure checks behind the user service's decisions.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no clock reads
    - "today" is always passed in by the caller
    - Violations raise the matching UserProfileError; success returns None

Design Decisions:
    - Raise instead of returning error dicts: the service aborts on the first
      violation and must never reach a store write afterwards
    - Age is a calendar period, not days / 365: a birthday not yet reached this
      year does not count, and a 29 Feb birthday completes on 1 Mar in
      non-leap years
"""

from datetime import date

from userprofile.core.errors import InvalidDateRangeError, UserLowAgeError


def compute_age(birth_date: date, today: date) -> int:
    """Whole years elapsed between birth_date and today (negative if born in the future)."""
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def check_minimum_age(birth_date: date, today: date, min_age: int) -> None:
    """Age at creation must be >= min_age (boundary inclusive)."""
    if compute_age(birth_date, today) < min_age:
        raise UserLowAgeError(min_age)


def check_date_range(start_date: date, end_date: date) -> None:
    """Range search requires start <= end; equal dates are a one-day window."""
    if start_date > end_date:
        raise InvalidDateRangeError()
