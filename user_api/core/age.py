"""Age Calculator - whole years elapsed between a date of birth and a reference date.

Invariants:
    - calculate_age is PURE: no IO, no clock reads, deterministic in its two inputs
    - Age drops by one until the month/day anniversary is reached in the reference year
    - Feb 29 births compare by plain (month, day) ordering - no leap-day special case

Design Decisions:
    - Reference date is UTC (today_utc): validation and age share one clock,
      so "not in the future" and "age >= 0" never disagree around midnight
"""

from datetime import date, datetime, timezone


def today_utc() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def calculate_age(dob: date, today: date) -> int:
    years = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        years -= 1
    return years
