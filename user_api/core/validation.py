"""Validation Engine - table-driven field rules for user create/update payloads.

Invariants:
    - Rules evaluated in declaration order: field order first, then rule order within a field
    - All violations across fields are collected - never short-circuited at the first failure
    - A failing REQUIRED rule skips the remaining rules of that field only
    - NOT_FUTURE fails closed: an unparseable date fails it alongside DATE_FORMAT
    - UserValidator holds no mutable state - one instance is shared across requests

Design Decisions:
    - Plain (field, predicate, message) table over a reflection-based framework:
      rule order and message text stay explicit and testable
    - "today" passed in by the caller: the validator never reads the clock itself
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, Mapping

from user_api.core.domain_types import (
    DATE_FORMAT, NAME_MAX_LENGTH, NAME_MIN_LENGTH, RuleTag,
)
from user_api.core.errors import ValidationFailedError


_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_iso_date(raw: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date. Raises ValueError otherwise."""
    match = _ISO_DATE.fullmatch(raw)
    if not match:
        raise ValueError(f"date must be in {DATE_FORMAT} format: {raw!r}")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def _is_date(raw: str) -> bool:
    try:
        parse_iso_date(raw)
    except ValueError:
        return False
    return True


def _is_before_today(raw: str, today: date) -> bool:
    try:
        return parse_iso_date(raw) < today
    except ValueError:
        return False


@dataclass(frozen=True)
class FieldRule:
    """One declarative check: field key, display label, tag, predicate, message."""
    field: str
    label: str
    tag: RuleTag
    predicate: Callable[[str, date], bool]
    message: str

    def violation(self) -> str:
        return self.message.format(label=self.label)


USER_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "name", "name", RuleTag.REQUIRED,
        lambda v, _: v != "",
        "{label} is required",
    ),
    FieldRule(
        "name", "name", RuleTag.MIN_LENGTH,
        lambda v, _: len(v) >= NAME_MIN_LENGTH,
        f"{{label}} must be at least {NAME_MIN_LENGTH} characters",
    ),
    FieldRule(
        "name", "name", RuleTag.MAX_LENGTH,
        lambda v, _: len(v) <= NAME_MAX_LENGTH,
        f"{{label}} must be at most {NAME_MAX_LENGTH} characters",
    ),
    FieldRule(
        "dob", "dateOfBirth", RuleTag.REQUIRED,
        lambda v, _: v != "",
        "{label} is required",
    ),
    FieldRule(
        "dob", "dateOfBirth", RuleTag.DATE_FORMAT,
        lambda v, _: _is_date(v),
        f"{{label}} must be in {DATE_FORMAT} format",
    ),
    FieldRule(
        "dob", "dateOfBirth", RuleTag.NOT_FUTURE,
        _is_before_today,
        "{label} cannot be in the future",
    ),
)


class UserValidator:
    """Evaluates a fixed rule table against a {field: raw string} payload."""

    def __init__(self, rules: tuple[FieldRule, ...] = USER_RULES):
        self._rules = rules

    def validate(self, payload: Mapping[str, str | None], today: date) -> list[str]:
        """Return violation messages in rule order. Empty list means accepted."""
        messages: list[str] = []
        skipped: set[str] = set()
        for rule in self._rules:
            if rule.field in skipped:
                continue
            value = payload.get(rule.field) or ""
            if rule.predicate(value, today):
                continue
            messages.append(rule.violation())
            if rule.tag is RuleTag.REQUIRED:
                skipped.add(rule.field)
        return messages

    def check(self, payload: Mapping[str, str | None], today: date) -> None:
        """Raise ValidationFailedError when any rule is violated."""
        messages = self.validate(payload, today)
        if messages:
            raise ValidationFailedError(messages)
