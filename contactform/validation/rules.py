"""Create-time validation schema for contact submissions.

Rules are evaluated in declaration order and the first failing rule wins, so
callers always see a single message describing the earliest problem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from contactform.core.exceptions import ValidationError
from contactform.core.queries import CONTACT_FIELDS

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
DOB_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def required(fields: Sequence[str]) -> Callable[[Mapping[str, Any]], bool]:
    def check(payload: Mapping[str, Any]) -> bool:
        return all(payload.get(name) not in (None, "") for name in fields)

    return check


def min_length(name: str, length: int) -> Callable[[Mapping[str, Any]], bool]:
    def check(payload: Mapping[str, Any]) -> bool:
        return len(str(payload[name])) >= length

    return check


def matches(name: str, pattern: re.Pattern) -> Callable[[Mapping[str, Any]], bool]:
    def check(payload: Mapping[str, Any]) -> bool:
        return pattern.fullmatch(str(payload[name])) is not None

    return check


@dataclass(frozen=True)
class Rule:
    check: Callable[[Mapping[str, Any]], bool]
    message: str


CONTACT_RULES: Sequence[Rule] = (
    Rule(required(CONTACT_FIELDS), "All fields are required"),
    Rule(min_length("name", 3), "Name must be at least 3 characters long"),
    Rule(matches("email", EMAIL_PATTERN), "Invalid email format"),
    Rule(matches("phone", PHONE_PATTERN), "Invalid phone number format"),
    Rule(min_length("location", 3), "Location must be at least 3 characters long"),
    Rule(matches("dob", DOB_PATTERN), "Invalid date of birth format"),
)


def first_violation(payload: Mapping[str, Any], rules: Sequence[Rule] = CONTACT_RULES) -> Optional[str]:
    for rule in rules:
        if not rule.check(payload):
            return rule.message
    return None


def validate_contact(payload: Mapping[str, Any], rules: Sequence[Rule] = CONTACT_RULES) -> None:
    """Raise `ValidationError` with the first failing rule's message."""

    message = first_violation(payload, rules)
    if message is not None:
        raise ValidationError(message)
