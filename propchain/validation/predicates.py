"""Reusable predicates for common property checks."""

import re
from collections.abc import Callable, Collection
from typing import Any

Predicate = Callable[[Any], bool]


def not_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_not_none(value: Any) -> bool:
    return value is not None


def at_least(minimum) -> Predicate:
    return lambda value: value >= minimum


def at_most(maximum) -> Predicate:
    return lambda value: value <= maximum


def between(low, high) -> Predicate:
    """Inclusive range check."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return lambda value: low <= value <= high


def length_between(low: int, high: int) -> Predicate:
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return lambda value: low <= len(value) <= high


def matches(pattern: str | re.Pattern) -> Predicate:
    """Full-match a string value against a regular expression."""
    compiled = re.compile(pattern)
    return lambda value: compiled.fullmatch(value) is not None


def one_of(values: Collection) -> Predicate:
    allowed = frozenset(values)
    return lambda value: value in allowed
