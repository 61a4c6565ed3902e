"""Fluent, chainable property validation."""

from propchain.validation import (
    Check,
    CheckResult,
    CheckStatus,
    PropertyAccessor,
    ValidationChain,
    ValidationFailedError,
    ValidationService,
    attr,
    begin,
    key,
    prop,
)

__version__ = "0.1.0"

__all__ = [
    "Check",
    "CheckResult",
    "CheckStatus",
    "PropertyAccessor",
    "ValidationChain",
    "ValidationFailedError",
    "ValidationService",
    "attr",
    "begin",
    "key",
    "prop",
]
