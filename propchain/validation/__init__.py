"""Fluent property validation.

Checks are (accessor, predicate, message) triples evaluated in order
against one subject. The chain is fail-fast by default: checks after the
first failure are recorded as skipped without being evaluated.
"""

from propchain.validation.accessors import PropertyAccessor, attr, key, prop
from propchain.validation.chain import Check, ValidationChain, begin
from propchain.validation.errors import ValidationFailedError
from propchain.validation.results import CheckResult, CheckStatus
from propchain.validation.service import ValidationService

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
