"""Validation service for running a fixed set of checks.

This module provides a service layer that applies the same checks to many
subjects and formats chain results for display.
"""

from collections.abc import Iterable
from typing import Any

from propchain.utils.logging import get_logger
from propchain.validation.chain import Check, ValidationChain

logger = get_logger(__name__)


class ValidationService:
    """Applies a list of checks to subjects and reports on the outcome."""

    def __init__(self, checks: Iterable[Check], stop_on_first_failure: bool | None = None):
        """Initialize service with list of checks.

        Args:
            checks: Checks evaluated in order against every subject
            stop_on_first_failure: Chain policy, None uses the configured default
        """
        self.checks = list(checks)
        self.stop_on_first_failure = stop_on_first_failure

    def validate(self, subject: Any) -> ValidationChain:
        """Run all checks against one subject.

        Args:
            subject: Object to validate

        Returns:
            The finished ValidationChain
        """
        chain = ValidationChain.begin(
            subject, stop_on_first_failure=self.stop_on_first_failure
        ).apply(self.checks)
        logger.debug(
            "Validated subject", checks=len(chain), valid=chain.is_valid()
        )
        return chain

    def validate_all(self, subjects: Iterable[Any]) -> list[ValidationChain]:
        """Run all checks against each subject, preserving input order."""
        return [self.validate(subject) for subject in subjects]

    def has_errors(self, chains: Iterable[ValidationChain]) -> bool:
        """Check if any chain recorded a failure.

        Args:
            chains: Chains returned by validate() or validate_all()

        Returns:
            True if any chain is invalid
        """
        return any(not chain.is_valid() for chain in chains)

    def format_error_report(self, chain: ValidationChain) -> str:
        """Format failures as one line per failed check.

        Returns:
            Error report string, empty if the chain is valid
        """
        return "\n".join(r.format_error() for r in chain.failures())

    def format_results(self, chain: ValidationChain) -> str:
        """Format every result, including passed and skipped checks."""
        return "\n".join(r.format_line() for r in chain.results())
