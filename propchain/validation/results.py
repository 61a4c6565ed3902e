"""Validation result types.

This module defines the structured outcome of a single property check.
Results are tagged values compared by status and fields, so two
independently built passed results for the same property are equal.
"""

from dataclasses import dataclass
from enum import Enum

from propchain.const import STATUS_LABELS


class CheckStatus(str, Enum):
    """Outcome of one check in a validation chain"""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self.value]


@dataclass(frozen=True)
class CheckResult:
    """Immutable result of one property check.

    ``message`` is only set for failed checks. Skipped checks keep the
    property name so a report can show which checks never ran.
    """

    status: CheckStatus
    property_name: str
    message: str | None = None

    @classmethod
    def passed(cls, property_name: str) -> "CheckResult":
        return cls(CheckStatus.PASSED, property_name)

    @classmethod
    def failed(cls, property_name: str, message: str) -> "CheckResult":
        return cls(CheckStatus.FAILED, property_name, message)

    @classmethod
    def skipped(cls, property_name: str) -> "CheckResult":
        return cls(CheckStatus.SKIPPED, property_name)

    @property
    def is_passed(self) -> bool:
        return self.status is CheckStatus.PASSED

    @property
    def is_failed(self) -> bool:
        """Check if the predicate rejected the value or could not be evaluated."""
        return self.status is CheckStatus.FAILED

    @property
    def is_skipped(self) -> bool:
        return self.status is CheckStatus.SKIPPED

    def format_error(self) -> str:
        """Format error message for error reports.

        Returns empty string unless the check failed.
        """
        if not self.is_failed:
            return ""
        return f"{self.property_name}: {self.message}"

    def format_line(self) -> str:
        """One report line: status label, property name and any message."""
        line = f"[{self.status.label}] {self.property_name}"
        if self.message:
            line = f"{line}: {self.message}"
        return line
