"""Fluent validation chain over a single subject.

Usage:
    chain = (
        ValidationChain.begin(person)
        .check(attr("Name", "name"), not_blank, "Name cannot be empty")
        .check(attr("Age", "age"), at_least(18), "Must be 18+")
    )
    if not chain.is_valid():
        print(chain.first_failure().format_error())

By default the chain is fail-fast: after the first failed check every
later check is recorded as skipped and neither its accessor nor its
predicate is called. Pass ``stop_on_first_failure=False`` (or set
STOP_ON_FIRST_FAILURE=false) to evaluate every check instead.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from propchain.config import get_settings
from propchain.utils.logging import get_logger
from propchain.validation.accessors import PropertyAccessor
from propchain.validation.errors import ValidationFailedError
from propchain.validation.results import CheckResult

logger = get_logger(__name__)

__all__ = [
    "Check",
    "ValidationChain",
    "begin",
]


@dataclass(frozen=True)
class Check:
    """One (accessor, predicate, message) triple, reusable across subjects."""

    accessor: PropertyAccessor
    predicate: Callable[[Any], bool]
    message: str


class ValidationChain:
    """Accumulates check results for one subject.

    The subject is only read, never copied or mutated. Results are kept in
    evaluation order. Not safe to share between threads.
    """

    def __init__(self, subject: Any, stop_on_first_failure: bool | None = None):
        settings = get_settings().validation
        if stop_on_first_failure is None:
            stop_on_first_failure = settings.stop_on_first_failure
        self._subject = subject
        self._stop_on_first_failure = stop_on_first_failure
        self._accessor_error_message = settings.accessor_error_message
        self._predicate_error_message = settings.predicate_error_message
        self._results: list[CheckResult] = []
        self._failed = False

    @classmethod
    def begin(
        cls, subject: Any, *, stop_on_first_failure: bool | None = None
    ) -> "ValidationChain":
        """Start a chain bound to ``subject``. No checks run yet."""
        return cls(subject, stop_on_first_failure)

    @property
    def subject(self) -> Any:
        return self._subject

    @property
    def stop_on_first_failure(self) -> bool:
        return self._stop_on_first_failure

    def check(
        self,
        accessor: PropertyAccessor,
        predicate: Callable[[Any], bool],
        message: str,
    ) -> "ValidationChain":
        """Evaluate one property check and record its outcome.

        Args:
            accessor: Named getter for the property under test
            predicate: Returns a truthy value when the property is valid
            message: Failure text recorded when the predicate rejects the value

        Returns:
            Self for method chaining

        Raises:
            TypeError: If the arguments are malformed. Accessor and
                predicate exceptions are recorded as failures instead.
        """
        if not isinstance(accessor, PropertyAccessor):
            raise TypeError(
                f"accessor must be a PropertyAccessor, got {type(accessor).__name__}"
            )
        if not callable(predicate):
            raise TypeError(f"predicate for '{accessor.name}' is not callable")
        if not isinstance(message, str):
            raise TypeError(f"message for '{accessor.name}' must be a string")

        if self._failed and self._stop_on_first_failure:
            logger.debug("Skipping check after failure", property=accessor.name)
            return self._record(CheckResult.skipped(accessor.name))

        try:
            value = accessor(self._subject)
        except Exception as e:
            logger.debug(
                "Accessor raised", property=accessor.name, error=type(e).__name__
            )
            return self._record(
                CheckResult.failed(accessor.name, self._accessor_error_message)
            )

        try:
            ok = bool(predicate(value))
        except Exception as e:
            logger.debug(
                "Predicate raised", property=accessor.name, error=type(e).__name__
            )
            return self._record(
                CheckResult.failed(accessor.name, self._predicate_error_message)
            )

        if ok:
            return self._record(CheckResult.passed(accessor.name))
        return self._record(CheckResult.failed(accessor.name, message))

    def apply(self, checks: Iterable[Check]) -> "ValidationChain":
        """Run a sequence of prepared checks in order."""
        for item in checks:
            self.check(item.accessor, item.predicate, item.message)
        return self

    def _record(self, result: CheckResult) -> "ValidationChain":
        self._results.append(result)
        if result.is_failed:
            self._failed = True
        return self

    def results(self) -> tuple[CheckResult, ...]:
        """Snapshot of all results in evaluation order."""
        return tuple(self._results)

    def is_valid(self) -> bool:
        return not self._failed

    def first_failure(self) -> CheckResult | None:
        return next((r for r in self._results if r.is_failed), None)

    def failures(self) -> list[CheckResult]:
        """All failed results. Holds at most one entry in fail-fast mode."""
        return [r for r in self._results if r.is_failed]

    def raise_if_invalid(self) -> "ValidationChain":
        """Raise ValidationFailedError for the first failure, if any.

        Returns:
            Self for method chaining when every check passed
        """
        failure = self.first_failure()
        if failure is not None:
            raise ValidationFailedError(failure)
        return self

    def __len__(self) -> int:
        return len(self._results)

    def __bool__(self) -> bool:
        return self.is_valid()

    def __repr__(self) -> str:
        return (
            f"ValidationChain(checks={len(self._results)}, valid={self.is_valid()})"
        )


def begin(subject: Any, *, stop_on_first_failure: bool | None = None) -> ValidationChain:
    """Shorthand for ValidationChain.begin."""
    return ValidationChain.begin(subject, stop_on_first_failure=stop_on_first_failure)
