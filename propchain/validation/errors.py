"""Exceptions raised by the validation package."""

from propchain.validation.results import CheckResult


class ValidationFailedError(ValueError):
    """Raised on request when a chain holds a failed check."""

    def __init__(self, result: CheckResult):
        self.result = result
        super().__init__(result.format_error())
