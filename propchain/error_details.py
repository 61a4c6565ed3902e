"""Error message formatting for user-friendly exception handling."""

from pydantic import ValidationError

from propchain.validation.errors import ValidationFailedError


def _format_settings_error(error: ValidationError) -> str:
    """Format pydantic-settings load errors."""
    fields = ", ".join(
        ".".join(str(part) for part in err["loc"]) for err in error.errors()
    )
    return f"Invalid configuration ({fields}). Check your environment or .env file."


ERROR_TYPES = {
    ValidationFailedError: lambda e: f"Validation failed: {e}",
    ValidationError: lambda e: _format_settings_error(e),
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
