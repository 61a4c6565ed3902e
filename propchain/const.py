"""Constants used throughout the application."""

# Failure messages recorded in place of the caller's message
ACCESSOR_ERROR_MESSAGE = "Property could not be read"
PREDICATE_ERROR_MESSAGE = "Predicate raised an error"

# Result line labels used by the text report
STATUS_LABELS = {
    "passed": "PASS",
    "failed": "FAIL",
    "skipped": "SKIP",
}
