import logging
import sys

import structlog

from propchain.config import get_settings


def get_logger(name: str | None = None):
    """
    Get a logger with propchain prefix.

    Args:
        name: Module name (typically __name__). If None, returns root propchain logger.

    Returns:
        A structlog logger wrapping the stdlib logger of that name, so
        nothing is emitted below WARNING until setup_logging() runs.
    """
    if name is None:
        full_name = "propchain"
    elif name == "propchain" or name.startswith("propchain."):
        full_name = name
    else:
        full_name = f"propchain.{name}"
    return structlog.wrap_logger(
        logging.getLogger(full_name), wrapper_class=structlog.stdlib.BoundLogger
    )


logger = get_logger(__name__)


def setup_third_party_logging(debug_all: bool = False):
    """
    Configure third-party library logging levels.

    Args:
        debug_all: If True, enable verbose logging for all libraries.
                   If False, set third-party loggers to WARNING level.
    """

    if debug_all:
        return

    for log_name in list(logging.Logger.manager.loggerDict):
        if log_name == "propchain" or log_name.startswith("propchain."):
            continue
        logging.getLogger(log_name).setLevel(logging.WARNING)


def format_context(logger, method_name, event_dict):
    """Format bound context into the event message"""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


def setup_logging() -> None:
    """
    Setup logging for the application.

    Reads DEBUG_ALL and LOG_LEVEL through the logging settings.
    With DEBUG_ALL unset, propchain logs at LOG_LEVEL and third-party
    libraries at WARNING.
    """
    settings = get_settings().logging

    root_level = "DEBUG" if settings.debug_all else "WARNING"
    logging.basicConfig(
        stream=sys.stderr,
        level=root_level,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    setup_third_party_logging(settings.debug_all)

    logging.getLogger("propchain").setLevel(settings.log_level)
