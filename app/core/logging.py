"""Structured logging configuration.

Configures the root logger with a structured format including timestamp,
level, and module name.  Secrets must go through ``redact`` before they
reach a log record.
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Sets the root logger level and installs a single ``StreamHandler``
    writing to *stdout* with a structured text format.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid adding duplicate handlers on repeated calls
    root.handlers.clear()
    root.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def redact(value: object) -> str:
    """Mask a secret for logging, keeping only its length visible."""
    if value is None:
        return "<missing>"
    text = value if isinstance(value, str) else str(value)
    return "*" * len(text)
