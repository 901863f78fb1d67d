"""Structured logging configuration using structlog.

Provides JSON logging for production and console logging for development,
with automatic context binding and redaction of credentials that tend to
travel in query strings.
"""

import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

from apitemplate.config import get_settings
from apitemplate.config.settings import Settings

# Sensitive key names (O(1) lookup)
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "key",
    "auth",
    "authorization",
    "credential",
    "credentials",
    "access_token",
    "refresh_token",
    "client_secret",
    "signature",
    "sig",
})

# Event fields that hold a built URI
URI_KEYS: frozenset[str] = frozenset({"uri", "url"})

REDACTED = "[REDACTED]"


def redact_uri(uri: str) -> str:
    """Mask the values of sensitive query parameters in a URI.

    Only the query region is touched; the path and fragment are kept as-is
    and entries are not decoded or re-encoded.
    """
    head, question, rest = uri.partition("?")
    if not question:
        return uri
    query, hash_sign, fragment = rest.partition("#")

    entries: list[str] = []
    for entry in query.split("&"):
        name, equals, _ = entry.partition("=")
        if equals and name.lower() in SENSITIVE_KEYS:
            entries.append(f"{name}={REDACTED}")
        else:
            entries.append(entry)

    return f"{head}?{'&'.join(entries)}{hash_sign}{fragment}"


class SensitiveDataRedactor:
    """Processor that redacts credentials from log events.

    Uses two-tier approach:
    1. Key-name lookup via frozenset (O(1)) for known sensitive keys
    2. Query-string scrubbing for URI fields
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """Redact credentials from event dictionary."""
        return cast(EventDict, self._redact_dict(event_dict))

    def _redact_dict(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        """Recursively redact a dictionary."""
        result: dict[str, Any] = {}
        for key, value in data.items():
            key_lower = key.lower()

            if key_lower in SENSITIVE_KEYS:
                result[key] = REDACTED
            elif key_lower in URI_KEYS and isinstance(value, str):
                result[key] = redact_uri(value)
            elif isinstance(value, dict):
                result[key] = self._redact_dict(value)
            else:
                result[key] = value

        return result


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_sensitive: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format - "json" for production, "console" for development
        redact_sensitive: Whether to redact credentials from logs
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_sensitive:
        processors.append(SensitiveDataRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    level_map = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    level_num = level_map.get(level.upper(), 20)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structured logging from the logging settings section.

    Args:
        settings: Settings to use (defaults to get_settings())
    """
    settings = settings or get_settings()
    setup_logging(
        level=settings.log_level,
        format=settings.logging.format,
        redact_sensitive=settings.logging.redact_sensitive,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        A bound structlog logger
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
