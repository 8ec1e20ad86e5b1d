"""Strip secrets from error messages before they leave the process.

Anything shown to an end user (tool output, API responses, user-facing log
lines) must go through :func:`sanitize_error_message`. Internal diagnostic
logs may keep the raw message.
"""

from __future__ import annotations

import re
from typing import Final

from .taxonomy import format_error, is_kusto_error

AUTHENTICATION_FAILED_MESSAGE: Final[str] = (
    "Authentication failed. Please verify your credentials and permissions."
)
CONNECTION_FAILED_MESSAGE: Final[str] = (
    "Connection failed. Please verify the cluster URL and network connectivity."
)
UNKNOWN_ERROR_MESSAGE: Final[str] = "Unknown error"

# Applied in order.
_REDACTIONS: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"https?://\S+", re.IGNORECASE), "[URL]"),
    (re.compile(r"Bearer\s+\S+", re.IGNORECASE), "[TOKEN]"),
    (re.compile(r"password[=:]\s*\S+", re.IGNORECASE), "password=[REDACTED]"),
    (re.compile(r"key[=:]\s*\S+", re.IGNORECASE), "key=[REDACTED]"),
    (re.compile(r"secret[=:]\s*\S+", re.IGNORECASE), "secret=[REDACTED]"),
)

_AUTHENTICATION_FAILURE = re.compile(
    r"authentication|unauthorized|forbidden|access denied", re.IGNORECASE
)
_CONNECTION_FAILURE = re.compile(
    r"connection|network|timeout|ECONNREFUSED|ETIMEDOUT", re.IGNORECASE
)


def _raw_message(error: object) -> str:
    if is_kusto_error(error):
        return format_error(error)
    if error is None:
        return UNKNOWN_ERROR_MESSAGE
    return str(error) or UNKNOWN_ERROR_MESSAGE


def redact(message: str) -> str:
    """Replace URLs, bearer tokens and ``password``/``key``/``secret`` values."""
    for pattern, replacement in _REDACTIONS:
        message = pattern.sub(replacement, message)
    return message


def sanitize_error_message(error: object) -> str:
    """Return a message for ``error`` that is safe to show to a user.

    The message is redacted first. If the redacted text still looks like an
    authentication or connection failure, a fixed sentence is returned in
    its place and none of the original text survives.

    Args:
        error: A :class:`~kustoauth.errors.taxonomy.KustoError`, any other
            exception, or an arbitrary value.

    Returns:
        The sanitized message.
    """
    sanitized = redact(_raw_message(error))

    if _AUTHENTICATION_FAILURE.search(sanitized):
        return AUTHENTICATION_FAILED_MESSAGE

    if _CONNECTION_FAILURE.search(sanitized):
        return CONNECTION_FAILED_MESSAGE

    return sanitized
