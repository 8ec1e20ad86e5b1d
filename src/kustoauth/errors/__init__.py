"""Error taxonomy and message sanitization.

Public API:
- ErrorKind, KustoError (tagged error type)
- format_error(), is_kusto_error(), classify_error()
- sanitize_error_message() → safe user-facing string
"""

from .sanitize import (
    AUTHENTICATION_FAILED_MESSAGE,
    CONNECTION_FAILED_MESSAGE,
    redact,
    sanitize_error_message,
)
from .taxonomy import ErrorKind, KustoError, classify_error, format_error, is_kusto_error

__all__ = [
    "AUTHENTICATION_FAILED_MESSAGE",
    "CONNECTION_FAILED_MESSAGE",
    "ErrorKind",
    "KustoError",
    "classify_error",
    "format_error",
    "is_kusto_error",
    "redact",
    "sanitize_error_message",
]
