"""Closed taxonomy of Kusto errors.

A single exception type, :class:`KustoError`, is tagged with an
:class:`ErrorKind`. The kind decides the message prefix applied at
construction and the label used by :func:`format_error`, so callers can
branch on ``err.kind`` instead of catching per-kind subclasses.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TypeGuard


class ErrorKind(str, Enum):
    """Kinds of errors raised by kustoauth."""

    CONNECTION = "connection"
    AUTHENTICATION = "authentication"
    QUERY = "query"
    RESOURCE_NOT_FOUND = "resource_not_found"
    VALIDATION = "validation"
    DATA_CONVERSION = "data_conversion"
    TIMEOUT = "timeout"
    GENERIC = "generic"

    @property
    def prefix(self) -> str:
        """Prefix prepended to the message of errors of this kind."""
        return _PREFIXES[self]

    @property
    def label(self) -> str:
        """Operator-facing label used by :func:`format_error`."""
        return _LABELS[self]


_PREFIXES = MappingProxyType(
    {
        ErrorKind.CONNECTION: "Connection error: ",
        ErrorKind.AUTHENTICATION: "Authentication error: ",
        ErrorKind.QUERY: "",
        ErrorKind.RESOURCE_NOT_FOUND: "Resource not found: ",
        ErrorKind.VALIDATION: "Validation error: ",
        ErrorKind.DATA_CONVERSION: "Data conversion error: ",
        ErrorKind.TIMEOUT: "Timeout error: ",
        ErrorKind.GENERIC: "",
    }
)

_LABELS = MappingProxyType(
    {
        ErrorKind.CONNECTION: "Kusto Connection Error",
        ErrorKind.AUTHENTICATION: "Kusto Authentication Error",
        ErrorKind.QUERY: "Kusto Query Error",
        ErrorKind.RESOURCE_NOT_FOUND: "Kusto Resource Not Found",
        ErrorKind.VALIDATION: "Kusto Validation Error",
        ErrorKind.DATA_CONVERSION: "Kusto Data Conversion Error",
        ErrorKind.TIMEOUT: "Kusto Timeout Error",
        ErrorKind.GENERIC: "Kusto Error",
    }
)


class KustoError(Exception):
    """Error tagged with an :class:`ErrorKind`.

    Attributes:
        kind: The error kind.
        message: The message with the kind's prefix applied.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        self.kind = ErrorKind(kind)
        self.message = f"{self.kind.prefix}{message}"
        self.cause = cause
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r}, {self.message!r})"


def is_kusto_error(error: object) -> TypeGuard[KustoError]:
    """Return ``True`` if ``error`` is a :class:`KustoError`."""
    return isinstance(error, KustoError)


def classify_error(error: object) -> ErrorKind:
    """Return the kind of ``error``; anything foreign is ``GENERIC``."""
    if is_kusto_error(error):
        return error.kind
    return ErrorKind.GENERIC


def format_error(error: KustoError) -> str:
    """Format a :class:`KustoError` for display, e.g. ``"Kusto Timeout Error: ..."``.

    The result is meant for people. Compare ``error.kind`` instead of
    parsing it.
    """
    return f"{error.kind.label}: {error.message}"
