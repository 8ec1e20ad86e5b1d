from __future__ import annotations

import pytest

from kustoauth.errors import (
    ErrorKind,
    KustoError,
    classify_error,
    format_error,
    is_kusto_error,
)


@pytest.mark.parametrize(
    "kind, message, label",
    [
        (
            ErrorKind.CONNECTION,
            "Connection error: refused",
            "Kusto Connection Error: Connection error: refused",
        ),
        (
            ErrorKind.AUTHENTICATION,
            "Authentication error: refused",
            "Kusto Authentication Error: Authentication error: refused",
        ),
        (ErrorKind.QUERY, "refused", "Kusto Query Error: refused"),
        (
            ErrorKind.RESOURCE_NOT_FOUND,
            "Resource not found: refused",
            "Kusto Resource Not Found: Resource not found: refused",
        ),
        (
            ErrorKind.VALIDATION,
            "Validation error: refused",
            "Kusto Validation Error: Validation error: refused",
        ),
        (
            ErrorKind.DATA_CONVERSION,
            "Data conversion error: refused",
            "Kusto Data Conversion Error: Data conversion error: refused",
        ),
        (
            ErrorKind.TIMEOUT,
            "Timeout error: refused",
            "Kusto Timeout Error: Timeout error: refused",
        ),
        (ErrorKind.GENERIC, "refused", "Kusto Error: refused"),
    ],
)
def test_kusto_error__prefix_and_format(
    kind: ErrorKind, message: str, label: str
) -> None:
    err = KustoError(kind, "refused")
    assert err.kind is kind
    assert err.message == message
    assert str(err) == message
    assert format_error(err) == label


def test_kusto_error__accepts_kind_value() -> None:
    err = KustoError("timeout", "slow")  # type: ignore[arg-type]
    assert err.kind is ErrorKind.TIMEOUT


def test_kusto_error__keeps_cause() -> None:
    cause = OSError("boom")
    err = KustoError(ErrorKind.CONNECTION, "boom", cause=cause)
    assert err.cause is cause


def test_kusto_error__repr_shows_kind() -> None:
    err = KustoError(ErrorKind.QUERY, "bad syntax")
    assert repr(err) == "KustoError('query', 'bad syntax')"


def test_is_kusto_error() -> None:
    assert is_kusto_error(KustoError(ErrorKind.GENERIC, "x"))
    assert not is_kusto_error(ValueError("x"))
    assert not is_kusto_error("x")


def test_classify_error__foreign_is_generic() -> None:
    assert classify_error(KustoError(ErrorKind.TIMEOUT, "x")) is ErrorKind.TIMEOUT
    assert classify_error(TimeoutError("x")) is ErrorKind.GENERIC
    assert classify_error(None) is ErrorKind.GENERIC


def test_kind__match_statement() -> None:
    err = KustoError(ErrorKind.RESOURCE_NOT_FOUND, "table T")
    match err.kind:
        case ErrorKind.RESOURCE_NOT_FOUND:
            outcome = "missing"
        case _:
            outcome = "other"
    assert outcome == "missing"
