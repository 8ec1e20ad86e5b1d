from __future__ import annotations

import os
from typing import Any, Iterator

import pytest

from kustoauth.auth import registry


@pytest.fixture(autouse=True)
def clear_azure_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove AZURE_* and KUSTO_* vars to prevent cross-test leakage.

    Yields:
        Iterator[None]: Context manager semantics for pytest.
    """
    to_clear = [k for k in os.environ if k.upper().startswith(("AZURE_", "KUSTO_"))]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    yield


def _make_recorder(name: str) -> type:
    """Create a credential stand-in that records its init arguments."""

    class _C:
        last_args: tuple[Any, ...] | None = None
        last_kwargs: dict[str, Any] | None = None
        call_count: int = 0

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            type(self).last_args = args
            type(self).last_kwargs = dict(kwargs)
            type(self).call_count += 1

        def get_token(self, *scopes: str, **kwargs: Any) -> Any:  # pragma: no cover
            raise NotImplementedError

    _C.__name__ = name
    _C.__qualname__ = name
    return _C


CREDENTIAL_CLASSES = [
    "AzureCliCredential",
    "DefaultAzureCredential",
    "ManagedIdentityCredential",
    "ClientSecretCredential",
    "CertificateCredential",
    "InteractiveBrowserCredential",
    "DeviceCodeCredential",
    "UsernamePasswordCredential",
    "EnvironmentCredential",
]


@pytest.fixture()
def stub_azure(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    """Replace the azure.identity classes used by the registry with recorders.

    The recipes look the classes up in the registry module at call time, so
    no credential touches the network, a certificate file or the CLI.

    Returns:
        dict[str, Any]: Recorder classes by name, for assertions.
    """
    recorders = {n: _make_recorder(n) for n in CREDENTIAL_CLASSES}
    for n, cls in recorders.items():
        monkeypatch.setattr(registry, n, cls)
    return recorders


@pytest.fixture()
def full_params(tmp_path) -> dict[str, str]:
    """Every parameter any strategy requires, all non-empty."""
    cert = tmp_path / "cert.pem"
    cert.write_text("x")
    return {
        "tenant_id": "t",
        "client_id": "c",
        "client_secret": "s",
        "certificate_path": str(cert),
        "username": "user@example.com",
        "password": "pw",
    }
