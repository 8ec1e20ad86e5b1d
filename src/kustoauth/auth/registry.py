from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any

from azure.core.credentials import TokenCredential
from azure.identity import (
    AzureCliCredential,
    CertificateCredential,
    ClientSecretCredential,
    DefaultAzureCredential,
    DeviceCodeCredential,
    EnvironmentCredential,
    InteractiveBrowserCredential,
    ManagedIdentityCredential,
    UsernamePasswordCredential,
)

from .config import DEFAULT_AUTH_METHOD, AuthMethod, Parameter, ParameterSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyDefinition:
    """How to validate parameters for, and build, one authentication method.

    Attributes:
        method: The method this strategy serves.
        description: Human-readable name used in diagnostics and errors.
        required: Parameters that must be provided and non-empty.
        optional: Parameters passed to the backend only when provided.
        build: Construction recipe; receives the parameters as given.
    """

    method: AuthMethod
    description: str
    required: tuple[Parameter, ...]
    optional: tuple[Parameter, ...]
    build: Callable[[ParameterSet], TokenCredential]

    def missing(self, params: ParameterSet) -> list[Parameter]:
        """Return every required parameter that is absent or empty."""
        return [p for p in self.required if not params.get(p.value)]


def _provided(params: ParameterSet, *names: Parameter) -> dict[str, Any]:
    """Keyword arguments for the optional ``names`` that were provided."""
    return {n.value: params[n.value] for n in names if params.get(n.value)}


def _prompt_device_code(
    verification_uri: str, user_code: str, expires_on: datetime
) -> None:
    # Shown to the operator as-is; it must keep the URL and code intact.
    logger.critical(
        "To sign in, use a web browser to open the page %s and enter the code %s "
        "to authenticate.",
        verification_uri,
        user_code,
    )


def _azure_cli(params: ParameterSet) -> TokenCredential:
    return AzureCliCredential()


def _azure_identity(params: ParameterSet) -> TokenCredential:
    return DefaultAzureCredential(**_provided(params, Parameter.AUTHORITY))


def _managed_identity(params: ParameterSet) -> TokenCredential:
    # No client id selects the system-assigned identity.
    return ManagedIdentityCredential(**_provided(params, Parameter.CLIENT_ID))


def _client_secret(params: ParameterSet) -> TokenCredential:
    return ClientSecretCredential(
        tenant_id=params[Parameter.TENANT_ID.value],
        client_id=params[Parameter.CLIENT_ID.value],
        client_secret=params[Parameter.CLIENT_SECRET.value],
        **_provided(params, Parameter.AUTHORITY),
    )


def _client_certificate(params: ParameterSet) -> TokenCredential:
    return CertificateCredential(
        tenant_id=params[Parameter.TENANT_ID.value],
        client_id=params[Parameter.CLIENT_ID.value],
        certificate_path=params[Parameter.CERTIFICATE_PATH.value],
        password=params.get(Parameter.CERTIFICATE_PASSWORD.value) or None,
        **_provided(params, Parameter.AUTHORITY),
    )


def _interactive_browser(params: ParameterSet) -> TokenCredential:
    return InteractiveBrowserCredential(
        **_provided(
            params,
            Parameter.TENANT_ID,
            Parameter.CLIENT_ID,
            Parameter.REDIRECT_URI,
            Parameter.AUTHORITY,
        )
    )


def _device_code(params: ParameterSet) -> TokenCredential:
    return DeviceCodeCredential(
        prompt_callback=_prompt_device_code,
        **_provided(
            params, Parameter.TENANT_ID, Parameter.CLIENT_ID, Parameter.AUTHORITY
        ),
    )


def _username_password(params: ParameterSet) -> TokenCredential:
    return UsernamePasswordCredential(
        client_id=params[Parameter.CLIENT_ID.value],
        username=params[Parameter.USERNAME.value],
        password=params[Parameter.PASSWORD.value],
        tenant_id=params[Parameter.TENANT_ID.value],
        **_provided(params, Parameter.AUTHORITY),
    )


def _environment(params: ParameterSet) -> TokenCredential:
    return EnvironmentCredential()


_DEFINITIONS = (
    StrategyDefinition(AuthMethod.AZURE_CLI, "Azure CLI", (), (), _azure_cli),
    StrategyDefinition(
        AuthMethod.AZURE_IDENTITY,
        "Azure Identity (DefaultAzureCredential)",
        (),
        (Parameter.AUTHORITY,),
        _azure_identity,
    ),
    StrategyDefinition(
        AuthMethod.MANAGED_IDENTITY,
        "Managed Identity",
        (),
        (Parameter.CLIENT_ID,),
        _managed_identity,
    ),
    StrategyDefinition(
        AuthMethod.CLIENT_SECRET,
        "Client Secret",
        (Parameter.TENANT_ID, Parameter.CLIENT_ID, Parameter.CLIENT_SECRET),
        (Parameter.AUTHORITY,),
        _client_secret,
    ),
    StrategyDefinition(
        AuthMethod.CLIENT_CERTIFICATE,
        "Client Certificate",
        (Parameter.TENANT_ID, Parameter.CLIENT_ID, Parameter.CERTIFICATE_PATH),
        (Parameter.CERTIFICATE_PASSWORD, Parameter.AUTHORITY),
        _client_certificate,
    ),
    StrategyDefinition(
        AuthMethod.INTERACTIVE_BROWSER,
        "Interactive Browser",
        (),
        (
            Parameter.TENANT_ID,
            Parameter.CLIENT_ID,
            Parameter.REDIRECT_URI,
            Parameter.AUTHORITY,
        ),
        _interactive_browser,
    ),
    StrategyDefinition(
        AuthMethod.DEVICE_CODE,
        "Device Code",
        (),
        (Parameter.TENANT_ID, Parameter.CLIENT_ID, Parameter.AUTHORITY),
        _device_code,
    ),
    StrategyDefinition(
        AuthMethod.USERNAME_PASSWORD,
        "Username/Password",
        (
            Parameter.TENANT_ID,
            Parameter.CLIENT_ID,
            Parameter.USERNAME,
            Parameter.PASSWORD,
        ),
        (Parameter.AUTHORITY,),
        _username_password,
    ),
    StrategyDefinition(
        AuthMethod.ENVIRONMENT, "Environment Credential", (), (), _environment
    ),
)

REGISTRY: MappingProxyType[AuthMethod, StrategyDefinition] = MappingProxyType(
    {d.method: d for d in _DEFINITIONS}
)

# Declaration order of AuthMethod; part of the unsupported-method error.
SUPPORTED_METHODS: tuple[str, ...] = tuple(m.value for m in AuthMethod)


def lookup(method: str | None = None) -> StrategyDefinition | None:
    """Return the strategy for ``method``, or ``None`` if it is not supported.

    Matching ignores case. An empty or missing ``method`` selects
    ``azure-identity``.
    """
    if not method:
        return REGISTRY[DEFAULT_AUTH_METHOD]
    parsed = AuthMethod.parse(method)
    if parsed is None:
        return None
    return REGISTRY[parsed]
