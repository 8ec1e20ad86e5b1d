from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Parameter name -> value. Absent or None means "not provided"; "" means
# "provided but empty".
ParameterSet = Mapping[str, str | None]


class AuthMethod(str, Enum):
    """Supported authentication methods."""

    AZURE_CLI = "azure-cli"
    AZURE_IDENTITY = "azure-identity"
    MANAGED_IDENTITY = "managed-identity"
    CLIENT_SECRET = "client-secret"
    CLIENT_CERTIFICATE = "client-certificate"
    INTERACTIVE_BROWSER = "interactive-browser"
    DEVICE_CODE = "device-code"
    USERNAME_PASSWORD = "username-password"
    ENVIRONMENT = "environment"

    @classmethod
    def parse(cls, value: str) -> AuthMethod | None:
        """Return the method matching ``value`` case-insensitively, else ``None``."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


DEFAULT_AUTH_METHOD = AuthMethod.AZURE_IDENTITY


class Parameter(str, Enum):
    """Logical names of the parameters consumed by the strategies."""

    TENANT_ID = "tenant_id"
    CLIENT_ID = "client_id"
    CLIENT_SECRET = "client_secret"
    CERTIFICATE_PATH = "certificate_path"
    CERTIFICATE_PASSWORD = "certificate_password"
    USERNAME = "username"
    PASSWORD = "password"
    AUTHORITY = "authority"
    REDIRECT_URI = "redirect_uri"

    @property
    def env_var(self) -> str:
        return _ENV_VARS[self]


_ENV_VARS = {
    Parameter.TENANT_ID: "AZURE_TENANT_ID",
    Parameter.CLIENT_ID: "AZURE_CLIENT_ID",
    Parameter.CLIENT_SECRET: "AZURE_CLIENT_SECRET",
    Parameter.CERTIFICATE_PATH: "AZURE_CLIENT_CERTIFICATE_PATH",
    Parameter.CERTIFICATE_PASSWORD: "AZURE_CLIENT_CERTIFICATE_PASSWORD",
    Parameter.USERNAME: "AZURE_USERNAME",
    Parameter.PASSWORD: "AZURE_PASSWORD",
    Parameter.AUTHORITY: "AZURE_AUTHORITY_HOST",
    Parameter.REDIRECT_URI: "AZURE_REDIRECT_URI",
}


class AuthConfig(BaseSettings):
    """Process configuration for selecting and constructing a Kusto credential.

    Values are read from the environment each time the model is instantiated.
    No cross-field validation happens here; the resolver checks the
    parameters required by the selected method.

    Environment variables (aliases supported where noted):
        - KUSTO_AUTH_METHOD (alias: AZURE_AUTH_METHOD)
        - AZURE_TENANT_ID
        - AZURE_CLIENT_ID
        - AZURE_CLIENT_SECRET
        - AZURE_CLIENT_CERTIFICATE_PATH
        - AZURE_CLIENT_CERTIFICATE_PASSWORD
        - AZURE_USERNAME
        - AZURE_PASSWORD
        - AZURE_AUTHORITY_HOST
        - AZURE_REDIRECT_URI
    """

    model_config = SettingsConfigDict(
        env_prefix="AZURE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Field names are the AZURE_* variable names without the prefix, so only
    # the prefixed variables are read. Keyword construction uses these names.
    # auth_method lists its variables first; the first alias found wins.

    auth_method: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "KUSTO_AUTH_METHOD", "AZURE_AUTH_METHOD", "auth_method"
        ),
    )
    tenant_id: str | None = None
    client_id: str | None = None
    client_secret: SecretStr | None = None
    client_certificate_path: str | None = None
    client_certificate_password: SecretStr | None = None
    username: str | None = None
    password: SecretStr | None = None
    authority_host: str | None = None
    redirect_uri: str | None = None

    @field_validator("client_certificate_path")
    @classmethod
    def _expand_user(cls, v: str | None) -> str | None:
        """Expand a leading ``~`` in the certificate path."""
        if v:
            return os.path.expanduser(v)
        return v

    def to_parameters(self) -> dict[str, str]:
        """Return the provided parameters keyed by :class:`Parameter` name.

        Unset fields are omitted and secrets are unwrapped.
        """
        params: dict[str, str] = {}
        for param in Parameter:
            value = getattr(self, param.env_var.removeprefix("AZURE_").lower())
            if value is None:
                continue
            if isinstance(value, SecretStr):
                value = value.get_secret_value()
            params[param.value] = value
        return params
