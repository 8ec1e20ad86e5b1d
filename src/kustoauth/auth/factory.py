from __future__ import annotations

import logging

from azure.core.credentials import TokenCredential

from kustoauth.errors import ErrorKind, KustoError

from .config import AuthConfig, ParameterSet
from .registry import SUPPORTED_METHODS, StrategyDefinition, lookup

logger = logging.getLogger(__name__)


def _missing_parameters_message(
    strategy: StrategyDefinition, params: ParameterSet
) -> str | None:
    missing = strategy.missing(params)
    if not missing:
        return None
    required = ", ".join(p.value for p in strategy.required)
    missing_list = ", ".join(f"{p.value} ({p.env_var})" for p in missing)
    return (
        f"{strategy.description} authentication requires {required}. "
        f"Missing: {missing_list}"
    )


def resolve_credential(
    method: str | None = None, params: ParameterSet | None = None
) -> TokenCredential:
    """Construct a :class:`TokenCredential` for an authentication method.

    Args:
        method: Method identifier, matched case-insensitively. If empty or
            ``None``, ``azure-identity`` is used.
        params: Parameters for the method. Keys are :class:`Parameter`
            names; absent keys and ``None`` values count as not provided.

    Returns:
        A concrete :class:`TokenCredential`.

    Raises:
        KustoError: With kind ``AUTHENTICATION`` if the method is unknown,
            a required parameter is missing or empty, or the backend fails
            to build the credential.
    """
    params = params if params is not None else {}

    strategy = lookup(method)
    if strategy is None:
        raise KustoError(
            ErrorKind.AUTHENTICATION,
            f"Unsupported authentication method: {method}. "
            f"Supported methods: {', '.join(SUPPORTED_METHODS)}",
        )

    message = _missing_parameters_message(strategy, params)
    if message is not None:
        raise KustoError(ErrorKind.AUTHENTICATION, message)

    logger.debug("Using %s authentication", strategy.description)
    try:
        return strategy.build(params)
    except Exception as exc:
        error_message = str(exc)
        logger.critical("Failed to create token credential: %s", error_message)
        raise KustoError(
            ErrorKind.AUTHENTICATION,
            f"Failed to create token credential: {error_message}",
            cause=exc,
        ) from exc


def get_credential(config: AuthConfig | None = None) -> TokenCredential:
    """Construct a :class:`TokenCredential` from :class:`AuthConfig`.

    Args:
        config: Auth configuration. If ``None``, it is read from the
            environment now.

    Returns:
        A concrete :class:`TokenCredential`.

    Raises:
        KustoError: See :func:`resolve_credential`.
    """
    cfg = config or AuthConfig()
    return resolve_credential(cfg.auth_method, cfg.to_parameters())
