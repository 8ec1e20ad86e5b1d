"""Credential resolution for Kusto clients.

Public API:
- resolve_credential() → TokenCredential (method name + parameters)
- get_credential() → TokenCredential (from AuthConfig / environment)
- AuthConfig (settings), AuthMethod, Parameter
- lookup(), StrategyDefinition (strategy registry)
"""

from .config import AuthConfig, AuthMethod, Parameter, ParameterSet
from .factory import get_credential, resolve_credential
from .registry import SUPPORTED_METHODS, StrategyDefinition, lookup

__all__ = [
    "AuthConfig",
    "AuthMethod",
    "Parameter",
    "ParameterSet",
    "get_credential",
    "resolve_credential",
    "SUPPORTED_METHODS",
    "StrategyDefinition",
    "lookup",
]
