"""Domain layer - Core gateway models, errors and services."""

from .enums import GatewayState, StrategyOutcome
from .exceptions import (
    ConfigurationError,
    GatewayError,
    NetworkError,
    NotFoundError,
    UnsupportedIdentityTypeError,
)
from .models import (
    X509_IDENTITY_TYPE,
    Credentials,
    Identity,
    IdentityContext,
    ResolvedIdentity,
    TlsInfo,
    User,
)
from .services import OptionsMergeService

__all__ = [
    "X509_IDENTITY_TYPE",
    "ConfigurationError",
    "Credentials",
    "GatewayError",
    "GatewayState",
    "Identity",
    "IdentityContext",
    "NetworkError",
    "NotFoundError",
    "OptionsMergeService",
    "ResolvedIdentity",
    "StrategyOutcome",
    "TlsInfo",
    "UnsupportedIdentityTypeError",
    "User",
]
