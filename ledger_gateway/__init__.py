"""ledger-gateway - Client-side gateway sessions for permissioned ledger networks.

Applications call ``bootstrap_defaults()`` once at startup to register the
default identity provider registry and, optionally, a client loader.
"""

from .application.gateway import Gateway
from .application.network import Network
from .domain.exceptions import (
    ConfigurationError,
    GatewayError,
    NotFoundError,
    UnsupportedIdentityTypeError,
)
from .domain.models import Identity
from .infrastructure.bootstrap import bootstrap_defaults
from .infrastructure.in_memory_wallet import InMemoryWallet

__all__ = [
    "ConfigurationError",
    "Gateway",
    "GatewayError",
    "Identity",
    "InMemoryWallet",
    "Network",
    "NotFoundError",
    "UnsupportedIdentityTypeError",
    "bootstrap_defaults",
]
__version__ = "0.1.0"
