"""Infrastructure layer - Concrete implementations of ports."""

from .bootstrap import bootstrap_defaults, reset_defaults
from .identity_provider_registry import IdentityProviderRegistry, new_default_provider_registry
from .in_memory_wallet import InMemoryWallet
from .simple_logger import SimpleLogger
from .x509_provider import X509Provider

__all__ = [
    "IdentityProviderRegistry",
    "InMemoryWallet",
    "SimpleLogger",
    "X509Provider",
    "bootstrap_defaults",
    "new_default_provider_registry",
    "reset_defaults",
]
