"""Registry of identity providers keyed by identity type."""

from __future__ import annotations

from ..domain.exceptions import UnsupportedIdentityTypeError
from ..ports.identity_provider import IdentityProvider, ProviderRegistryPort
from .x509_provider import X509Provider


class IdentityProviderRegistry(ProviderRegistryPort):
    """Maps identity type tags to the providers that handle them."""

    def __init__(self) -> None:
        self._providers: dict[str, IdentityProvider] = {}

    def get_provider(self, identity_type: str) -> IdentityProvider:
        provider = self._providers.get(identity_type)
        if provider is None:
            raise UnsupportedIdentityTypeError(identity_type)
        return provider

    def add_provider(self, provider: IdentityProvider) -> None:
        self._providers[provider.type] = provider

    def __contains__(self, identity_type: object) -> bool:
        return identity_type in self._providers

    @property
    def types(self) -> list[str]:
        """Registered identity types."""
        return list(self._providers)


def new_default_provider_registry() -> IdentityProviderRegistry:
    """Create a registry with the built-in providers registered."""
    registry = IdentityProviderRegistry()
    registry.add_provider(X509Provider())
    return registry
