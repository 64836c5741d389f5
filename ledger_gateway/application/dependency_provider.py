"""Dependency provider for the application layer.

Lets the infrastructure layer register default implementations that the
gateway uses without importing infrastructure directly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar

from ..domain.exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..ports.client_loader import ClientLoaderPort
    from ..ports.identity_provider import ProviderRegistryPort


class DependencyProvider:
    """Registry for default dependency implementations."""

    _default_client_loader: ClassVar[ClientLoaderPort | None] = None
    _default_registry_factory: ClassVar[Callable[[], ProviderRegistryPort] | None] = None

    @classmethod
    def register_defaults(
        cls,
        client_loader: ClientLoaderPort | None = None,
        registry_factory: Callable[[], ProviderRegistryPort] | None = None,
    ) -> None:
        """Register default implementations.

        Args:
            client_loader: Loader used when a gateway connects from a profile
            registry_factory: Factory for provider registries used when no
                wallet is supplied
        """
        if client_loader:
            cls._default_client_loader = client_loader
        if registry_factory:
            cls._default_registry_factory = registry_factory

    @classmethod
    def get_default_client_loader(cls) -> ClientLoaderPort:
        """Get the default client loader.

        Raises:
            ConfigurationError: If no default loader has been registered
        """
        if cls._default_client_loader is None:
            raise ConfigurationError(
                "No client loader available to load a connection profile. "
                "Pass a client, a client_loader, or register a default loader."
            )
        return cls._default_client_loader

    @classmethod
    def new_provider_registry(cls) -> ProviderRegistryPort:
        """Create a provider registry from the registered factory.

        Raises:
            ConfigurationError: If no registry factory has been registered
        """
        if cls._default_registry_factory is None:
            raise ConfigurationError(
                "No identity provider registry factory registered. "
                "Call bootstrap_defaults() during application initialization."
            )
        return cls._default_registry_factory()

    @classmethod
    def reset(cls) -> None:
        """Reset all registered defaults. Mainly useful for testing."""
        cls._default_client_loader = None
        cls._default_registry_factory = None
