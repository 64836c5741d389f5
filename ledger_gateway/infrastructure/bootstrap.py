"""Bootstrap module for registering default dependencies."""

from ..application.dependency_provider import DependencyProvider
from ..ports.client_loader import ClientLoaderPort
from .identity_provider_registry import new_default_provider_registry


def bootstrap_defaults(client_loader: ClientLoaderPort | None = None) -> None:
    """Register the default implementations used by the application layer.

    Args:
        client_loader: Optional loader for gateways connecting from a profile
    """
    DependencyProvider.register_defaults(
        client_loader=client_loader,
        registry_factory=new_default_provider_registry,
    )


def reset_defaults() -> None:
    """Reset all registered defaults. Mainly useful for testing."""
    DependencyProvider.reset()
