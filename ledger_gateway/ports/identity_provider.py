"""Identity provider ports - Binding identities of a given type to clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..domain.models import Identity, User


class IdentityProvider(ABC):
    """Abstract interface for an identity type.

    Each provider handles exactly one identity ``type`` tag and knows how to
    serialize identities of that type and build users from them.
    """

    type: str

    @abstractmethod
    async def get_user_context(self, identity: Identity, name: str) -> User:
        """Build a user from an identity.

        Args:
            identity: Identity of this provider's type
            name: Display name of the user, usually the wallet label

        Returns:
            User ready to be bound to a client
        """
        ...

    @abstractmethod
    def from_json(self, data: dict[str, Any]) -> Identity:
        """Build an identity from its stored JSON form."""
        ...

    @abstractmethod
    def to_json(self, identity: Identity) -> dict[str, Any]:
        """Convert an identity to its stored JSON form."""
        ...


class ProviderRegistryPort(ABC):
    """Abstract interface for looking up identity providers by type."""

    @abstractmethod
    def get_provider(self, identity_type: str) -> IdentityProvider:
        """Get the provider registered for an identity type.

        Raises:
            UnsupportedIdentityTypeError: If no provider handles the type
        """
        ...

    @abstractmethod
    def add_provider(self, provider: IdentityProvider) -> None:
        """Register a provider under its ``type``, replacing any previous one."""
        ...
