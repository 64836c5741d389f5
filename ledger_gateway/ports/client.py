"""Client and channel ports - Interfaces of the underlying ledger network client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..domain.models import IdentityContext, User


class ChannelPort(ABC):
    """Abstract interface for a channel of the ledger network.

    A channel is owned by the client that created it. The gateway only
    initializes it, queries its peers and closes it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Channel name."""
        ...

    @abstractmethod
    async def initialize(
        self,
        identity_context: IdentityContext,
        discovery: bool = True,
        as_localhost: bool = True,
    ) -> None:
        """Prepare the channel for use.

        Args:
            identity_context: Identity used to contact the network
            discovery: Whether peers are located through service discovery
            as_localhost: Whether discovered endpoints are mapped to localhost
        """
        ...

    @abstractmethod
    def get_endorsers(self, msp_id: str | None = None) -> list[Any]:
        """Get the endorsing peers of the channel.

        Args:
            msp_id: Restrict peers to one organization, None for all

        Returns:
            List of peer objects exposing an ``msp_id`` attribute
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the channel's connections."""
        ...


class ClientPort(ABC):
    """Abstract interface for the ledger network client.

    The client exclusively owns the network transport. A gateway owns exactly
    one client while connected.
    """

    name: str = "gateway client"

    def __init__(self) -> None:
        self.connection_options: dict[str, Any] = {}

    @abstractmethod
    def new_identity_context(self, user: User) -> IdentityContext:
        """Bind a user to this client.

        Args:
            user: User built by an identity provider

        Returns:
            Identity context carrying the user's name and organization
        """
        ...

    @abstractmethod
    def set_tls_client_cert_and_key(self, certificate: str, key: str) -> None:
        """Assign the TLS client credentials used for mutual TLS."""
        ...

    @abstractmethod
    def get_channel(self, name: str) -> ChannelPort:
        """Get or create the channel with the given name."""
        ...

    def close(self) -> None:  # noqa: B027
        """Release the client's connections. Default does nothing."""
