"""Network handle - A channel as seen through a connected gateway."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..domain.exceptions import NetworkError
from .event_strategies import CommitStrategy
from .options import DiscoveryOptions, EventHandlerOptions, QueryHandlerOptions

if TYPE_CHECKING:
    from ..ports.client import ChannelPort
    from .gateway import Gateway


class Network:
    """Channel-scoped handle built from a gateway's client and identity.

    Handles are created and owned by the gateway's network cache; callers
    obtain them through ``Gateway.get_network``.
    """

    def __init__(self, gateway: Gateway, channel: ChannelPort) -> None:
        self._gateway = gateway
        self._channel = channel
        self._initialized = False
        self._closed = False
        self._query_handler: Any = None

    @property
    def name(self) -> str:
        return self._channel.name

    @property
    def msp_id(self) -> str:
        """Organization of the gateway's identity."""
        return self._gateway.get_identity().msp_id

    @property
    def query_handler(self) -> Any:
        """Query handler built from the query strategy, None if disabled."""
        return self._query_handler

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def get_gateway(self) -> Gateway:
        return self._gateway

    def get_channel(self) -> ChannelPort:
        return self._channel

    async def initialize(self, discovery: DiscoveryOptions | None = None) -> None:
        """Initialize the channel and build the query handler.

        Calling it again on an initialized network does nothing.

        Args:
            discovery: Discovery settings, read from the gateway options if None

        Raises:
            NetworkError: If the network has been closed
        """
        if self._closed:
            raise NetworkError("Network has been closed", channel_name=self.name)
        if self._initialized:
            return

        options = self._gateway.get_options()
        discovery = discovery or DiscoveryOptions.from_options(options)
        query_options = QueryHandlerOptions.from_options(options)

        await self._channel.initialize(
            self._gateway.identity_context,
            discovery=discovery.enabled,
            as_localhost=discovery.as_localhost,
        )

        if query_options.strategy is not None:
            self._query_handler = query_options.strategy(self)
        self._initialized = True

    def new_commit_strategy(self) -> CommitStrategy | None:
        """Build a commit strategy for one transaction.

        Returns:
            The strategy, or None when commit waiting is disabled
        """
        event_options = EventHandlerOptions.from_options(self._gateway.get_options())
        if event_options.strategy is None:
            return None
        return event_options.strategy(self)

    def close(self) -> None:
        """Release the channel. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._query_handler = None
        self._channel.close()
