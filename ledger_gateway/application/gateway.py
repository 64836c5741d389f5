"""Gateway - Client-side session for a ledger network."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..domain.enums import GatewayState
from ..domain.exceptions import ConfigurationError
from ..domain.services import OptionsMergeService
from ..ports.client import ClientPort
from .dependency_provider import DependencyProvider
from .identity_resolver import IdentityResolver
from .network import Network
from .network_cache import NetworkCache
from .options import default_gateway_options

if TYPE_CHECKING:
    from ..domain.models import Identity
    from ..ports.client_loader import ClientLoaderPort
    from ..ports.logger import LoggerPort


class Gateway:
    """Session object binding an identity to a ledger network client.

    A gateway owns one client, one identity context and a cache of network
    handles while connected. Lifecycle calls (``connect``, ``get_network``,
    ``disconnect``) on one instance must be serialized by the caller.

    Example:
        bootstrap_defaults()
        async with Gateway() as gateway:
            await gateway.connect(profile, {"wallet": wallet, "identity": "admin"})
            network = await gateway.get_network("mychannel")
    """

    def __init__(
        self,
        client_loader: ClientLoaderPort | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        """Create an unconnected gateway.

        Args:
            client_loader: Loader used when connecting from a connection profile
            logger: Optional logger
        """
        self._client_loader = client_loader
        self._logger = logger
        self._session_logger: LoggerPort | None = None
        self._resolver = IdentityResolver(logger=logger)
        self._client: ClientPort | None = None
        self._identity: Identity | None = None
        self._identity_context: Any = None
        self._options: dict[str, Any] = default_gateway_options()
        self._networks = NetworkCache(self._build_network, logger=logger)
        self._state = GatewayState.UNCONNECTED

    @property
    def state(self) -> GatewayState:
        return self._state

    @property
    def client(self) -> ClientPort | None:
        return self._client

    @property
    def identity_context(self) -> Any:
        return self._identity_context

    @property
    def networks(self) -> NetworkCache:
        """The network cache. Its length is the number of cached channels."""
        return self._networks

    def is_connected(self) -> bool:
        return self._state == GatewayState.CONNECTED

    async def connect(self, source: Any, options: Mapping[str, Any] | None = None) -> None:
        """Connect the gateway, replacing any existing connection.

        Args:
            source: A client used as-is, or a connection profile handed to the client loader
            options: Gateway options merged over the defaults

        Raises:
            ConfigurationError: If identity options are missing or invalid
            NotFoundError: If an identity label is missing from the wallet
            UnsupportedIdentityTypeError: If no provider handles the identity type
        """
        options = options or {}
        if not options.get("identity"):
            raise ConfigurationError("An identity must be assigned to a Gateway instance")

        merged = OptionsMergeService.merge(default_gateway_options(), options)

        client = await self._resolve_client(source)
        previous_connection_options = dict(client.connection_options)
        try:
            connection_options = merged.get("connection_options")
            if connection_options:
                client.connection_options.update(connection_options)

            resolved = await self._resolver.resolve(client, merged)
        except BaseException:
            client.connection_options.clear()
            client.connection_options.update(previous_connection_options)
            # A client loaded from a profile belongs to no one else yet
            if client is not source and client is not self._client:
                client.close()
            raise

        # Release the previous connection only once the new one is usable
        self._release(keep_client=client)

        self._client = client
        self._identity = resolved.identity
        self._identity_context = resolved.identity_context
        self._options = merged
        self._state = GatewayState.CONNECTED

        if self._logger:
            self._session_logger = self._logger.bind(msp_id=resolved.identity.msp_id)
            self._session_logger.info("Gateway connected", client=getattr(client, "name", None))

    async def _resolve_client(self, source: Any) -> ClientPort:
        if isinstance(source, ClientPort):
            return source
        loader = self._client_loader or DependencyProvider.get_default_client_loader()
        return await loader.load_from_config(source)

    def get_options(self) -> dict[str, Any]:
        """Get the merged options of the last successful connect.

        Each section is copied, so changing the result does not affect the
        networks this gateway builds later.
        """
        return {
            key: dict(value) if isinstance(value, Mapping) else value
            for key, value in self._options.items()
        }

    def get_identity(self) -> Identity:
        """Get the identity the gateway connected with.

        Raises:
            ConfigurationError: If the gateway is not connected
        """
        if self._identity is None:
            raise ConfigurationError("Gateway is not connected")
        return self._identity

    async def get_network(self, name: str) -> Network:
        """Get the network handle for a channel, creating it on first use.

        Args:
            name: Channel name

        Raises:
            ConfigurationError: If the gateway is not connected
        """
        if not self.is_connected():
            raise ConfigurationError("Gateway is not connected")
        return await self._networks.get_network(name)

    async def _build_network(self, name: str) -> Network:
        client = self._client
        if client is None:
            raise ConfigurationError("Gateway is not connected")

        network = Network(self, client.get_channel(name))
        try:
            await network.initialize()
        except BaseException:
            network.close()
            raise

        if self._session_logger:
            self._session_logger.info("Network created", channel=name)
        return network

    def disconnect(self) -> None:
        """Close all networks and release the client.

        Does nothing on an unconnected gateway. Options are kept so that
        ``get_options`` still reports the last connection's settings.
        """
        session_logger = self._session_logger
        self._release()
        if session_logger:
            session_logger.info("Gateway disconnected")

    def _release(self, keep_client: ClientPort | None = None) -> None:
        self._networks.clear()

        client = self._client
        self._client = None
        self._identity = None
        self._identity_context = None
        self._session_logger = None
        self._state = GatewayState.UNCONNECTED

        if client is not None and client is not keep_client:
            try:
                client.close()
            except Exception as e:
                if self._logger:
                    self._logger.exception("Failed to close client", exc_info=e)

    async def __aenter__(self) -> Gateway:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disconnect()
