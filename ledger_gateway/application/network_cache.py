"""Get-or-create cache of network handles keyed by channel name."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..ports.logger import LoggerPort
    from .network import Network

NetworkFactory = Callable[[str], Awaitable["Network"]]


class NetworkCache:
    """Caches one network handle per channel name.

    The build task for a name is stored before it runs, so concurrent
    requests for the same name share a single construction. A failed build
    is evicted and its error reaches every waiting caller; the next request
    starts a fresh build.
    """

    def __init__(self, factory: NetworkFactory, logger: LoggerPort | None = None) -> None:
        """Initialize the cache.

        Args:
            factory: Coroutine function building an initialized network for a name
            logger: Optional logger for debugging
        """
        self._factory = factory
        self._logger = logger
        self._entries: dict[str, asyncio.Task[Network]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def names(self) -> list[str]:
        """Channel names with a completed or in-flight entry."""
        return list(self._entries)

    async def get_network(self, name: str) -> Network:
        """Get the network for a channel, building it on first request.

        Args:
            name: Channel name

        Returns:
            The single network handle for this name
        """
        task = self._entries.get(name)
        if task is None:
            task = asyncio.ensure_future(self._factory(name))
            self._entries[name] = task
            task.add_done_callback(lambda t, n=name: self._on_build_done(n, t))
            if self._logger:
                self._logger.debug("Building network", channel=name)
        elif self._logger:
            self._logger.debug("Network cache hit", channel=name)

        # Shield so that one cancelled caller does not cancel the shared build
        return await asyncio.shield(task)

    def _on_build_done(self, name: str, task: asyncio.Task[Network]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is None:
            return
        if self._entries.get(name) is task:
            del self._entries[name]
        if self._logger:
            self._logger.error("Network build failed", channel=name, error=str(error))

    def clear(self) -> None:
        """Close every cached network and empty the cache.

        In-flight builds are cancelled. Errors raised while closing a network
        are logged and do not stop the remaining networks from closing.
        """
        entries = self._entries
        self._entries = {}

        for name, task in entries.items():
            if not task.done():
                task.cancel()
                continue
            if task.cancelled() or task.exception() is not None:
                continue
            try:
                task.result().close()
            except Exception as e:
                if self._logger:
                    self._logger.exception(
                        "Failed to close network", exc_info=e, channel=name
                    )

        if self._logger and entries:
            self._logger.info("Cleared network cache", entries_removed=len(entries))
