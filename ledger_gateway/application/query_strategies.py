"""Query handler strategies.

A strategy is a callable taking a network and returning a query handler.
Handlers decide the order in which peers are tried for an evaluation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .network import Network


class SingleQueryHandler:
    """Sends every query to the same peer until that peer fails."""

    def __init__(self, peers: list[Any]) -> None:
        self._peers = list(peers)
        self._current = 0

    @property
    def peers(self) -> list[Any]:
        return self._peers.copy()

    def candidate_peers(self) -> list[Any]:
        """Peers to try for the next query, preferred peer first."""
        return self._peers[self._current :] + self._peers[: self._current]

    def report_failure(self, peer: Any) -> None:
        """Move on to the next peer if the preferred one failed."""
        if self._peers and self._peers[self._current] is peer:
            self._current = (self._current + 1) % len(self._peers)


class RoundRobinQueryHandler:
    """Starts each query at the next peer in turn."""

    def __init__(self, peers: list[Any]) -> None:
        self._peers = list(peers)
        self._next = 0

    @property
    def peers(self) -> list[Any]:
        return self._peers.copy()

    def candidate_peers(self) -> list[Any]:
        if not self._peers:
            return []
        start = self._next
        self._next = (self._next + 1) % len(self._peers)
        return self._peers[start:] + self._peers[:start]

    def report_failure(self, peer: Any) -> None:
        pass


def msp_id_scope_single(network: Network) -> SingleQueryHandler:
    """Query a single peer of the gateway's organization, failing over in turn."""
    return SingleQueryHandler(network.get_channel().get_endorsers(network.msp_id))


def msp_id_scope_round_robin(network: Network) -> RoundRobinQueryHandler:
    """Spread queries across the peers of the gateway's organization."""
    return RoundRobinQueryHandler(network.get_channel().get_endorsers(network.msp_id))
