"""Commit event strategies.

A strategy is a callable taking a network and returning a ``CommitStrategy``
that decides when a submitted transaction counts as committed, based on the
commit events reported by peers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..domain.enums import StrategyOutcome

if TYPE_CHECKING:
    from .network import Network


class CommitStrategy:
    """Tracks commit events from a fixed set of peers.

    With ``require_all`` the transaction succeeds once every peer responded
    and at least one reported success. Without it, the first success wins.
    Either way it fails once every peer reported failure.
    """

    def __init__(self, peers: list[Any], require_all: bool) -> None:
        self._peers = list(peers)
        self._require_all = require_all
        self._successes = 0
        self._failures = 0

    @property
    def peers(self) -> list[Any]:
        return self._peers.copy()

    @property
    def require_all(self) -> bool:
        return self._require_all

    @property
    def outcome(self) -> StrategyOutcome | None:
        """Current outcome, or None while still waiting for events."""
        total = len(self._peers)
        if total == 0:
            return StrategyOutcome.SUCCESS
        if self._failures >= total:
            return StrategyOutcome.FAILURE
        if self._require_all:
            if self._successes + self._failures >= total:
                return StrategyOutcome.SUCCESS
            return None
        return StrategyOutcome.SUCCESS if self._successes else None

    def on_event(self, peer: Any, success: bool) -> StrategyOutcome | None:
        """Record a commit event from a peer.

        Events from peers outside the strategy are ignored.
        """
        if not any(p is peer for p in self._peers):
            return self.outcome
        if success:
            self._successes += 1
        else:
            self._failures += 1
        return self.outcome


def msp_id_scope_all_for_tx(network: Network) -> CommitStrategy:
    """Wait for every peer of the gateway's organization."""
    return CommitStrategy(network.get_channel().get_endorsers(network.msp_id), require_all=True)


def msp_id_scope_any_for_tx(network: Network) -> CommitStrategy:
    """Wait for the first peer of the gateway's organization."""
    return CommitStrategy(network.get_channel().get_endorsers(network.msp_id), require_all=False)


def network_scope_all_for_tx(network: Network) -> CommitStrategy:
    """Wait for every peer in the channel."""
    return CommitStrategy(network.get_channel().get_endorsers(), require_all=True)


def network_scope_any_for_tx(network: Network) -> CommitStrategy:
    """Wait for the first peer in the channel."""
    return CommitStrategy(network.get_channel().get_endorsers(), require_all=False)
