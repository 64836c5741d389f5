"""Tests for query and commit event strategies."""

from unittest.mock import MagicMock

import pytest

from ledger_gateway.application.event_strategies import (
    CommitStrategy,
    msp_id_scope_all_for_tx,
    msp_id_scope_any_for_tx,
    network_scope_all_for_tx,
    network_scope_any_for_tx,
)
from ledger_gateway.application.query_strategies import (
    RoundRobinQueryHandler,
    SingleQueryHandler,
    msp_id_scope_round_robin,
    msp_id_scope_single,
)
from ledger_gateway.domain.enums import StrategyOutcome
from tests.builders import make_channel


@pytest.fixture
def network(peers):
    """Create a network stand-in for organization Org1MSP."""
    network = MagicMock()
    network.msp_id = "Org1MSP"
    network.get_channel.return_value = make_channel("mychannel", peers)
    return network


class TestQueryHandlers:
    """Test cases for query handlers."""

    def test_single_sticks_to_preferred_peer(self, peers):
        """Test that the single handler keeps the same first peer."""
        handler = SingleQueryHandler(peers)
        assert handler.candidate_peers()[0] is peers[0]
        assert handler.candidate_peers()[0] is peers[0]

    def test_single_fails_over(self, peers):
        """Test that a failure moves the preferred peer on."""
        handler = SingleQueryHandler(peers)
        handler.report_failure(peers[0])
        assert handler.candidate_peers() == [peers[1], peers[2], peers[0]]

        # A failure of a non-preferred peer changes nothing
        handler.report_failure(peers[0])
        assert handler.candidate_peers()[0] is peers[1]

    def test_single_with_no_peers(self):
        """Test the single handler without peers."""
        handler = SingleQueryHandler([])
        handler.report_failure(object())
        assert handler.candidate_peers() == []

    def test_round_robin_rotates(self, peers):
        """Test that each query starts at the next peer."""
        handler = RoundRobinQueryHandler(peers)
        starts = [handler.candidate_peers()[0] for _ in range(4)]
        assert starts == [peers[0], peers[1], peers[2], peers[0]]

    def test_round_robin_with_no_peers(self):
        """Test the round robin handler without peers."""
        assert RoundRobinQueryHandler([]).candidate_peers() == []

    def test_msp_id_scope_factories(self, network, peers):
        """Test that query strategies select the organization's peers."""
        assert msp_id_scope_single(network).peers == peers[:2]
        assert msp_id_scope_round_robin(network).peers == peers[:2]


class TestCommitStrategy:
    """Test cases for CommitStrategy."""

    def test_all_for_tx_waits_for_every_peer(self, peers):
        """Test that all-for-tx succeeds after every peer responded."""
        strategy = CommitStrategy(peers, require_all=True)
        assert strategy.on_event(peers[0], True) is None
        assert strategy.on_event(peers[1], False) is None
        assert strategy.on_event(peers[2], True) == StrategyOutcome.SUCCESS

    def test_all_for_tx_fails_when_all_fail(self, peers):
        """Test that all-for-tx fails when every peer failed."""
        strategy = CommitStrategy(peers, require_all=True)
        for peer in peers:
            outcome = strategy.on_event(peer, False)
        assert outcome == StrategyOutcome.FAILURE

    def test_any_for_tx_succeeds_on_first_success(self, peers):
        """Test that any-for-tx succeeds on the first success."""
        strategy = CommitStrategy(peers, require_all=False)
        assert strategy.on_event(peers[0], False) is None
        assert strategy.on_event(peers[1], True) == StrategyOutcome.SUCCESS

    def test_any_for_tx_fails_when_all_fail(self, peers):
        """Test that any-for-tx fails when every peer failed."""
        strategy = CommitStrategy(peers, require_all=False)
        for peer in peers:
            outcome = strategy.on_event(peer, False)
        assert outcome == StrategyOutcome.FAILURE

    def test_unknown_peer_ignored(self, peers):
        """Test that events from other peers do not count."""
        strategy = CommitStrategy(peers[:1], require_all=True)
        assert strategy.on_event(peers[2], True) is None
        assert strategy.on_event(peers[0], True) == StrategyOutcome.SUCCESS

    def test_no_peers_succeeds_immediately(self):
        """Test that a strategy without peers has nothing to wait for."""
        assert CommitStrategy([], require_all=True).outcome == StrategyOutcome.SUCCESS

    def test_factories_scope(self, network, peers):
        """Test organization and network scoped factories."""
        assert msp_id_scope_all_for_tx(network).peers == peers[:2]
        assert msp_id_scope_all_for_tx(network).require_all
        assert not msp_id_scope_any_for_tx(network).require_all
        assert network_scope_all_for_tx(network).peers == peers
        assert not network_scope_any_for_tx(network).require_all
