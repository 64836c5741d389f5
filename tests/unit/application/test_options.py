"""Tests for gateway option defaults and typed views."""

import pytest

from ledger_gateway.application.event_strategies import msp_id_scope_all_for_tx
from ledger_gateway.application.options import (
    DiscoveryOptions,
    EventHandlerOptions,
    QueryHandlerOptions,
    default_gateway_options,
)
from ledger_gateway.application.query_strategies import msp_id_scope_single
from ledger_gateway.domain.exceptions import ConfigurationError


class TestDefaultGatewayOptions:
    """Test cases for default_gateway_options."""

    def test_defaults(self):
        """Test the default option values."""
        options = default_gateway_options()
        assert options["query_handler_options"]["timeout"] == 30
        assert options["query_handler_options"]["strategy"] is msp_id_scope_single
        assert options["event_handler_options"]["commit_timeout"] == 300
        assert options["event_handler_options"]["strategy"] is msp_id_scope_all_for_tx
        assert options["discovery"] == {"enabled": True, "as_localhost": True}

    def test_fresh_tree_per_call(self):
        """Test that mutating one default tree does not affect the next."""
        first = default_gateway_options()
        first["query_handler_options"]["timeout"] = 1
        assert default_gateway_options()["query_handler_options"]["timeout"] == 30


class TestOptionViews:
    """Test cases for typed option views."""

    def test_views_from_defaults(self):
        """Test reading each view from the default tree."""
        options = default_gateway_options()
        assert QueryHandlerOptions.from_options(options).timeout == 30
        assert EventHandlerOptions.from_options(options).commit_timeout == 300
        assert DiscoveryOptions.from_options(options).enabled is True

    def test_tombstoned_section_uses_field_defaults(self):
        """Test that a None section disables its strategy."""
        view = EventHandlerOptions.from_options({"event_handler_options": None})
        assert view.strategy is None
        assert view.commit_timeout == 300

    def test_extra_keys_ignored(self):
        """Test that unknown keys in a section are ignored."""
        view = DiscoveryOptions.from_options({"discovery": {"enabled": False, "other": 1}})
        assert view.enabled is False

    def test_invalid_timeout(self):
        """Test that a non-positive timeout is rejected."""
        with pytest.raises(ConfigurationError, match="query_handler_options"):
            QueryHandlerOptions.from_options({"query_handler_options": {"timeout": 0}})

    def test_invalid_strategy(self):
        """Test that a non-callable strategy is rejected."""
        with pytest.raises(ConfigurationError):
            EventHandlerOptions.from_options({"event_handler_options": {"strategy": 5}})
