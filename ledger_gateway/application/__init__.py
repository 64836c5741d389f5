"""Application layer - Gateway orchestration, identity resolution and network handles."""

from .dependency_provider import DependencyProvider
from .event_strategies import (
    CommitStrategy,
    msp_id_scope_all_for_tx,
    msp_id_scope_any_for_tx,
    network_scope_all_for_tx,
    network_scope_any_for_tx,
)
from .gateway import Gateway
from .identity_resolver import IdentityResolver
from .network import Network
from .network_cache import NetworkCache
from .options import (
    DiscoveryOptions,
    EventHandlerOptions,
    QueryHandlerOptions,
    default_gateway_options,
)
from .query_strategies import (
    RoundRobinQueryHandler,
    SingleQueryHandler,
    msp_id_scope_round_robin,
    msp_id_scope_single,
)

__all__ = [
    "CommitStrategy",
    "DependencyProvider",
    "DiscoveryOptions",
    "EventHandlerOptions",
    "Gateway",
    "IdentityResolver",
    "Network",
    "NetworkCache",
    "QueryHandlerOptions",
    "RoundRobinQueryHandler",
    "SingleQueryHandler",
    "default_gateway_options",
    "msp_id_scope_all_for_tx",
    "msp_id_scope_any_for_tx",
    "msp_id_scope_round_robin",
    "msp_id_scope_single",
    "network_scope_all_for_tx",
    "network_scope_any_for_tx",
]
