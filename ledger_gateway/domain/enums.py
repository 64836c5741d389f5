"""Domain enums for type safety and consistency."""

from enum import Enum


class GatewayState(str, Enum):
    """Gateway connection state.

    A gateway starts unconnected, becomes connected after a successful
    connect and returns to unconnected on disconnect.
    """

    UNCONNECTED = "UNCONNECTED"
    CONNECTED = "CONNECTED"


class StrategyOutcome(str, Enum):
    """Final outcome reported by a commit event strategy."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
