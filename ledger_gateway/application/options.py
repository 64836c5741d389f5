"""Gateway option defaults and typed views of the merged option tree."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..domain.exceptions import ConfigurationError
from .event_strategies import msp_id_scope_all_for_tx
from .query_strategies import msp_id_scope_single

DEFAULT_QUERY_TIMEOUT = 30
DEFAULT_COMMIT_TIMEOUT = 300


def default_gateway_options() -> dict[str, Any]:
    """Build a fresh default option tree.

    A new tree is returned on every call, so merging into it never leaks
    state between gateways.
    """
    return {
        "query_handler_options": {
            "timeout": DEFAULT_QUERY_TIMEOUT,
            "strategy": msp_id_scope_single,
        },
        "event_handler_options": {
            "commit_timeout": DEFAULT_COMMIT_TIMEOUT,
            "strategy": msp_id_scope_all_for_tx,
        },
        "discovery": {
            "enabled": True,
            "as_localhost": True,
        },
    }


class _OptionsView(BaseModel):
    """Base for typed, read-only views of one subtree of the options."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    section: ClassVar[str]

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> _OptionsView:
        """Validate this view's subtree of a merged option tree.

        A missing or tombstoned subtree yields the view's field defaults.

        Raises:
            ConfigurationError: If the subtree holds invalid values
        """
        subtree = options.get(cls.section) or {}
        try:
            return cls.model_validate(subtree)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid {cls.section}: {e}",
                details={"section": cls.section},
            ) from e


class QueryHandlerOptions(_OptionsView):
    """Options controlling how queries are evaluated."""

    section: ClassVar[str] = "query_handler_options"

    timeout: float = Field(default=DEFAULT_QUERY_TIMEOUT, gt=0, description="Seconds per query")
    strategy: Callable[..., Any] | None = Field(
        default=None, description="Factory building a query handler for a network"
    )


class EventHandlerOptions(_OptionsView):
    """Options controlling how commit events are awaited."""

    section: ClassVar[str] = "event_handler_options"

    commit_timeout: float = Field(
        default=DEFAULT_COMMIT_TIMEOUT, gt=0, description="Seconds to wait for commit events"
    )
    strategy: Callable[..., Any] | None = Field(
        default=None, description="Factory building a commit strategy, None disables waiting"
    )


class DiscoveryOptions(_OptionsView):
    """Options controlling service discovery when a network is built."""

    section: ClassVar[str] = "discovery"

    enabled: bool = True
    as_localhost: bool = True
