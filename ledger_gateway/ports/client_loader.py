"""Client loader port - Builds clients from connection profiles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import ClientPort


class ClientLoaderPort(ABC):
    """Abstract interface for turning a connection profile into a client."""

    @abstractmethod
    async def load_from_config(self, profile: Any) -> ClientPort:
        """Build a client from a connection profile.

        Args:
            profile: Connection profile reference, e.g. a path or a parsed mapping

        Returns:
            A client configured with the profile's peers, orderers and CAs
        """
        ...
