"""Wallet port - Credential store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import Identity
    from .identity_provider import ProviderRegistryPort


class WalletPort(ABC):
    """Abstract interface for a store of labelled identities.

    How identities are physically stored is up to the implementation.
    """

    @abstractmethod
    async def get(self, label: str) -> Identity | None:
        """Get the identity stored under a label.

        Args:
            label: Identity label

        Returns:
            The identity, or None if the label is unknown
        """
        ...

    @abstractmethod
    def get_provider_registry(self) -> ProviderRegistryPort:
        """Get the registry used to interpret this wallet's identities."""
        ...
