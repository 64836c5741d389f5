"""In-memory implementation of the WalletPort.

This is an infrastructure adapter for tests, examples and short-lived
processes. Identities are kept in their provider JSON form so that what
comes back out of the wallet is always rebuilt through the registry.
"""

from __future__ import annotations

from typing import Any

from ..domain.models import Identity
from ..ports.identity_provider import ProviderRegistryPort
from ..ports.wallet import WalletPort
from .identity_provider_registry import new_default_provider_registry


class InMemoryWallet(WalletPort):
    """Dictionary backed wallet."""

    def __init__(self, provider_registry: ProviderRegistryPort | None = None) -> None:
        self._registry = provider_registry or new_default_provider_registry()
        self._storage: dict[str, dict[str, Any]] = {}

    def get_provider_registry(self) -> ProviderRegistryPort:
        return self._registry

    async def put(self, label: str, identity: Identity) -> None:
        """Store an identity under a label, replacing any existing one."""
        provider = self._registry.get_provider(identity.type)
        self._storage[label] = provider.to_json(identity)

    async def get(self, label: str) -> Identity | None:
        data = self._storage.get(label)
        if data is None:
            return None
        provider = self._registry.get_provider(data["type"])
        return provider.from_json(data)

    async def remove(self, label: str) -> None:
        """Remove a label. Unknown labels are ignored."""
        self._storage.pop(label, None)

    async def list(self) -> list[str]:
        """List stored labels."""
        return list(self._storage)
