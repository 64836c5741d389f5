"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from ledger_gateway.domain.models import Identity, IdentityContext
from ledger_gateway.infrastructure.bootstrap import bootstrap_defaults, reset_defaults
from ledger_gateway.infrastructure.identity_provider_registry import (
    new_default_provider_registry,
)
from ledger_gateway.ports.client import ClientPort
from ledger_gateway.ports.client_loader import ClientLoaderPort
from ledger_gateway.ports.wallet import WalletPort
from tests.builders import make_channel


@pytest.fixture(autouse=True)
def default_dependencies():
    """Register default dependencies for every test."""
    bootstrap_defaults()
    yield
    reset_defaults()
    bootstrap_defaults()


@pytest.fixture
def identity():
    """Create an X.509 identity."""
    return Identity(
        type="X.509",
        msp_id="Org1MSP",
        credentials={"certificate": "certificate", "private_key": "privateKey"},
    )


@pytest.fixture
def tls_identity():
    """Create an identity used for TLS client credentials."""
    return Identity(
        type="X.509",
        msp_id="Org1MSP",
        credentials={"certificate": "tls-certificate", "private_key": "tls-privateKey"},
    )


@pytest.fixture
def peers():
    """Create peers from two organizations."""
    return [
        SimpleNamespace(name="peer0.org1", msp_id="Org1MSP"),
        SimpleNamespace(name="peer1.org1", msp_id="Org1MSP"),
        SimpleNamespace(name="peer0.org2", msp_id="Org2MSP"),
    ]


@pytest.fixture
def mock_client(peers):
    """Create a mock ledger client."""
    client = MagicMock(spec=ClientPort)
    client.name = "gateway client"
    client.connection_options = {}
    client.new_identity_context.side_effect = lambda user: IdentityContext(
        name=user.name, msp_id=user.msp_id, user=user
    )
    client.get_channel.side_effect = lambda name: make_channel(name, peers)
    return client


@pytest.fixture
def mock_client_loader(mock_client):
    """Create a client loader returning the mock client."""
    loader = MagicMock(spec=ClientLoaderPort)
    loader.load_from_config = AsyncMock(return_value=mock_client)
    return loader


@pytest.fixture
def provider_registry():
    """Create a default provider registry."""
    return new_default_provider_registry()


@pytest.fixture
def mock_wallet(identity, provider_registry):
    """Create a wallet holding ``identity`` under the label "identity"."""
    stored = {"identity": identity}
    wallet = MagicMock(spec=WalletPort)
    wallet.get = AsyncMock(side_effect=lambda label: stored.get(label))
    wallet.get_provider_registry.return_value = provider_registry
    wallet.stored = stored
    return wallet


@pytest.fixture
def options(mock_wallet):
    """Create minimal connect options using a wallet label."""
    return {"wallet": mock_wallet, "identity": "identity"}


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    mock = MagicMock()
    mock.info = MagicMock()
    mock.warning = MagicMock()
    mock.error = MagicMock()
    mock.debug = MagicMock()
    mock.exception = MagicMock()
    return mock
