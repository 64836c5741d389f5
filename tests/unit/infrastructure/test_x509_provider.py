"""Tests for the X.509 identity provider."""

import pytest

from ledger_gateway.domain.exceptions import ConfigurationError, UnsupportedIdentityTypeError
from ledger_gateway.domain.models import Identity, User
from ledger_gateway.infrastructure.x509_provider import X509Provider
from ledger_gateway.ports.identity_provider import IdentityProvider


class TestX509Provider:
    """Test cases for X509Provider."""

    @pytest.fixture
    def provider(self):
        return X509Provider()

    def test_implements_identity_provider(self, provider):
        """Test that X509Provider implements the provider port."""
        assert isinstance(provider, IdentityProvider)
        assert provider.type == "X.509"

    @pytest.mark.asyncio
    async def test_get_user_context(self, provider, identity):
        """Test building a user from an identity."""
        user = await provider.get_user_context(identity, "admin")

        assert isinstance(user, User)
        assert user.name == "admin"
        assert user.msp_id == identity.msp_id
        assert user.certificate == "certificate"
        assert user.private_key == "privateKey"

    @pytest.mark.asyncio
    async def test_get_user_context_rejects_other_types(self, provider):
        """Test that identities of another type are rejected."""
        other = Identity(
            type="HSM-X.509",
            msp_id="Org1MSP",
            credentials={"certificate": "cert", "private_key": "key"},
        )
        with pytest.raises(UnsupportedIdentityTypeError, match="HSM-X.509"):
            await provider.get_user_context(other, "admin")

    def test_json_round_trip(self, provider, identity):
        """Test converting an identity to stored JSON and back."""
        data = provider.to_json(identity)

        assert data["version"] == 1
        assert data["mspId"] == "Org1MSP"
        assert data["credentials"]["privateKey"] == "privateKey"
        assert provider.from_json(data) == identity

    def test_from_json_wrong_type(self, provider):
        """Test that stored data of another type is rejected."""
        with pytest.raises(UnsupportedIdentityTypeError):
            provider.from_json({"type": "other", "mspId": "Org1MSP", "credentials": {}})

    def test_from_json_invalid_data(self, provider):
        """Test that incomplete stored data raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            provider.from_json({"type": "X.509", "mspId": "Org1MSP"})
