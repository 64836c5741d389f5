"""X.509 identity provider."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..domain.exceptions import ConfigurationError, UnsupportedIdentityTypeError
from ..domain.models import X509_IDENTITY_TYPE, Identity, User
from ..ports.identity_provider import IdentityProvider


class X509Provider(IdentityProvider):
    """Provider for identities backed by an X.509 certificate and private key."""

    type = X509_IDENTITY_TYPE

    async def get_user_context(self, identity: Identity, name: str) -> User:
        """Build a user from an X.509 identity.

        Args:
            identity: X.509 identity
            name: Display name for the user

        Returns:
            User carrying the identity's certificate and key

        Raises:
            UnsupportedIdentityTypeError: If the identity is not X.509
        """
        self._check_type(identity.type)
        return User(
            name=name,
            msp_id=identity.msp_id,
            certificate=identity.credentials.certificate,
            private_key=identity.credentials.private_key,
        )

    def from_json(self, data: dict[str, Any]) -> Identity:
        """Build an identity from stored JSON.

        The stored form carries a ``version`` field that is not part of the
        identity itself.
        """
        self._check_type(data.get("type"))
        payload = {k: v for k, v in data.items() if k != "version"}
        try:
            return Identity.model_validate(payload)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid {self.type} identity data: {e}",
                details={"identity_type": self.type},
            ) from e

    def to_json(self, identity: Identity) -> dict[str, Any]:
        """Convert an identity to stored JSON."""
        self._check_type(identity.type)
        return {"version": 1, **identity.model_dump(by_alias=True)}

    def _check_type(self, identity_type: Any) -> None:
        if identity_type != self.type:
            raise UnsupportedIdentityTypeError(str(identity_type))
