"""Resolution of gateway identity options into a client-bound identity."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..domain.exceptions import ConfigurationError, NotFoundError
from ..domain.models import Identity, ResolvedIdentity, TlsInfo
from .dependency_provider import DependencyProvider

if TYPE_CHECKING:
    from ..ports.client import ClientPort
    from ..ports.identity_provider import IdentityProvider, ProviderRegistryPort
    from ..ports.logger import LoggerPort
    from ..ports.wallet import WalletPort


class IdentityResolver:
    """Turns identity options into an identity context bound to a client.

    Recognized options:

    - ``identity``: wallet label or literal identity (model or mapping)
    - ``wallet``: wallet holding labelled identities
    - ``identity_provider``: provider used instead of a registry lookup
    - ``tls_info``: literal ``{"certificate", "key"}`` TLS client credentials
    - ``client_tls_identity``: wallet label of the TLS client identity

    The client's TLS credentials are the only state modified.
    """

    def __init__(self, logger: LoggerPort | None = None) -> None:
        self._logger = logger

    async def resolve(self, client: ClientPort, options: Mapping[str, Any]) -> ResolvedIdentity:
        """Resolve the identity options against a client.

        Args:
            client: Client receiving the identity context and TLS material
            options: Gateway options

        Returns:
            The identity, its bound context and any TLS material applied

        Raises:
            ConfigurationError: If no identity is given, a label is given without wallet,
                or the bound context belongs to another organization
            NotFoundError: If a label is missing from the wallet
            UnsupportedIdentityTypeError: If no provider handles the identity type
        """
        identity_option = options.get("identity")
        if not identity_option:
            raise ConfigurationError("An identity must be assigned to a Gateway instance")

        wallet: WalletPort | None = options.get("wallet")

        if isinstance(identity_option, str):
            label = identity_option
            identity = await self._get_from_wallet(wallet, label)
        else:
            identity = self._to_identity(identity_option)
            label = identity.msp_id

        provider = self._select_provider(identity, wallet, options.get("identity_provider"))
        user = await provider.get_user_context(identity, label)
        identity_context = client.new_identity_context(user)
        context_msp_id = getattr(identity_context, "msp_id", None)
        if context_msp_id != identity.msp_id:
            raise ConfigurationError(
                f"Identity context mspId {context_msp_id} does not match identity mspId "
                f"{identity.msp_id}",
                details={"label": label, "msp_id": identity.msp_id},
            )

        if self._logger:
            self._logger.debug(
                "Resolved gateway identity",
                label=label,
                identity_type=identity.type,
                msp_id=identity.msp_id,
            )

        tls_material = await self._resolve_tls(wallet, options)
        if tls_material is not None:
            client.set_tls_client_cert_and_key(tls_material.certificate, tls_material.key)

        return ResolvedIdentity(
            identity=identity,
            identity_context=identity_context,
            tls_material=tls_material,
        )

    async def _get_from_wallet(self, wallet: WalletPort | None, label: str) -> Identity:
        if wallet is None:
            raise ConfigurationError("No wallet supplied from which to retrieve identity label")
        identity = await wallet.get(label)
        if identity is None:
            raise NotFoundError(label)
        return self._to_identity(identity)

    @staticmethod
    def _to_identity(value: Any) -> Identity:
        if isinstance(value, Identity):
            return value
        if isinstance(value, Mapping):
            try:
                return Identity.model_validate(dict(value))
            except ValidationError as e:
                raise ConfigurationError(f"Invalid identity: {e}") from e
        raise ConfigurationError(
            f"Invalid identity type: {type(value).__name__}. "
            "Expected a wallet label or an identity object"
        )

    def _select_provider(
        self,
        identity: Identity,
        wallet: WalletPort | None,
        explicit: IdentityProvider | None,
    ) -> IdentityProvider:
        if explicit is not None:
            return explicit
        registry: ProviderRegistryPort = (
            wallet.get_provider_registry()
            if wallet is not None
            else DependencyProvider.new_provider_registry()
        )
        return registry.get_provider(identity.type)

    async def _resolve_tls(
        self, wallet: WalletPort | None, options: Mapping[str, Any]
    ) -> TlsInfo | None:
        tls_info = options.get("tls_info")
        if tls_info is not None:
            if isinstance(tls_info, TlsInfo):
                return tls_info
            try:
                return TlsInfo.model_validate(dict(tls_info))
            except (ValidationError, TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid tls_info: {e}") from e

        tls_label = options.get("client_tls_identity")
        if tls_label is None:
            return None

        tls_identity = await self._get_from_wallet(wallet, tls_label)
        if self._logger:
            self._logger.debug("Resolved client TLS identity", label=tls_label)
        return TlsInfo(
            certificate=tls_identity.credentials.certificate,
            key=tls_identity.credentials.private_key,
        )
