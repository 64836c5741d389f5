"""Domain-specific exceptions for the gateway."""


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GatewayError):
    """Invalid or incomplete gateway configuration."""

    pass


class NotFoundError(GatewayError):
    """Raised when an identity label is not present in a wallet."""

    def __init__(self, label: str):
        super().__init__(
            f"Identity not found in wallet: {label}",
            details={"label": label},
        )
        self.label = label


class UnsupportedIdentityTypeError(GatewayError):
    """Raised when no identity provider is registered for an identity type."""

    def __init__(self, identity_type: str):
        super().__init__(
            f"Unknown identity type: {identity_type}",
            details={"identity_type": identity_type},
        )
        self.identity_type = identity_type


class NetworkError(GatewayError):
    """Network handle construction or access errors."""

    def __init__(self, message: str, channel_name: str | None = None):
        super().__init__(message)
        self.channel_name = channel_name
        if channel_name:
            self.details["channel_name"] = channel_name
