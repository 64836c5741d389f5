"""Ports layer - Interfaces of the gateway's external collaborators."""

from .client import ChannelPort, ClientPort
from .client_loader import ClientLoaderPort
from .identity_provider import IdentityProvider, ProviderRegistryPort
from .logger import LoggerPort
from .wallet import WalletPort

__all__ = [
    "ChannelPort",
    "ClientLoaderPort",
    "ClientPort",
    "IdentityProvider",
    "LoggerPort",
    "ProviderRegistryPort",
    "WalletPort",
]
