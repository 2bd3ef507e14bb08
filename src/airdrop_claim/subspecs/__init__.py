"""Feature packages of the airdrop claim protocol."""

from .allowlist import AllowlistConfig
from .distributor import Distributor

__all__ = [
    "AllowlistConfig",
    "Distributor",
]
