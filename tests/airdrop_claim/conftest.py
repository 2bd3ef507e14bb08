"""
Shared pytest fixtures for all airdrop_claim tests.

Provides the small fixed allowlists used across test modules.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import yaml

from airdrop_claim.subspecs.merkle import MerkleTree
from airdrop_claim.types import Bytes20

ADDR_1 = Bytes20(b"\x11" * 20)
ADDR_2 = Bytes20(b"\x22" * 20)
ADDR_3 = Bytes20(b"\x33" * 20)
ADDR_4 = Bytes20(b"\x44" * 20)
OUTSIDER = Bytes20(b"\x99" * 20)


@pytest.fixture
def addresses() -> list[Bytes20]:
    """Four fixed member addresses, in tree order."""
    return [ADDR_1, ADDR_2, ADDR_3, ADDR_4]


@pytest.fixture
def outsider() -> Bytes20:
    """An address that is on no fixture allowlist."""
    return OUTSIDER


@pytest.fixture
def tree(addresses: list[Bytes20]) -> MerkleTree:
    """Tree over the four fixture addresses."""
    return MerkleTree.build(addresses)


@pytest.fixture
def allowlist_yaml(addresses: list[Bytes20]) -> str:
    """Allowlist YAML for the four fixture addresses at epoch 7."""
    return yaml.dump(
        {
            "EPOCH": 7,
            "MEMBERS": ["0x" + address.hex() for address in addresses],
        }
    )


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Drop any handlers a test attaches to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
