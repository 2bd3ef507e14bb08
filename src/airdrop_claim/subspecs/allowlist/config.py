"""Allowlist configuration loader.

Loads the eligibility set for one distribution round from a YAML file:

    EPOCH: 7
    MEMBERS:
    - 0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed
    - 0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359

Addresses must be 0x-prefixed or quoted. A bare run of decimal digits is a
YAML integer and is rejected rather than guessed at.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator, model_validator

from airdrop_claim.types import Bytes20, StrictBaseModel, Uint64


class _AllowlistLoader(yaml.SafeLoader):
    """Safe loader that keeps 0x-prefixed scalars as the text they were written as."""


def _construct_int(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> int | str:
    text = loader.construct_scalar(node)
    if isinstance(text, str) and text.lower().startswith("0x"):
        return text
    return loader.construct_yaml_int(node)


_AllowlistLoader.add_constructor("tag:yaml.org,2002:int", _construct_int)


def _load_yaml(stream: Any) -> Any:
    return yaml.load(stream, Loader=_AllowlistLoader)


class AllowlistConfig(StrictBaseModel):
    """
    The finalized member list for one airdrop round.

    Member order is significant: a member's position in the list is its leaf
    index in the tree, so every party must load the same file to agree on the
    root.

    Field names use UPPERCASE in YAML. Pydantic aliases map them to
    snake_case Python attributes.
    """

    epoch: Uint64 = Field(alias="EPOCH")
    """Distribution round the allowlist is published for."""

    num_members: int | None = Field(default=None, alias="NUM_MEMBERS")
    """
    Expected number of members (optional).

    When present it must equal the length of the member list, which catches
    truncated files.
    """

    members: list[Bytes20] = Field(alias="MEMBERS")
    """Addresses eligible to claim, in tree order."""

    @field_validator("members", mode="before")
    @classmethod
    def parse_hex_addresses(cls, v: Any) -> list[Bytes20]:
        """
        Convert hex strings to validated Bytes20 addresses.

        Integers are rejected: an address written without 0x and without
        quotes has already lost its leading zeros, or was never hex at all.
        """
        if not isinstance(v, list):
            raise ValueError(f"members must be a list, got {type(v).__name__}")

        result = []
        for address in v:
            if isinstance(address, int):
                raise ValueError(
                    f"member address {address} is an integer; write it 0x-prefixed or quoted"
                )
            result.append(Bytes20(address))
        return result

    @model_validator(mode="after")
    def validate_members(self) -> AllowlistConfig:
        """Reject empty, duplicated or miscounted member lists."""
        if not self.members:
            raise ValueError("MEMBERS must list at least one address")

        if len(set(self.members)) != len(self.members):
            raise ValueError("MEMBERS contains duplicate addresses")

        if self.num_members is not None and self.num_members != len(self.members):
            raise ValueError(
                f"NUM_MEMBERS ({self.num_members}) does not match "
                f"actual member count ({len(self.members)})"
            )
        return self

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> AllowlistConfig:
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = _load_yaml(f)
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, content: str) -> AllowlistConfig:
        """
        Load configuration from a YAML string.

        Useful for testing or programmatic config generation.
        """
        data = _load_yaml(content)
        return cls.model_validate(data)
