"""Reusable type definitions for allowlist trees and claims."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import ZERO_HASH, BaseBytes, Bytes20, Bytes32
from .exceptions import (
    ClaimError,
    ClaimRejectedError,
    EmptyInputError,
    EpochMismatchError,
    IndexOutOfRangeError,
    InvalidProofError,
    RecordDecodeError,
)
from .record import FixedRecord, FixedSizeType
from .uint import BaseUint, Uint32, Uint64

__all__ = [
    # Core types
    "Uint32",
    "Uint64",
    "BaseUint",
    "BaseBytes",
    "Bytes20",
    "Bytes32",
    "ZERO_HASH",
    "CamelModel",
    "StrictBaseModel",
    "FixedRecord",
    "FixedSizeType",
    # Exceptions
    "ClaimError",
    "ClaimRejectedError",
    "EmptyInputError",
    "EpochMismatchError",
    "IndexOutOfRangeError",
    "InvalidProofError",
    "RecordDecodeError",
]
