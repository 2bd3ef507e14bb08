"""
Fixed-size binary records.

A record is an ordered collection of named fields whose widths are all known
at the type level. Its encoding is the concatenation of its fields in
declaration order, with no offsets, lengths or padding:

    [field_1][field_2]...[field_n]

This is the format in which published claim records are committed.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import IO, Type, cast

from typing_extensions import Self

from .base import StrictBaseModel
from .exceptions import RecordDecodeError


class FixedSizeType(ABC):
    """Minimal interface for values with a known, constant byte width."""

    @classmethod
    @abstractmethod
    def get_byte_length(cls) -> int:
        """Get the number of bytes every value of this type occupies."""
        ...

    @abstractmethod
    def serialize(self, stream: IO[bytes]) -> int:
        """
        Serialize the value and write it to a binary stream.

        Returns:
            The number of bytes written.
        """
        ...

    @classmethod
    @abstractmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """Read exactly `get_byte_length()` bytes from `stream` and build a value."""
        ...


class FixedRecord(StrictBaseModel, FixedSizeType):
    """
    A strict pydantic model whose fields are all fixed-size types.

    Example:
        >>> class Output(FixedRecord):
        ...     root: Bytes32
        ...     epoch: Uint64
        >>> len(Output(root=ZERO_HASH, epoch=Uint64(1)).encode_bytes())
        40
    """

    @classmethod
    def _field_types(cls) -> list[tuple[str, Type[FixedSizeType]]]:
        """Field names and types in declaration order."""
        return [
            (name, cast(Type[FixedSizeType], info.annotation))
            for name, info in cls.model_fields.items()
        ]

    @classmethod
    def get_byte_length(cls) -> int:
        """Sum of the widths of every field."""
        return sum(field_type.get_byte_length() for _, field_type in cls._field_types())

    def serialize(self, stream: IO[bytes]) -> int:
        """Write every field in declaration order."""
        return sum(getattr(self, name).serialize(stream) for name, _ in self._field_types())

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """Read every field in declaration order."""
        fields = {name: field_type.deserialize(stream) for name, field_type in cls._field_types()}
        return cls(**fields)

    def encode_bytes(self) -> bytes:
        """Serialize the record to its canonical byte string."""
        with io.BytesIO() as stream:
            self.serialize(stream)
            return stream.getvalue()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Parse a canonical byte string.

        Raises:
            RecordDecodeError: If `data` is not exactly `get_byte_length()` bytes.
        """
        expected = cls.get_byte_length()
        if len(data) != expected:
            raise RecordDecodeError(cls.__name__, expected=expected, actual=len(data))
        with io.BytesIO(data) as stream:
            return cls.deserialize(stream)
