"""
Fixed-width byte arrays.

- Bytes20: a claimant identity (an account address).
- Bytes32: a SHA-256 digest (leaf, inner node, root or nullifier).
"""

from __future__ import annotations

from typing import IO, Any, ClassVar, Iterable

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .record import FixedSizeType


def _to_bytes(value: Any) -> bytes:
    """
    Accept raw bytes, a hex string (`0x` optional) or an iterable of ints in 0..255.

    Raises:
        ValueError: For bad hex digits or out of range ints.
        TypeError: For anything else.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return bytes.fromhex(value[2:] if value[:2] in ("0x", "0X") else value)
    if isinstance(value, Iterable):
        return bytes(value)
    raise TypeError(f"Cannot build bytes from {type(value).__name__}")


class BaseBytes(bytes, FixedSizeType):
    """
    An immutable byte string of exactly `LENGTH` bytes.

    Equality is plain byte equality. Hashing includes the type, so an array
    and an equal plain `bytes` hash differently.
    """

    LENGTH: ClassVar[int]

    def __new__(cls, value: Any = b"") -> Self:
        """
        Raises:
            ValueError: If `value` is not exactly `LENGTH` bytes.
        """
        data = _to_bytes(value)
        if len(data) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(data)}")
        return super().__new__(cls, data)

    @classmethod
    def zero(cls) -> Self:
        """All zero bytes."""
        return cls(bytes(cls.LENGTH))

    @classmethod
    def get_byte_length(cls) -> int:
        return cls.LENGTH

    def encode_bytes(self) -> bytes:
        return bytes(self)

    def serialize(self, stream: IO[bytes]) -> int:
        return stream.write(self)

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Raises:
            IOError: If the stream ends before `LENGTH` bytes are read.
        """
        data = stream.read(cls.LENGTH)
        if len(data) != cls.LENGTH:
            raise IOError(f"Stream ended prematurely while decoding {cls.__name__}")
        return cls(data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Python input is an instance or raw bytes of the right width.

        JSON carries hex strings. Input may omit the `0x` prefix; output
        always has it.
        """
        wrap = core_schema.no_info_plain_validator_function(cls)
        raw = core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH)

        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema([core_schema.str_schema(), wrap]),
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), core_schema.chain_schema([raw, wrap])]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: f"0x{value.hex()}", when_used="json"
            ),
        )

    def hex(self, *args: Any) -> str:
        """Lowercase hex without a prefix."""
        return bytes(self).hex(*args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"

    def __hash__(self) -> int:
        return hash((type(self), bytes(self)))


class Bytes20(BaseBytes):
    """An account address."""

    LENGTH = 20


class Bytes32(BaseBytes):
    """A SHA-256 digest."""

    LENGTH = 32


ZERO_HASH: Bytes32 = Bytes32.zero()
"""A 32-byte hash with every byte set to zero."""
