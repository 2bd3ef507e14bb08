"""Fixed-width unsigned integers with strict same-type arithmetic."""

from __future__ import annotations

from typing import IO, Any, Callable, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .record import FixedSizeType


def _same_width_only(name: str, symbol: str, *, wraps: bool) -> Callable[..., Any]:
    """
    Build an operator that only accepts an operand of the exact same class.

    A `Uint32` never mixes with a `Uint64` or a plain `int`. Arithmetic
    results are wrapped again, which range checks them.
    """
    int_op = getattr(int, name)

    def strict_op(self: BaseUint, other: Any) -> Any:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Unsupported operand type(s) for {symbol}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )
        result = int_op(self, other)
        return type(self)(result) if wraps else result

    strict_op.__name__ = name
    strict_op.__doc__ = f"Apply `{symbol}` to two values of the same width."
    return strict_op


class BaseUint(int, FixedSizeType):
    """
    An unsigned integer of `BITS` bits, encoded little-endian.

    Subclasses set `BITS`. Values outside [0, 2**BITS) cannot be constructed.
    """

    BITS: ClassVar[int]

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Raises:
            OverflowError: If `value` does not fit in `BITS` bits.
        """
        number = int(value)
        if number < 0 or number >> cls.BITS:
            raise OverflowError(f"{number} is out of range for {cls.__name__}")
        return super().__new__(cls, number)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Python input must be a real `int` (not a bool, float or string).

        JSON input is a number in range. Output is always a plain int.
        """

        def from_python(value: Any) -> BaseUint:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{cls.__name__} expects an int, got {type(value).__name__}")
            try:
                return cls(value)
            except OverflowError as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls, core_schema.int_schema(ge=0, lt=1 << cls.BITS)
            ),
            python_schema=core_schema.no_info_plain_validator_function(from_python),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    @classmethod
    def get_byte_length(cls) -> int:
        return cls.BITS // 8

    def encode_bytes(self) -> bytes:
        """Little-endian bytes, always `get_byte_length()` long."""
        return int.to_bytes(self, self.get_byte_length(), "little")

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Parse a little-endian encoding.

        Raises:
            ValueError: If `data` is not exactly `get_byte_length()` bytes.
        """
        if len(data) != cls.get_byte_length():
            raise ValueError(
                f"{cls.__name__} expects {cls.get_byte_length()} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, "little"))

    def serialize(self, stream: IO[bytes]) -> int:
        return stream.write(self.encode_bytes())

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Raises:
            IOError: If the stream ends before a full value is read.
        """
        data = stream.read(cls.get_byte_length())
        if len(data) != cls.get_byte_length():
            raise IOError(f"Stream ended prematurely while decoding {cls.__name__}")
        return cls.decode_bytes(data)

    __add__ = _same_width_only("__add__", "+", wraps=True)
    __sub__ = _same_width_only("__sub__", "-", wraps=True)
    __floordiv__ = _same_width_only("__floordiv__", "//", wraps=True)
    __mod__ = _same_width_only("__mod__", "%", wraps=True)

    __eq__ = _same_width_only("__eq__", "==", wraps=False)
    __ne__ = _same_width_only("__ne__", "!=", wraps=False)
    __lt__ = _same_width_only("__lt__", "<", wraps=False)
    __le__ = _same_width_only("__le__", "<=", wraps=False)
    __gt__ = _same_width_only("__gt__", ">", wraps=False)
    __ge__ = _same_width_only("__ge__", ">=", wraps=False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    def __hash__(self) -> int:
        return hash((type(self), int(self)))


class Uint32(BaseUint):
    """Leaf positions."""

    BITS = 32


class Uint64(BaseUint):
    """Epochs."""

    BITS = 64
