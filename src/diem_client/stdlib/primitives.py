"""
Primitive argument codec.

Converts semantic primitive values (bool, u64, account address, byte
sequence) to and from their wire form in both dialects:

- legacy scripts carry self-tagged ``TransactionArgument`` values, so decoding
  checks the tag;
- script functions carry untagged BCS byte strings, so decoding parses the
  bytes as the declared type and requires every byte to be consumed.

All functions are pure. Decoding failures raise ArgumentTypeMismatch without
a position; the decoder registry pins the position.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from ..codec.reader import BcsDeserializer
from ..codec.writer import BcsSerializer
from ..runtime.address import AccountAddress
from ..runtime.errors import ArgumentTypeMismatch, EncodingError
from ..types import (
    TransactionArgumentAddress,
    TransactionArgumentBool,
    TransactionArgumentU64,
    TransactionArgumentU8Vector,
)
from .catalog import SemanticType


@dataclass(frozen=True)
class PrimitiveCodec:
    """Encoders and decoders for one semantic type, in both dialects."""
    semantic_type: SemanticType
    to_argument: Callable[[Any], Any]
    from_argument: Callable[[Any], Any]
    to_bytes: Callable[[Any], bytes]
    from_bytes: Callable[[bytes], Any]


def _argument_tag(arg: Any) -> str:
    return getattr(arg, "type", type(arg).__name__)


def _expect_argument(arg: Any, variant: type, semantic_type: SemanticType) -> Any:
    if not isinstance(arg, variant):
        raise ArgumentTypeMismatch(semantic_type, actual=_argument_tag(arg))
    return arg.value


def _read_exactly(data: bytes, semantic_type: SemanticType, read: Callable[[BcsDeserializer], Any]) -> Any:
    if not isinstance(data, (bytes, bytearray)):
        raise ArgumentTypeMismatch(semantic_type, actual=type(data).__name__)
    deserializer = BcsDeserializer(data)
    try:
        value = read(deserializer)
        deserializer.check_consumed()
    except EncodingError as e:
        raise ArgumentTypeMismatch(semantic_type, actual=f"{len(data)} bytes", cause=e) from e
    return value


def _write(write: Callable[[BcsSerializer], None]) -> bytes:
    serializer = BcsSerializer()
    write(serializer)
    return serializer.to_bytes()


# Bool

def encode_bool_argument(value: bool) -> TransactionArgumentBool:
    return TransactionArgumentBool(value=value)


def decode_bool_argument(arg: Any) -> bool:
    return _expect_argument(arg, TransactionArgumentBool, SemanticType.BOOL)


def encode_bool(value: bool) -> bytes:
    return _write(lambda s: s.bool(value))


def decode_bool(data: bytes) -> bool:
    return _read_exactly(data, SemanticType.BOOL, lambda d: d.bool())


# U64

def encode_u64_argument(value: int) -> TransactionArgumentU64:
    return TransactionArgumentU64(value=value)


def decode_u64_argument(arg: Any) -> int:
    return _expect_argument(arg, TransactionArgumentU64, SemanticType.U64)


def encode_u64(value: int) -> bytes:
    return _write(lambda s: s.u64(value))


def decode_u64(data: bytes) -> int:
    return _read_exactly(data, SemanticType.U64, lambda d: d.u64())


# Address

def encode_address_argument(value: AccountAddress) -> TransactionArgumentAddress:
    return TransactionArgumentAddress(value=value)


def decode_address_argument(arg: Any) -> AccountAddress:
    return _expect_argument(arg, TransactionArgumentAddress, SemanticType.ADDRESS)


def encode_address(value: AccountAddress) -> bytes:
    return value.to_bytes()


def decode_address(data: bytes) -> AccountAddress:
    return _read_exactly(
        data, SemanticType.ADDRESS, lambda d: AccountAddress(d.fixed_bytes(AccountAddress.LENGTH))
    )


# Byte sequence

def encode_bytes_argument(value: bytes) -> TransactionArgumentU8Vector:
    return TransactionArgumentU8Vector(value=value)


def decode_bytes_argument(arg: Any) -> bytes:
    return _expect_argument(arg, TransactionArgumentU8Vector, SemanticType.BYTES)


def encode_bytes(value: bytes) -> bytes:
    return _write(lambda s: s.bytes(value))


def decode_bytes(data: bytes) -> bytes:
    return _read_exactly(data, SemanticType.BYTES, lambda d: d.bytes())


PRIMITIVE_CODECS: Mapping[SemanticType, PrimitiveCodec] = MappingProxyType({
    SemanticType.BOOL: PrimitiveCodec(
        SemanticType.BOOL, encode_bool_argument, decode_bool_argument, encode_bool, decode_bool
    ),
    SemanticType.U64: PrimitiveCodec(
        SemanticType.U64, encode_u64_argument, decode_u64_argument, encode_u64, decode_u64
    ),
    SemanticType.ADDRESS: PrimitiveCodec(
        SemanticType.ADDRESS, encode_address_argument, decode_address_argument,
        encode_address, decode_address,
    ),
    SemanticType.BYTES: PrimitiveCodec(
        SemanticType.BYTES, encode_bytes_argument, decode_bytes_argument, encode_bytes, decode_bytes
    ),
})


def codec_for(semantic_type: SemanticType) -> PrimitiveCodec:
    """
    Get the primitive codec for a value-parameter type.

    Type descriptors have no primitive codec: they are carried verbatim in
    the type-parameter list.
    """
    try:
        return PRIMITIVE_CODECS[semantic_type]
    except KeyError:
        raise ValueError(f"No primitive codec for {semantic_type.value}") from None
