"""
BCS reader/writer tests.

Covers fixed-width integers, ULEB128 canonicality, booleans, length-prefixed
bytes and strings, and the limits configured through BcsOptions.
"""

import hashlib

import pytest
from pydantic import ValidationError

from diem_client.codec import (
    BcsDeserializer,
    BcsOptions,
    BcsSerializer,
    hash_prefix,
    hash_with_prefix,
    script_hash,
    sha3_256,
)
from diem_client.runtime.errors import MarshalError, UnknownOperation, UnmarshalError
from diem_client.stdlib import STDLIB_CATALOG, decode_script_bytes
from diem_client.types import (
    Script,
    TypeTagStruct,
    TypeTagU64,
    TypeTagVector,
    bcs_deserialize_transaction_payload,
    deserialize_type_tag,
)


class TestBcsSerializer:
    """Test BCS encoding of primitives"""

    def test_u64_little_endian(self):
        s = BcsSerializer()
        s.u64(1000)
        assert s.to_bytes() == bytes([0xE8, 0x03, 0, 0, 0, 0, 0, 0])

    def test_u128_little_endian(self):
        s = BcsSerializer()
        s.u128(1)
        assert s.to_bytes() == b"\x01" + b"\x00" * 15

    def test_uleb128_values(self):
        """Test ULEB128 boundaries"""
        cases = {
            0: b"\x00",
            127: b"\x7f",
            128: b"\x80\x01",
            16384: b"\x80\x80\x01",
            0xFFFFFFFF: b"\xff\xff\xff\xff\x0f",
        }
        for value, expected in cases.items():
            s = BcsSerializer()
            s.uleb128(value)
            assert s.to_bytes() == expected, f"uleb128({value})"

    def test_uleb128_rejects_above_u32(self):
        with pytest.raises(MarshalError):
            BcsSerializer().uleb128(0x100000000)

    def test_bool_bytes(self):
        s = BcsSerializer()
        s.bool(True)
        s.bool(False)
        assert s.to_bytes() == b"\x01\x00"

    def test_bool_requires_bool(self):
        with pytest.raises(MarshalError, match="Expected bool"):
            BcsSerializer().bool(1)

    def test_integer_range_checks(self):
        """Out-of-range integers are rejected, never truncated"""
        with pytest.raises(MarshalError):
            BcsSerializer().u8(256)
        with pytest.raises(MarshalError):
            BcsSerializer().u64(-1)
        with pytest.raises(MarshalError):
            BcsSerializer().u64(1 << 64)
        with pytest.raises(MarshalError):
            BcsSerializer().u64(True)

    def test_length_prefixed_bytes_and_str(self):
        s = BcsSerializer()
        s.bytes(b"abc")
        s.str("XUS")
        assert s.to_bytes() == b"\x03abc\x03XUS"

    def test_empty_bytes(self):
        s = BcsSerializer()
        s.bytes(b"")
        assert s.to_bytes() == b"\x00"


class TestBcsDeserializer:
    """Test BCS decoding of primitives and malformed input"""

    def test_reads_integers(self):
        d = BcsDeserializer(bytes([0x2A]) + (1000).to_bytes(8, "little") + (7).to_bytes(16, "little"))
        assert d.u8() == 42
        assert d.u64() == 1000
        assert d.u128() == 7
        assert d.eof

    def test_uleb128_roundtrip_boundaries(self):
        for value in (0, 1, 127, 128, 300, 0xFFFFFFFF):
            s = BcsSerializer()
            s.uleb128(value)
            assert BcsDeserializer(s.to_bytes()).uleb128() == value

    def test_uleb128_non_canonical(self):
        with pytest.raises(UnmarshalError, match="Non-canonical"):
            BcsDeserializer(b"\x80\x00").uleb128()

    def test_uleb128_overflow(self):
        with pytest.raises(UnmarshalError, match="overflows"):
            BcsDeserializer(b"\xff\xff\xff\xff\x10").uleb128()
        with pytest.raises(UnmarshalError, match="overflows"):
            BcsDeserializer(b"\x80\x80\x80\x80\x80\x01").uleb128()

    def test_bool_rejects_other_bytes(self):
        assert BcsDeserializer(b"\x01").bool() is True
        assert BcsDeserializer(b"\x00").bool() is False
        with pytest.raises(UnmarshalError, match="Invalid bool"):
            BcsDeserializer(b"\x02").bool()

    def test_option_tag(self):
        s = BcsSerializer()
        s.option_tag(True)
        s.option_tag(False)
        assert s.to_bytes() == b"\x01\x00"
        d = BcsDeserializer(b"\x01\x00\x02")
        assert d.option_tag() is True
        assert d.option_tag() is False
        with pytest.raises(UnmarshalError, match="Invalid option tag"):
            d.option_tag()

    def test_truncated_input(self):
        with pytest.raises(UnmarshalError, match="Buffer overflow"):
            BcsDeserializer(b"\x01\x02").u64()
        with pytest.raises(UnmarshalError):
            BcsDeserializer(b"").u8()

    def test_truncated_length_prefix(self):
        with pytest.raises(UnmarshalError):
            BcsDeserializer(b"\x05ab").bytes()

    def test_invalid_utf8(self):
        with pytest.raises(UnmarshalError, match="UTF-8"):
            BcsDeserializer(b"\x01\xff").str()

    def test_check_consumed(self):
        d = BcsDeserializer(b"\x01\x02")
        d.u8()
        with pytest.raises(UnmarshalError, match="not read"):
            d.check_consumed()
        d.u8()
        d.check_consumed()

    def test_offset_and_remaining(self):
        d = BcsDeserializer(b"\x01\x02\x03")
        d.u8()
        assert d.offset == 1
        assert d.remaining() == 2


class TestBcsOptions:
    """Test deserializer limits"""

    def test_defaults(self):
        options = BcsOptions()
        assert options.max_container_depth == 500
        assert options.max_sequence_length == 2**31 - 1

    def test_aliases(self):
        options = BcsOptions(maxContainerDepth=10, maxSequenceLength=64)
        assert options.max_container_depth == 10
        assert options.max_sequence_length == 64

    def test_invalid_depth(self):
        with pytest.raises(ValidationError):
            BcsOptions(max_container_depth=0)

    def test_frozen(self):
        options = BcsOptions()
        with pytest.raises(ValidationError):
            options.max_container_depth = 3

    def test_sequence_length_limit(self):
        d = BcsDeserializer(b"\x03abc", BcsOptions(max_sequence_length=2))
        with pytest.raises(UnmarshalError, match="exceeds limit"):
            d.bytes()

    def test_container_depth_limit(self):
        nested = TypeTagVector(value=TypeTagVector(value=TypeTagU64()))
        data = nested.bcs_serialize()

        assert deserialize_type_tag(BcsDeserializer(data)) == nested
        with pytest.raises(UnmarshalError, match="container depth"):
            deserialize_type_tag(BcsDeserializer(data, BcsOptions(max_container_depth=2)))


class TestHashes:
    """Test SHA3-256 helpers"""

    def test_sha3_256_empty(self):
        assert sha3_256().hex() == "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"

    def test_sha3_256_concatenates_parts(self):
        assert sha3_256(b"ab", b"cd") == hashlib.sha3_256(b"abcd").digest()

    def test_hash_with_prefix(self):
        prefix = hashlib.sha3_256(b"DIEM::RawTransaction").digest()
        assert hash_prefix("RawTransaction") == prefix
        assert hash_with_prefix("RawTransaction", b"\x01") == hashlib.sha3_256(prefix + b"\x01").digest()

    def test_script_hash(self):
        code = b"\xa1\x1c\xeb\x0b"
        assert script_hash(code) == hashlib.sha3_256(code).digest()
        assert len(script_hash(code)) == 32


def nested_vector(depth, inner=None):
    tag = inner or TypeTagU64()
    for _ in range(depth):
        tag = TypeTagVector(value=tag)
    return tag


def vector_depth(tag):
    depth = 0
    while isinstance(tag, TypeTagVector):
        tag = tag.value
        depth += 1
    return depth, tag


class TestNestingDepth:
    """Test deeply nested type tags against the container depth limit"""

    def test_deep_vector_tag_decodes(self):
        data = nested_vector(450).bcs_serialize()
        assert data == b"\x06" * 450 + b"\x02"

        depth, inner = vector_depth(deserialize_type_tag(BcsDeserializer(data)))
        assert depth == 450
        assert isinstance(inner, TypeTagU64)

    def test_deep_vector_script_decodes(self):
        data = b"\x01\x00\x01" + b"\x06" * 450 + b"\x02\x00"
        script = Script.bcs_deserialize(data)
        assert script.code == b"\x00"
        assert vector_depth(script.ty_args[0])[0] == 450
        assert script.bcs_serialize() == data

    def test_deep_vector_script_reaches_lookup(self):
        data = b"\x01\x00\x01" + b"\x06" * 450 + b"\x02\x00"
        with pytest.raises(UnknownOperation):
            decode_script_bytes(data)

    def test_deep_vector_call_decodes(self):
        code = STDLIB_CATALOG.get("add_currency_to_account").code
        data = Script(code=code, ty_args=[nested_vector(450)]).bcs_serialize()

        call = decode_script_bytes(data)
        assert call.operation == "add_currency_to_account"
        assert vector_depth(call.currency)[0] == 450

    def test_vector_past_depth_limit(self):
        data = b"\x01\x00\x01" + b"\x06" * 600 + b"\x02\x00"
        with pytest.raises(UnmarshalError, match="container depth"):
            Script.bcs_deserialize(data)
        with pytest.raises(UnmarshalError, match="container depth"):
            decode_script_bytes(data)

    def test_vector_past_depth_limit_in_payload(self):
        data = b"\x01\x01\x00\x01" + b"\x06" * 600 + b"\x02\x00"
        with pytest.raises(UnmarshalError, match="container depth"):
            bcs_deserialize_transaction_payload(data)

    def test_depth_limit_is_exact(self):
        # The script, 498 vectors and the element fill all 500 levels
        data = b"\x01\x00\x01" + b"\x06" * 498 + b"\x02\x00"
        assert vector_depth(Script.bcs_deserialize(data).ty_args[0])[0] == 498
        data = b"\x01\x00\x01" + b"\x06" * 499 + b"\x02\x00"
        with pytest.raises(UnmarshalError, match="container depth"):
            Script.bcs_deserialize(data)

    def test_deep_struct_nesting_is_unmarshal_error(self):
        level = b"\x07" + b"\x00" * 16 + b"\x01M\x01S\x01"
        data = level * 1000 + b"\x02"
        with pytest.raises(UnmarshalError, match="nesting depth"):
            TypeTagStruct.bcs_deserialize(data, BcsOptions(max_container_depth=10000))
