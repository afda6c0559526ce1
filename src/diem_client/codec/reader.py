"""
BCS Reader

Implements Binary Canonical Serialization (BCS) decoding. Every malformed
input (truncation, non-canonical ULEB128, invalid booleans or UTF-8, limits
from BcsOptions) surfaces as an UnmarshalError.
"""

import builtins
import struct
from typing import Optional

from ..runtime.errors import UnmarshalError
from .options import BcsOptions, DEFAULT_OPTIONS


class BcsDeserializer:
    """
    Binary reader over a BCS byte buffer.
    """

    def __init__(self, buf: builtins.bytes, options: Optional[BcsOptions] = None):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
            options: Decoding limits; defaults to BcsOptions()
        """
        self._buf = bytes(buf)
        self._off = 0
        self._depth = 0
        self.options = options or DEFAULT_OPTIONS

    @property
    def eof(self) -> bool:
        """True if at end of buffer."""
        return self._off >= len(self._buf)

    @property
    def offset(self) -> int:
        return self._off

    def remaining(self) -> int:
        return len(self._buf) - self._off

    def u8(self) -> int:
        """Read unsigned 8-bit integer."""
        if self._off >= len(self._buf):
            raise UnmarshalError("Buffer overflow: attempting to read beyond end")
        val = self._buf[self._off]
        self._off += 1
        return val

    def u32(self) -> int:
        """Read unsigned 32-bit integer in little-endian format."""
        return struct.unpack("<I", self.fixed_bytes(4))[0]

    def u64(self) -> int:
        """
        Read unsigned 64-bit integer in little-endian format.

        Returns:
            Unsigned 64-bit integer value
        """
        return struct.unpack("<Q", self.fixed_bytes(8))[0]

    def u128(self) -> int:
        """Read unsigned 128-bit integer in little-endian format."""
        return int.from_bytes(self.fixed_bytes(16), "little")

    def bool(self) -> builtins.bool:
        """Read a boolean; any byte other than 0x00/0x01 is rejected."""
        b = self.u8()
        if b == 0:
            return False
        if b == 1:
            return True
        raise UnmarshalError(f"Invalid bool byte: 0x{b:02x}")

    def uleb128(self) -> int:
        """
        Read an unsigned 32-bit value in ULEB128 format.

        Rejects overlong (non-canonical) encodings and values above u32.
        """
        x = 0
        for shift in range(0, 32, 7):
            b = self.u8()
            digit = b & 0x7F
            x |= digit << shift
            if b < 0x80:
                if shift > 0 and digit == 0:
                    raise UnmarshalError("Non-canonical ULEB128 encoding")
                if x > 0xFFFFFFFF:
                    raise UnmarshalError("ULEB128 value overflows u32")
                return x
        raise UnmarshalError("ULEB128 value overflows u32")

    def fixed_bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read
        """
        if self._off + n > len(self._buf):
            raise UnmarshalError(f"Buffer overflow: attempting to read {n} bytes beyond end")
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def sequence_length(self) -> int:
        """Read a sequence or byte-string length, enforcing max_sequence_length."""
        n = self.uleb128()
        if n > self.options.max_sequence_length:
            raise UnmarshalError(
                f"Sequence length {n} exceeds limit {self.options.max_sequence_length}"
            )
        return n

    def bytes(self) -> builtins.bytes:
        """Read bytes with a ULEB128 length prefix."""
        return self.fixed_bytes(self.sequence_length())

    def str(self) -> builtins.str:
        """Read a UTF-8 string with a ULEB128 length prefix."""
        raw = self.bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnmarshalError("Invalid UTF-8 string", cause=e) from e

    def variant_index(self) -> int:
        return self.uleb128()

    def option_tag(self) -> builtins.bool:
        """Read an Option tag: 0x00 for none, 0x01 for a value that follows."""
        b = self.u8()
        if b > 1:
            raise UnmarshalError(f"Invalid option tag: 0x{b:02x}")
        return b == 1

    def increase_container_depth(self) -> None:
        if self._depth >= self.options.max_container_depth:
            raise UnmarshalError(
                f"Exceeded maximum container depth {self.options.max_container_depth}"
            )
        self._depth += 1

    def decrease_container_depth(self) -> None:
        self._depth -= 1

    def check_consumed(self) -> None:
        """Fail unless the whole buffer has been read."""
        if not self.eof:
            raise UnmarshalError(
                "Some input bytes were not read",
                details={"offset": self._off, "length": len(self._buf)},
            )
