"""
BCS Writer

Implements Binary Canonical Serialization (BCS) encoding as used on the Diem
wire: little-endian fixed-width integers, ULEB128 lengths and variant
indices, and length-prefixed byte sequences.
"""

import builtins
import struct
from typing import List

from ..runtime.errors import MarshalError

MAX_U32 = 0xFFFFFFFF
MAX_U64 = 0xFFFFFFFFFFFFFFFF
MAX_U128 = (1 << 128) - 1


class BcsSerializer:
    """
    Binary writer producing canonical BCS bytes.

    Values are range checked rather than masked: an out-of-range integer is a
    MarshalError, never a silently truncated encoding.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """Write unsigned 8-bit integer."""
        self._check_range(v, 0xFF, "u8")
        self._bb.append(v)

    def u32(self, v: int) -> None:
        """Write unsigned 32-bit integer in little-endian format."""
        self._check_range(v, MAX_U32, "u32")
        self._bb.extend(struct.pack('<I', v))

    def u64(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in little-endian format.

        Args:
            v: Integer value to write as 64-bit little-endian
        """
        self._check_range(v, MAX_U64, "u64")
        self._bb.extend(struct.pack('<Q', v))

    def u128(self, v: int) -> None:
        """Write unsigned 128-bit integer in little-endian format."""
        self._check_range(v, MAX_U128, "u128")
        self._bb.extend(v.to_bytes(16, "little"))

    def bool(self, v: bool) -> None:
        """Write a boolean as a single 0x00/0x01 byte."""
        if not isinstance(v, bool):
            raise MarshalError(f"Expected bool, got {type(v).__name__}")
        self._bb.append(1 if v else 0)

    def fixed_bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def bytes(self, v: bytes) -> None:
        """
        Write bytes with a ULEB128 length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.uleb128(len(v))
        self.fixed_bytes(v)

    def str(self, s: builtins.str) -> None:
        """Write a UTF-8 string with a ULEB128 length prefix."""
        self.bytes(s.encode('utf-8'))

    def variant_index(self, index: int) -> None:
        """Write the variant index of a tagged union."""
        self.uleb128(index)

    def option_tag(self, present: builtins.bool) -> None:
        """Write an Option tag; a present value must be written right after."""
        self._bb.append(1 if present else 0)

    def sequence_length(self, length: int) -> None:
        """Write the element count of a sequence."""
        self.uleb128(length)

    def uleb128(self, v: int) -> None:
        """
        Write unsigned 32-bit value in ULEB128 format.

        BCS restricts lengths and variant indices to u32.
        """
        self._check_range(v, MAX_U32, "uleb128")
        x = v
        while x >= 0x80:
            self._bb.append((x & 0x7F) | 0x80)
            x >>= 7
        self._bb.append(x)

    def to_bytes(self) -> builtins.bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)

    @staticmethod
    def _check_range(v: int, maximum: int, kind: str) -> None:
        if isinstance(v, bool) or not isinstance(v, int):
            raise MarshalError(f"Expected integer for {kind}, got {type(v).__name__}")
        if v < 0 or v > maximum:
            raise MarshalError(f"Value {v} out of range for {kind}")
