"""
Diem Binary Codec Module

Implements Binary Canonical Serialization (BCS) for Diem wire types.

Key components:
- writer.py: BCS writer with ULEB128/primitive encoding
- reader.py: BCS reader with ULEB128/primitive decoding
- options.py: decoding limits
- hashes.py: SHA3-256 hashing helpers
"""

from .hashes import hash_prefix, hash_with_prefix, script_hash, sha3_256
from .options import BcsOptions
from .reader import BcsDeserializer
from .writer import BcsSerializer

__all__ = [
    "BcsDeserializer",
    "BcsOptions",
    "BcsSerializer",
    "hash_prefix",
    "hash_with_prefix",
    "script_hash",
    "sha3_256",
]
