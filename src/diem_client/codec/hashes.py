"""
Hash Functions

Diem hashes with SHA3-256. Typed values are hashed behind a domain
separation prefix derived from the type name.
"""

import hashlib

HASH_PREFIX_SALT = b"DIEM::"


def sha3_256(*parts: bytes) -> bytes:
    """
    Compute SHA3-256 over the concatenation of ``parts``.

    Returns:
        Hash as bytes (32 bytes)
    """
    h = hashlib.sha3_256()
    for part in parts:
        h.update(part)
    return h.digest()


def hash_prefix(name: str) -> bytes:
    """Return the domain separation prefix for the given type name."""
    return sha3_256(HASH_PREFIX_SALT, name.encode("utf-8"))


def hash_with_prefix(name: str, data: bytes) -> bytes:
    """
    Hash BCS bytes of a value of type ``name``.

    Args:
        name: Type name used for domain separation, e.g. "RawTransaction"
        data: BCS encoding of the value

    Returns:
        SHA3-256 hash (32 bytes)
    """
    return sha3_256(hash_prefix(name), data)


def script_hash(code: bytes) -> bytes:
    """Hash of script bytecode, as registered in the script allow list."""
    return sha3_256(code)
