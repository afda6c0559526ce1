"""
Diem Python SDK - Script Codec

This package converts calls into the Move standard library scripts between a
structured, typed representation and their BCS wire form, in both the legacy
Script dialect and the ScriptFunction dialect.
"""

# Wire types
from .types import *

# Runtime components
from .runtime.errors import *
from .runtime.address import AccountAddress, CORE_CODE_ADDRESS

# BCS codec
from .codec import BcsDeserializer, BcsOptions, BcsSerializer, hash_with_prefix, script_hash

# Standard library scripts
from .stdlib import *

# Transaction metadata
from .txnmetadata import *

from . import stdlib as _stdlib, txnmetadata as _txnmetadata, types as _types
from .runtime import errors as _errors

__version__ = "0.1.0"
__all__ = [
    *_types.__all__,
    *_errors.__all__,
    *_stdlib.__all__,
    *_txnmetadata.__all__,
    "AccountAddress",
    "CORE_CODE_ADDRESS",
    "BcsDeserializer",
    "BcsOptions",
    "BcsSerializer",
    "hash_with_prefix",
    "script_hash",
]
