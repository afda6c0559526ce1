"""
Move standard library script codec.

Structured calls for every known stdlib operation, the catalog describing
their signatures and wire identities, and the encoder/decoder pair for the
legacy Script and ScriptFunction dialects.
"""

from .calls import *
from .catalog import (
    STDLIB_CATALOG,
    ArgumentSlot,
    Catalog,
    CatalogEntry,
    FunctionIdentity,
    SemanticType,
    SlotRole,
)
from .currency import currency_type_tag
from .decoder import (
    DECODER_REGISTRY,
    DecoderRegistry,
    decode_script,
    decode_script_bytes,
    decode_script_function,
    decode_script_function_payload,
    decode_transaction_payload,
    decode_transaction_payload_bytes,
)
from .encoder import encode_script, encode_script_function, encode_script_payload
from .primitives import PrimitiveCodec, codec_for
from . import calls as _calls

__all__ = [
    *_calls.__all__,
    "STDLIB_CATALOG",
    "ArgumentSlot",
    "Catalog",
    "CatalogEntry",
    "FunctionIdentity",
    "SemanticType",
    "SlotRole",
    "currency_type_tag",
    "DECODER_REGISTRY",
    "DecoderRegistry",
    "decode_script",
    "decode_script_bytes",
    "decode_script_function",
    "decode_script_function_payload",
    "decode_transaction_payload",
    "decode_transaction_payload_bytes",
    "encode_script",
    "encode_script_function",
    "encode_script_payload",
    "PrimitiveCodec",
    "codec_for",
]
