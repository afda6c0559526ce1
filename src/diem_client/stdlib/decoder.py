"""
Decoder registry: wire payload to structured call.

The registry maps each binary identity (script bytecode for the legacy
dialect, module address/name/function for the invocation dialect) to a
decode closure built once from the catalog. A closure checks the
type-parameter count, then the value-argument count, and only then decodes
each value argument positionally with the primitive codec for its slot.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from ..codec.options import BcsOptions
from ..runtime.errors import ArgumentTypeMismatch, ArityMismatch, UnknownOperation
from ..types import (
    Script,
    ScriptFunction,
    TransactionPayloadScript,
    TransactionPayloadScriptFunction,
    bcs_deserialize_transaction_payload,
)
from .calls import CALL_REGISTRY, ScriptCall
from .catalog import STDLIB_CATALOG, Catalog, CatalogEntry
from .primitives import PrimitiveCodec, codec_for

logger = logging.getLogger(__name__)

DecodeFn = Callable[[Sequence[Any], Sequence[Any]], ScriptCall]
FunctionKey = Tuple[bytes, str, str]


def _check_arity(entry: CatalogEntry, ty_args: Sequence[Any], args: Sequence[Any]) -> None:
    expected_types = len(entry.type_parameters)
    if len(ty_args) != expected_types:
        raise ArityMismatch(expected_types, len(ty_args), kind="type", operation=entry.name)
    expected_values = len(entry.value_parameters)
    if len(args) != expected_values:
        raise ArityMismatch(expected_values, len(args), kind="value", operation=entry.name)


def _make_decoder(entry: CatalogEntry, call_cls: Type[ScriptCall],
                  read: Callable[[PrimitiveCodec], Callable[[Any], Any]]) -> DecodeFn:
    type_names = [slot.name for slot in entry.type_parameters]
    value_slots = [(slot, read(codec_for(slot.type))) for slot in entry.value_parameters]

    def decode(ty_args: Sequence[Any], args: Sequence[Any]) -> ScriptCall:
        _check_arity(entry, ty_args, args)
        fields: Dict[str, Any] = dict(zip(type_names, ty_args))
        for (slot, decode_value), wire_value in zip(value_slots, args):
            try:
                fields[slot.name] = decode_value(wire_value)
            except ArgumentTypeMismatch as e:
                raise e.at(slot.position, entry.name) from e
        return call_cls(**fields)

    return decode


class DecoderRegistry:
    """
    Identity to decode-function lookup for both wire dialects.

    Built once from a catalog and its structured call classes; read-only
    afterwards.
    """

    def __init__(self, catalog: Catalog, call_classes: Mapping[str, Type[ScriptCall]]):
        by_code: Dict[bytes, DecodeFn] = {}
        by_function: Dict[FunctionKey, DecodeFn] = {}
        for entry in catalog:
            call_cls = call_classes[entry.name]
            by_code[entry.code] = _make_decoder(entry, call_cls, lambda c: c.from_argument)
            key = (entry.function.address.to_bytes(), entry.function.module, entry.function.function)
            by_function[key] = _make_decoder(entry, call_cls, lambda c: c.from_bytes)
        self._by_code: Mapping[bytes, DecodeFn] = MappingProxyType(by_code)
        self._by_function: Mapping[FunctionKey, DecodeFn] = MappingProxyType(by_function)

    def __len__(self) -> int:
        return len(self._by_code)

    def decode_script(self, script: Script) -> ScriptCall:
        """
        Recover the structured call carried by a legacy script.

        Args:
            script: Legacy dialect payload

        Returns:
            The structured call whose catalog entry has this script's bytecode

        Raises:
            UnknownOperation: If no catalog entry has this bytecode
            ArityMismatch: If the type or value argument count is wrong
            ArgumentTypeMismatch: If a value argument has the wrong tag
        """
        decode = self._by_code.get(bytes(script.code))
        if decode is None:
            logger.debug(f"Rejected script with unknown bytecode ({len(script.code)} bytes)")
            raise UnknownOperation(bytes(script.code))
        return self._run(decode, script.ty_args, script.args)

    def decode_script_function(self, function: ScriptFunction) -> ScriptCall:
        """
        Recover the structured call carried by a script function invocation.

        Raises:
            UnknownOperation: If no catalog entry has this module and function
            ArityMismatch: If the type or value argument count is wrong
            ArgumentTypeMismatch: If a value argument does not parse as its declared type
        """
        address = function.module.address
        key = (address.to_bytes(), function.module.name, function.function)
        decode = self._by_function.get(key)
        if decode is None:
            identity = (f"0x{address.hex()}", function.module.name, function.function)
            logger.debug(f"Rejected unknown script function {'::'.join(identity)}")
            raise UnknownOperation(identity)
        return self._run(decode, function.ty_args, function.args)

    @staticmethod
    def _run(decode: DecodeFn, ty_args: List[Any], args: List[Any]) -> ScriptCall:
        try:
            return decode(ty_args, args)
        except (ArityMismatch, ArgumentTypeMismatch) as e:
            logger.debug(f"Rejected payload: {e.message}")
            raise


DECODER_REGISTRY = DecoderRegistry(STDLIB_CATALOG, CALL_REGISTRY)


def decode_script(script: Script) -> ScriptCall:
    """Decode a legacy Script into its structured call."""
    return DECODER_REGISTRY.decode_script(script)


def decode_script_function(function: ScriptFunction) -> ScriptCall:
    """Decode a ScriptFunction into its structured call."""
    return DECODER_REGISTRY.decode_script_function(function)


def decode_script_function_payload(payload: Any) -> ScriptCall:
    """
    Decode a TransactionPayload that must carry a script function.

    Raises:
        UnknownOperation: If the payload is any other variant
    """
    if not isinstance(payload, TransactionPayloadScriptFunction):
        raise UnknownOperation(getattr(payload, "type", type(payload).__name__))
    return DECODER_REGISTRY.decode_script_function(payload.value)


def decode_transaction_payload(payload: Any) -> ScriptCall:
    """
    Decode a TransactionPayload of either script dialect.

    Module payloads publish code rather than call it and are reported as
    unknown operations.
    """
    if isinstance(payload, TransactionPayloadScript):
        return DECODER_REGISTRY.decode_script(payload.value)
    if isinstance(payload, TransactionPayloadScriptFunction):
        return DECODER_REGISTRY.decode_script_function(payload.value)
    raise UnknownOperation(getattr(payload, "type", type(payload).__name__))


def decode_script_bytes(data: bytes, options: Optional[BcsOptions] = None) -> ScriptCall:
    """Parse BCS-encoded Script bytes and decode the structured call."""
    return decode_script(Script.bcs_deserialize(data, options))


def decode_transaction_payload_bytes(data: bytes, options: Optional[BcsOptions] = None) -> ScriptCall:
    """Parse BCS-encoded TransactionPayload bytes and decode the structured call."""
    return decode_transaction_payload(bcs_deserialize_transaction_payload(data, options))
