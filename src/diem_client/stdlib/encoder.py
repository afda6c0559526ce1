"""
Encoder: structured call to wire payload.

Both dialects share one algorithm: look up the catalog entry for the call's
operation, copy type-parameter fields verbatim in slot order, run each
value-parameter field through the primitive codec for its slot type, and
assemble the dialect's payload.
"""

from typing import Any, List, Tuple

from ..runtime.errors import CatalogError
from ..types import ModuleId, Script, ScriptFunction, TransactionPayloadScript, TransactionPayloadScriptFunction
from .calls import CALL_REGISTRY, ScriptCall
from .catalog import STDLIB_CATALOG, CatalogEntry
from .primitives import codec_for


def _entry_for(call: ScriptCall) -> CatalogEntry:
    entry = STDLIB_CATALOG.get(getattr(call, "type", None))
    if entry is None or not isinstance(call, CALL_REGISTRY[entry.name]):
        raise CatalogError(f"No catalog entry for structured call {type(call).__name__}")
    return entry


def _split_fields(call: ScriptCall, entry: CatalogEntry) -> Tuple[List[Any], List[Tuple[Any, Any]]]:
    try:
        ty_args = [getattr(call, slot.name) for slot in entry.type_parameters]
        values = [(slot, getattr(call, slot.name)) for slot in entry.value_parameters]
    except AttributeError as e:
        raise CatalogError(f"Structured call {type(call).__name__} is out of sync with catalog entry {entry.name}") from e
    return ty_args, values


def encode_script(call: ScriptCall) -> Script:
    """
    Build a legacy Script for a structured call.

    Args:
        call: Structured call to encode

    Returns:
        Script carrying the operation's bytecode, type arguments and tagged
        value arguments

    Raises:
        CatalogError: If the call has no catalog entry (a programming defect)
    """
    entry = _entry_for(call)
    ty_args, values = _split_fields(call, entry)
    args = [codec_for(slot.type).to_argument(value) for slot, value in values]
    return Script(code=entry.code, ty_args=ty_args, args=args)


def encode_script_function(call: ScriptCall) -> TransactionPayloadScriptFunction:
    """
    Build a ScriptFunction transaction payload for a structured call.

    Args:
        call: Structured call to encode

    Returns:
        TransactionPayload variant carrying the operation's module, function,
        type arguments and BCS-encoded value arguments

    Raises:
        CatalogError: If the call has no catalog entry (a programming defect)
    """
    entry = _entry_for(call)
    ty_args, values = _split_fields(call, entry)
    args = [codec_for(slot.type).to_bytes(value) for slot, value in values]
    function = ScriptFunction(
        module=ModuleId(address=entry.function.address, name=entry.function.module),
        function=entry.function.function,
        ty_args=ty_args,
        args=args,
    )
    return TransactionPayloadScriptFunction(value=function)


def encode_script_payload(call: ScriptCall) -> TransactionPayloadScript:
    """Build a legacy Script wrapped in its TransactionPayload variant."""
    return TransactionPayloadScript(value=encode_script(call))
