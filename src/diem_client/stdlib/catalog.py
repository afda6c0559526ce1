"""
Operation catalog for the Move standard library scripts.

Every known operation is described once: its name, its ordered argument
signature and its binary identity in each wire dialect (the compiled script
bytecode for the legacy dialect, a module/function pair under the core code
address for the invocation dialect). The catalog is built once at import and
is read-only afterwards; it is indexed by name for encoding and by identity
for decoding.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..runtime.address import AccountAddress, CORE_CODE_ADDRESS
from ..runtime.errors import CatalogError
from . import _bytecode

logger = logging.getLogger(__name__)


class SemanticType(str, Enum):
    """Semantic type of an argument slot."""
    BOOL = "bool"
    U64 = "u64"
    ADDRESS = "address"
    BYTES = "bytes"
    TYPE_DESCRIPTOR = "type_descriptor"


class SlotRole(str, Enum):
    TYPE_PARAMETER = "type_parameter"
    VALUE_PARAMETER = "value_parameter"


@dataclass(frozen=True)
class ArgumentSlot:
    """
    One declared argument of an operation.

    ``position`` is the index of the slot within its own list on the wire:
    the type-parameter list for type parameters, the value-argument list for
    value parameters.
    """
    name: str
    role: SlotRole
    type: SemanticType
    position: int = 0

    @property
    def is_type_parameter(self) -> bool:
        return self.role is SlotRole.TYPE_PARAMETER


@dataclass(frozen=True)
class FunctionIdentity:
    """Identity of an operation in the invocation dialect."""
    module: str
    function: str
    address: AccountAddress = CORE_CODE_ADDRESS

    def __str__(self) -> str:
        return f"0x{self.address.hex().lstrip('0') or '0'}::{self.module}::{self.function}"


@dataclass(frozen=True)
class CatalogEntry:
    """A known operation: name, ordered slots and per-dialect identities."""
    name: str
    slots: Tuple[ArgumentSlot, ...]
    code: bytes
    function: FunctionIdentity

    @property
    def type_parameters(self) -> Tuple[ArgumentSlot, ...]:
        return tuple(s for s in self.slots if s.role is SlotRole.TYPE_PARAMETER)

    @property
    def value_parameters(self) -> Tuple[ArgumentSlot, ...]:
        return tuple(s for s in self.slots if s.role is SlotRole.VALUE_PARAMETER)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.slots)


class Catalog:
    """
    Immutable operation registry indexed by name and by wire identity.

    Raises:
        CatalogError: if two entries share a name, a bytecode identity or a
            function identity, or if a type parameter follows a value parameter
    """

    def __init__(self, entries: Iterable[CatalogEntry]):
        by_name: Dict[str, CatalogEntry] = {}
        by_code: Dict[bytes, CatalogEntry] = {}
        by_function: Dict[Tuple[bytes, str, str], CatalogEntry] = {}

        for entry in entries:
            _check_slot_order(entry)
            if entry.name in by_name:
                raise CatalogError(f"Duplicate operation name: {entry.name}")
            if entry.code in by_code:
                raise CatalogError(
                    f"Duplicate script bytecode for {entry.name}",
                    {"operation": entry.name, "existing": by_code[entry.code].name},
                )
            key = _function_key(entry.function.address, entry.function.module, entry.function.function)
            if key in by_function:
                raise CatalogError(
                    f"Duplicate script function {entry.function} for {entry.name}",
                    {"operation": entry.name, "existing": by_function[key].name},
                )
            by_name[entry.name] = entry
            by_code[entry.code] = entry
            by_function[key] = entry

        self._by_name: Mapping[str, CatalogEntry] = MappingProxyType(by_name)
        self._by_code: Mapping[bytes, CatalogEntry] = MappingProxyType(by_code)
        self._by_function: Mapping[Tuple[bytes, str, str], CatalogEntry] = MappingProxyType(by_function)

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._by_name.values())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def names(self) -> List[str]:
        """Operation names in catalog order."""
        return list(self._by_name)

    def get(self, name: str) -> Optional[CatalogEntry]:
        return self._by_name.get(name)

    def by_code(self, code: bytes) -> Optional[CatalogEntry]:
        """Look up a legacy script by its bytecode."""
        return self._by_code.get(bytes(code))

    def by_function(self, module: str, function: str,
                    address: AccountAddress = CORE_CODE_ADDRESS) -> Optional[CatalogEntry]:
        """Look up an invocation by module address, module name and function name."""
        return self._by_function.get(_function_key(address, module, function))


def _function_key(address: AccountAddress, module: str, function: str) -> Tuple[bytes, str, str]:
    return (address.to_bytes(), module, function)


def _check_slot_order(entry: CatalogEntry) -> None:
    seen_value = False
    for slot in entry.slots:
        if slot.role is SlotRole.VALUE_PARAMETER:
            seen_value = True
        elif seen_value:
            raise CatalogError(
                f"Type parameter '{slot.name}' of {entry.name} follows a value parameter"
            )
        if (slot.role is SlotRole.TYPE_PARAMETER) != (slot.type is SemanticType.TYPE_DESCRIPTOR):
            raise CatalogError(f"Slot '{slot.name}' of {entry.name} has role {slot.role.value} "
                               f"but type {slot.type.value}")


# =============================================================================
# Catalog data
# =============================================================================

def ty(name: str) -> ArgumentSlot:
    """Declare a type-parameter slot."""
    return ArgumentSlot(name, SlotRole.TYPE_PARAMETER, SemanticType.TYPE_DESCRIPTOR)


def arg(name: str, semantic_type: SemanticType) -> ArgumentSlot:
    """Declare a value-parameter slot."""
    return ArgumentSlot(name, SlotRole.VALUE_PARAMETER, semantic_type)


def entry(name: str, code: bytes, module: str, *slots: ArgumentSlot) -> CatalogEntry:
    """Build a catalog entry, numbering slots by their position within their role."""
    counters = {SlotRole.TYPE_PARAMETER: 0, SlotRole.VALUE_PARAMETER: 0}
    numbered = []
    for slot in slots:
        numbered.append(ArgumentSlot(slot.name, slot.role, slot.type, counters[slot.role]))
        counters[slot.role] += 1
    return CatalogEntry(name, tuple(numbered), code, FunctionIdentity(module, name))


BOOL = SemanticType.BOOL
U64 = SemanticType.U64
ADDRESS = SemanticType.ADDRESS
BYTES = SemanticType.BYTES

ACCOUNT_ADMINISTRATION = "AccountAdministrationScripts"
ACCOUNT_CREATION = "AccountCreationScripts"
PAYMENT = "PaymentScripts"
SYSTEM_ADMINISTRATION = "SystemAdministrationScripts"
TREASURY_COMPLIANCE = "TreasuryComplianceScripts"
VALIDATOR_ADMINISTRATION = "ValidatorAdministrationScripts"

STDLIB_ENTRIES: Tuple[CatalogEntry, ...] = (
    entry("add_currency_to_account", _bytecode.ADD_CURRENCY_TO_ACCOUNT, ACCOUNT_ADMINISTRATION,
          ty("currency")),
    entry("add_recovery_rotation_capability", _bytecode.ADD_RECOVERY_ROTATION_CAPABILITY,
          ACCOUNT_ADMINISTRATION,
          arg("recovery_address", ADDRESS)),
    entry("add_to_script_allow_list", _bytecode.ADD_TO_SCRIPT_ALLOW_LIST, SYSTEM_ADMINISTRATION,
          arg("hash", BYTES), arg("sliding_nonce", U64)),
    entry("add_validator_and_reconfigure", _bytecode.ADD_VALIDATOR_AND_RECONFIGURE,
          VALIDATOR_ADMINISTRATION,
          arg("sliding_nonce", U64), arg("validator_name", BYTES), arg("validator_address", ADDRESS)),
    entry("burn", _bytecode.BURN, TREASURY_COMPLIANCE,
          ty("token"), arg("sliding_nonce", U64), arg("preburn_address", ADDRESS)),
    entry("burn_txn_fees", _bytecode.BURN_TXN_FEES, TREASURY_COMPLIANCE,
          ty("coin_type")),
    entry("cancel_burn", _bytecode.CANCEL_BURN, TREASURY_COMPLIANCE,
          ty("token"), arg("preburn_address", ADDRESS)),
    entry("create_child_vasp_account", _bytecode.CREATE_CHILD_VASP_ACCOUNT, ACCOUNT_CREATION,
          ty("coin_type"), arg("child_address", ADDRESS), arg("auth_key_prefix", BYTES),
          arg("add_all_currencies", BOOL), arg("child_initial_balance", U64)),
    entry("create_designated_dealer", _bytecode.CREATE_DESIGNATED_DEALER, ACCOUNT_CREATION,
          ty("currency"), arg("sliding_nonce", U64), arg("addr", ADDRESS),
          arg("auth_key_prefix", BYTES), arg("human_name", BYTES), arg("add_all_currencies", BOOL)),
    entry("create_parent_vasp_account", _bytecode.CREATE_PARENT_VASP_ACCOUNT, ACCOUNT_CREATION,
          ty("coin_type"), arg("sliding_nonce", U64), arg("new_account_address", ADDRESS),
          arg("auth_key_prefix", BYTES), arg("human_name", BYTES), arg("add_all_currencies", BOOL)),
    entry("create_recovery_address", _bytecode.CREATE_RECOVERY_ADDRESS, ACCOUNT_ADMINISTRATION),
    entry("create_validator_account", _bytecode.CREATE_VALIDATOR_ACCOUNT, ACCOUNT_CREATION,
          arg("sliding_nonce", U64), arg("new_account_address", ADDRESS),
          arg("auth_key_prefix", BYTES), arg("human_name", BYTES)),
    entry("create_validator_operator_account", _bytecode.CREATE_VALIDATOR_OPERATOR_ACCOUNT,
          ACCOUNT_CREATION,
          arg("sliding_nonce", U64), arg("new_account_address", ADDRESS),
          arg("auth_key_prefix", BYTES), arg("human_name", BYTES)),
    entry("freeze_account", _bytecode.FREEZE_ACCOUNT, TREASURY_COMPLIANCE,
          arg("sliding_nonce", U64), arg("to_freeze_account", ADDRESS)),
    entry("mint_lbr", _bytecode.MINT_LBR, ACCOUNT_ADMINISTRATION,
          arg("amount_lbr", U64)),
    entry("peer_to_peer_with_metadata", _bytecode.PEER_TO_PEER_WITH_METADATA, PAYMENT,
          ty("currency"), arg("payee", ADDRESS), arg("amount", U64),
          arg("metadata", BYTES), arg("metadata_signature", BYTES)),
    entry("preburn", _bytecode.PREBURN, TREASURY_COMPLIANCE,
          ty("token"), arg("amount", U64)),
    entry("publish_shared_ed25519_public_key", _bytecode.PUBLISH_SHARED_ED25519_PUBLIC_KEY,
          ACCOUNT_ADMINISTRATION,
          arg("public_key", BYTES)),
    entry("register_validator_config", _bytecode.REGISTER_VALIDATOR_CONFIG, VALIDATOR_ADMINISTRATION,
          arg("validator_account", ADDRESS), arg("consensus_pubkey", BYTES),
          arg("validator_network_identity_pubkey", BYTES), arg("validator_network_address", BYTES),
          arg("fullnodes_network_identity_pubkey", BYTES), arg("fullnodes_network_address", BYTES)),
    entry("remove_validator_and_reconfigure", _bytecode.REMOVE_VALIDATOR_AND_RECONFIGURE,
          VALIDATOR_ADMINISTRATION,
          arg("sliding_nonce", U64), arg("validator_name", BYTES), arg("validator_address", ADDRESS)),
    entry("rotate_authentication_key", _bytecode.ROTATE_AUTHENTICATION_KEY, ACCOUNT_ADMINISTRATION,
          arg("new_key", BYTES)),
    entry("rotate_authentication_key_with_nonce", _bytecode.ROTATE_AUTHENTICATION_KEY_WITH_NONCE,
          ACCOUNT_ADMINISTRATION,
          arg("sliding_nonce", U64), arg("new_key", BYTES)),
    entry("rotate_authentication_key_with_nonce_admin",
          _bytecode.ROTATE_AUTHENTICATION_KEY_WITH_NONCE_ADMIN, ACCOUNT_ADMINISTRATION,
          arg("sliding_nonce", U64), arg("new_key", BYTES)),
    entry("rotate_authentication_key_with_recovery_address",
          _bytecode.ROTATE_AUTHENTICATION_KEY_WITH_RECOVERY_ADDRESS, ACCOUNT_ADMINISTRATION,
          arg("recovery_address", ADDRESS), arg("to_recover", ADDRESS), arg("new_key", BYTES)),
    entry("rotate_dual_attestation_info", _bytecode.ROTATE_DUAL_ATTESTATION_INFO,
          ACCOUNT_ADMINISTRATION,
          arg("new_url", BYTES), arg("new_key", BYTES)),
    entry("rotate_shared_ed25519_public_key", _bytecode.ROTATE_SHARED_ED25519_PUBLIC_KEY,
          ACCOUNT_ADMINISTRATION,
          arg("public_key", BYTES)),
    entry("set_validator_config_and_reconfigure", _bytecode.SET_VALIDATOR_CONFIG_AND_RECONFIGURE,
          VALIDATOR_ADMINISTRATION,
          arg("validator_account", ADDRESS), arg("consensus_pubkey", BYTES),
          arg("validator_network_identity_pubkey", BYTES), arg("validator_network_address", BYTES),
          arg("fullnodes_network_identity_pubkey", BYTES), arg("fullnodes_network_address", BYTES)),
    entry("set_validator_operator", _bytecode.SET_VALIDATOR_OPERATOR, VALIDATOR_ADMINISTRATION,
          arg("operator_name", BYTES), arg("operator_account", ADDRESS)),
    entry("set_validator_operator_with_nonce_admin", _bytecode.SET_VALIDATOR_OPERATOR_WITH_NONCE_ADMIN,
          VALIDATOR_ADMINISTRATION,
          arg("sliding_nonce", U64), arg("operator_name", BYTES), arg("operator_account", ADDRESS)),
    entry("tiered_mint", _bytecode.TIERED_MINT, TREASURY_COMPLIANCE,
          ty("coin_type"), arg("sliding_nonce", U64), arg("designated_dealer_address", ADDRESS),
          arg("mint_amount", U64), arg("tier_index", U64)),
    entry("unfreeze_account", _bytecode.UNFREEZE_ACCOUNT, TREASURY_COMPLIANCE,
          arg("sliding_nonce", U64), arg("to_unfreeze_account", ADDRESS)),
    entry("unmint_lbr", _bytecode.UNMINT_LBR, ACCOUNT_ADMINISTRATION,
          arg("amount_lbr", U64)),
    entry("update_dual_attestation_limit", _bytecode.UPDATE_DUAL_ATTESTATION_LIMIT, TREASURY_COMPLIANCE,
          arg("sliding_nonce", U64), arg("new_micro_lbr_limit", U64)),
    entry("update_exchange_rate", _bytecode.UPDATE_EXCHANGE_RATE, TREASURY_COMPLIANCE,
          ty("currency"), arg("sliding_nonce", U64),
          arg("new_exchange_rate_numerator", U64), arg("new_exchange_rate_denominator", U64)),
    entry("update_libra_version", _bytecode.UPDATE_LIBRA_VERSION, SYSTEM_ADMINISTRATION,
          arg("sliding_nonce", U64), arg("major", U64)),
    entry("update_minting_ability", _bytecode.UPDATE_MINTING_ABILITY, TREASURY_COMPLIANCE,
          ty("currency"), arg("allow_minting", BOOL)),
)

STDLIB_CATALOG = Catalog(STDLIB_ENTRIES)
logger.debug(f"Loaded stdlib catalog with {len(STDLIB_CATALOG)} operations")


__all__ = [
    "SemanticType",
    "SlotRole",
    "ArgumentSlot",
    "FunctionIdentity",
    "CatalogEntry",
    "Catalog",
    "STDLIB_ENTRIES",
    "STDLIB_CATALOG",
]
