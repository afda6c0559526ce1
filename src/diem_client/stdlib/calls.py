# Structured calls into the Move standard library scripts.
# One model per catalog entry; ``type`` is the operation name and the
# discriminator of the ScriptCallUnion tagged union.

from __future__ import annotations
from typing import Annotated, Any, Dict, Literal, Mapping, Type, Union, get_args

from pydantic import BaseModel, Field, StrictBool, StrictBytes, TypeAdapter

from ..runtime.address import AccountAddress
from ..runtime.errors import CatalogError
from ..types import TypeTag, U64
from .catalog import STDLIB_CATALOG, Catalog


class ScriptCall(BaseModel):
    """Structured representation of a call into a known Move script."""
    type: str

    model_config = {"frozen": True}

    @property
    def operation(self) -> str:
        return self.type


# =============================================================================
# Account administration
# =============================================================================

class AddCurrencyToAccount(ScriptCall):
    """Add a `currency` balance to the sending account."""
    type: Literal["add_currency_to_account"] = "add_currency_to_account"
    currency: TypeTag


class AddRecoveryRotationCapability(ScriptCall):
    """Add the sender's key rotation capability to the recovery address resource."""
    type: Literal["add_recovery_rotation_capability"] = "add_recovery_rotation_capability"
    recovery_address: AccountAddress


class CreateRecoveryAddress(ScriptCall):
    """Publish a recovery address resource under the sending VASP account."""
    type: Literal["create_recovery_address"] = "create_recovery_address"


class MintLbr(ScriptCall):
    """Mint `amount_lbr` LBR from the sending account's constituent coins."""
    type: Literal["mint_lbr"] = "mint_lbr"
    amount_lbr: U64


class UnmintLbr(ScriptCall):
    """Unmint `amount_lbr` LBR back into its constituent coins."""
    type: Literal["unmint_lbr"] = "unmint_lbr"
    amount_lbr: U64


class PublishSharedEd25519PublicKey(ScriptCall):
    """Publish a shared ed25519 key and rotate the authentication key to match."""
    type: Literal["publish_shared_ed25519_public_key"] = "publish_shared_ed25519_public_key"
    public_key: StrictBytes


class RotateAuthenticationKey(ScriptCall):
    """Rotate the sender's authentication key to `new_key`."""
    type: Literal["rotate_authentication_key"] = "rotate_authentication_key"
    new_key: StrictBytes


class RotateAuthenticationKeyWithNonce(ScriptCall):
    """Rotate the sender's authentication key, guarded by a sliding nonce."""
    type: Literal["rotate_authentication_key_with_nonce"] = "rotate_authentication_key_with_nonce"
    sliding_nonce: U64
    new_key: StrictBytes


class RotateAuthenticationKeyWithNonceAdmin(ScriptCall):
    """Rotate an account's authentication key as the Libra root, guarded by a sliding nonce."""
    type: Literal["rotate_authentication_key_with_nonce_admin"] = "rotate_authentication_key_with_nonce_admin"
    sliding_nonce: U64
    new_key: StrictBytes


class RotateAuthenticationKeyWithRecoveryAddress(ScriptCall):
    """Rotate the key of `to_recover` using the capability held at `recovery_address`."""
    type: Literal["rotate_authentication_key_with_recovery_address"] = (
        "rotate_authentication_key_with_recovery_address"
    )
    recovery_address: AccountAddress
    to_recover: AccountAddress
    new_key: StrictBytes


class RotateDualAttestationInfo(ScriptCall):
    """Rotate the base URL and compliance public key used for dual attestation."""
    type: Literal["rotate_dual_attestation_info"] = "rotate_dual_attestation_info"
    new_url: StrictBytes
    new_key: StrictBytes


class RotateSharedEd25519PublicKey(ScriptCall):
    """Rotate the shared ed25519 key and the authentication key derived from it."""
    type: Literal["rotate_shared_ed25519_public_key"] = "rotate_shared_ed25519_public_key"
    public_key: StrictBytes


# =============================================================================
# Account creation
# =============================================================================

class CreateChildVaspAccount(ScriptCall):
    """
    Create a ChildVASP account at `child_address` for the sending ParentVASP.

    The child starts with `child_initial_balance` of `coin_type`; when
    `add_all_currencies` is set it also gets a zero balance in every
    currency.
    """
    type: Literal["create_child_vasp_account"] = "create_child_vasp_account"
    coin_type: TypeTag
    child_address: AccountAddress
    auth_key_prefix: StrictBytes
    add_all_currencies: StrictBool
    child_initial_balance: U64


class CreateDesignatedDealer(ScriptCall):
    """Create a DesignatedDealer account at `addr` with a zero `currency` balance."""
    type: Literal["create_designated_dealer"] = "create_designated_dealer"
    currency: TypeTag
    sliding_nonce: U64
    addr: AccountAddress
    auth_key_prefix: StrictBytes
    human_name: StrictBytes
    add_all_currencies: StrictBool


class CreateParentVaspAccount(ScriptCall):
    """Create a ParentVASP account at `new_account_address` with a zero `coin_type` balance."""
    type: Literal["create_parent_vasp_account"] = "create_parent_vasp_account"
    coin_type: TypeTag
    sliding_nonce: U64
    new_account_address: AccountAddress
    auth_key_prefix: StrictBytes
    human_name: StrictBytes
    add_all_currencies: StrictBool


class CreateValidatorAccount(ScriptCall):
    """Create a validator account at `new_account_address`."""
    type: Literal["create_validator_account"] = "create_validator_account"
    sliding_nonce: U64
    new_account_address: AccountAddress
    auth_key_prefix: StrictBytes
    human_name: StrictBytes


class CreateValidatorOperatorAccount(ScriptCall):
    """Create a validator operator account at `new_account_address`."""
    type: Literal["create_validator_operator_account"] = "create_validator_operator_account"
    sliding_nonce: U64
    new_account_address: AccountAddress
    auth_key_prefix: StrictBytes
    human_name: StrictBytes


# =============================================================================
# Payments
# =============================================================================

class PeerToPeerWithMetadata(ScriptCall):
    """
    Transfer `amount` coins of type `currency` from the sender to `payee`.

    `metadata` and `metadata_signature` are opaque to the codec; the
    signature is only required for payments subject to dual attestation.
    """
    type: Literal["peer_to_peer_with_metadata"] = "peer_to_peer_with_metadata"
    currency: TypeTag
    payee: AccountAddress
    amount: U64
    metadata: StrictBytes
    metadata_signature: StrictBytes


# =============================================================================
# System administration
# =============================================================================

class AddToScriptAllowList(ScriptCall):
    """Append `hash` to the list of script hashes the network allows to execute."""
    type: Literal["add_to_script_allow_list"] = "add_to_script_allow_list"
    hash: StrictBytes
    sliding_nonce: U64


class UpdateLibraVersion(ScriptCall):
    """Update the Libra major version."""
    type: Literal["update_libra_version"] = "update_libra_version"
    sliding_nonce: U64
    major: U64


# =============================================================================
# Treasury and compliance
# =============================================================================

class Burn(ScriptCall):
    """Destroy the coins in the oldest burn request under `preburn_address`."""
    type: Literal["burn"] = "burn"
    token: TypeTag
    sliding_nonce: U64
    preburn_address: AccountAddress


class BurnTxnFees(ScriptCall):
    """Burn the transaction fees collected in `coin_type`."""
    type: Literal["burn_txn_fees"] = "burn_txn_fees"
    coin_type: TypeTag


class CancelBurn(ScriptCall):
    """Cancel the oldest burn request from `preburn_address` and return the funds."""
    type: Literal["cancel_burn"] = "cancel_burn"
    token: TypeTag
    preburn_address: AccountAddress


class FreezeAccount(ScriptCall):
    type: Literal["freeze_account"] = "freeze_account"
    sliding_nonce: U64
    to_freeze_account: AccountAddress


class UnfreezeAccount(ScriptCall):
    type: Literal["unfreeze_account"] = "unfreeze_account"
    sliding_nonce: U64
    to_unfreeze_account: AccountAddress


class Preburn(ScriptCall):
    """Move `amount` of `token` from the sender into its preburn area."""
    type: Literal["preburn"] = "preburn"
    token: TypeTag
    amount: U64


class TieredMint(ScriptCall):
    """Mint `mint_amount` of `coin_type` to a designated dealer at tier `tier_index`."""
    type: Literal["tiered_mint"] = "tiered_mint"
    coin_type: TypeTag
    sliding_nonce: U64
    designated_dealer_address: AccountAddress
    mint_amount: U64
    tier_index: U64


class UpdateDualAttestationLimit(ScriptCall):
    """Update the dual attestation threshold, in micro-LBR."""
    type: Literal["update_dual_attestation_limit"] = "update_dual_attestation_limit"
    sliding_nonce: U64
    new_micro_lbr_limit: U64


class UpdateExchangeRate(ScriptCall):
    """Update the `currency` to LBR exchange rate as a fraction."""
    type: Literal["update_exchange_rate"] = "update_exchange_rate"
    currency: TypeTag
    sliding_nonce: U64
    new_exchange_rate_numerator: U64
    new_exchange_rate_denominator: U64


class UpdateMintingAbility(ScriptCall):
    """Allow or disallow minting of `currency`."""
    type: Literal["update_minting_ability"] = "update_minting_ability"
    currency: TypeTag
    allow_minting: StrictBool


# =============================================================================
# Validator administration
# =============================================================================

class AddValidatorAndReconfigure(ScriptCall):
    """Add `validator_address` to the validator set and trigger a reconfiguration."""
    type: Literal["add_validator_and_reconfigure"] = "add_validator_and_reconfigure"
    sliding_nonce: U64
    validator_name: StrictBytes
    validator_address: AccountAddress


class RegisterValidatorConfig(ScriptCall):
    """Set the config of `validator_account` without reconfiguring the network."""
    type: Literal["register_validator_config"] = "register_validator_config"
    validator_account: AccountAddress
    consensus_pubkey: StrictBytes
    validator_network_identity_pubkey: StrictBytes
    validator_network_address: StrictBytes
    fullnodes_network_identity_pubkey: StrictBytes
    fullnodes_network_address: StrictBytes


class RemoveValidatorAndReconfigure(ScriptCall):
    """Remove `validator_address` from the validator set and trigger a reconfiguration."""
    type: Literal["remove_validator_and_reconfigure"] = "remove_validator_and_reconfigure"
    sliding_nonce: U64
    validator_name: StrictBytes
    validator_address: AccountAddress


class SetValidatorConfigAndReconfigure(ScriptCall):
    """Set the config of `validator_account` and trigger a reconfiguration."""
    type: Literal["set_validator_config_and_reconfigure"] = "set_validator_config_and_reconfigure"
    validator_account: AccountAddress
    consensus_pubkey: StrictBytes
    validator_network_identity_pubkey: StrictBytes
    validator_network_address: StrictBytes
    fullnodes_network_identity_pubkey: StrictBytes
    fullnodes_network_address: StrictBytes


class SetValidatorOperator(ScriptCall):
    """Set `operator_account` as the operator of the sending validator."""
    type: Literal["set_validator_operator"] = "set_validator_operator"
    operator_name: StrictBytes
    operator_account: AccountAddress


class SetValidatorOperatorWithNonceAdmin(ScriptCall):
    """Set the operator of a validator as the Libra root, guarded by a sliding nonce."""
    type: Literal["set_validator_operator_with_nonce_admin"] = "set_validator_operator_with_nonce_admin"
    sliding_nonce: U64
    operator_name: StrictBytes
    operator_account: AccountAddress


# =============================================================================
# Tagged union and registry
# =============================================================================

ScriptCallUnion = Annotated[
    Union[
        AddCurrencyToAccount,
        AddRecoveryRotationCapability,
        AddToScriptAllowList,
        AddValidatorAndReconfigure,
        Burn,
        BurnTxnFees,
        CancelBurn,
        CreateChildVaspAccount,
        CreateDesignatedDealer,
        CreateParentVaspAccount,
        CreateRecoveryAddress,
        CreateValidatorAccount,
        CreateValidatorOperatorAccount,
        FreezeAccount,
        MintLbr,
        PeerToPeerWithMetadata,
        Preburn,
        PublishSharedEd25519PublicKey,
        RegisterValidatorConfig,
        RemoveValidatorAndReconfigure,
        RotateAuthenticationKey,
        RotateAuthenticationKeyWithNonce,
        RotateAuthenticationKeyWithNonceAdmin,
        RotateAuthenticationKeyWithRecoveryAddress,
        RotateDualAttestationInfo,
        RotateSharedEd25519PublicKey,
        SetValidatorConfigAndReconfigure,
        SetValidatorOperator,
        SetValidatorOperatorWithNonceAdmin,
        TieredMint,
        UnfreezeAccount,
        UnmintLbr,
        UpdateDualAttestationLimit,
        UpdateExchangeRate,
        UpdateLibraVersion,
        UpdateMintingAbility,
    ],
    Field(discriminator="type"),
]

_SCRIPT_CALL_ADAPTER: TypeAdapter = TypeAdapter(ScriptCallUnion)


def _operation_name(call_cls: Type[ScriptCall]) -> str:
    return call_cls.model_fields["type"].default


def _call_fields(call_cls: Type[ScriptCall]) -> tuple:
    return tuple(name for name in call_cls.model_fields if name != "type")


def build_call_registry(catalog: Catalog, call_classes) -> Mapping[str, Type[ScriptCall]]:
    """
    Map operation names to call classes, checking both sides agree.

    Every catalog entry must have exactly one call class whose fields are the
    entry's slot names in declared order, and every call class must have a
    catalog entry.

    Raises:
        CatalogError: on any mismatch
    """
    registry: Dict[str, Type[ScriptCall]] = {}
    for call_cls in call_classes:
        name = _operation_name(call_cls)
        if name in registry:
            raise CatalogError(f"Operation {name} has more than one call class")
        entry = catalog.get(name)
        if entry is None:
            raise CatalogError(f"Call class {call_cls.__name__} has no catalog entry for {name}")
        if _call_fields(call_cls) != entry.field_names:
            raise CatalogError(
                f"Fields of {call_cls.__name__} do not match catalog slots of {name}",
                {"fields": list(_call_fields(call_cls)), "slots": list(entry.field_names)},
            )
        registry[name] = call_cls

    missing = [name for name in catalog.names() if name not in registry]
    if missing:
        raise CatalogError(f"Catalog entries without a call class: {', '.join(missing)}")
    return registry


CALL_REGISTRY: Mapping[str, Type[ScriptCall]] = build_call_registry(
    STDLIB_CATALOG, get_args(get_args(ScriptCallUnion)[0])
)


def call_class_for(name: str) -> Type[ScriptCall]:
    """
    Get the structured call class for an operation name.

    Raises:
        ValueError: If the operation is not in the catalog
    """
    call_cls = CALL_REGISTRY.get(name)
    if call_cls is None:
        raise ValueError(f"Unsupported operation: {name}")
    return call_cls


def parse_script_call(data: Any) -> ScriptCall:
    """Validate a mapping (e.g. parsed JSON) into the matching structured call."""
    return _SCRIPT_CALL_ADAPTER.validate_python(data)


def list_operations() -> list[str]:
    """Names of all supported operations, in catalog order."""
    return STDLIB_CATALOG.names()


__all__ = [
    "ScriptCall",
    "AddCurrencyToAccount",
    "AddRecoveryRotationCapability",
    "CreateRecoveryAddress",
    "MintLbr",
    "UnmintLbr",
    "PublishSharedEd25519PublicKey",
    "RotateAuthenticationKey",
    "RotateAuthenticationKeyWithNonce",
    "RotateAuthenticationKeyWithNonceAdmin",
    "RotateAuthenticationKeyWithRecoveryAddress",
    "RotateDualAttestationInfo",
    "RotateSharedEd25519PublicKey",
    "CreateChildVaspAccount",
    "CreateDesignatedDealer",
    "CreateParentVaspAccount",
    "CreateValidatorAccount",
    "CreateValidatorOperatorAccount",
    "PeerToPeerWithMetadata",
    "AddToScriptAllowList",
    "UpdateLibraVersion",
    "Burn",
    "BurnTxnFees",
    "CancelBurn",
    "FreezeAccount",
    "UnfreezeAccount",
    "Preburn",
    "TieredMint",
    "UpdateDualAttestationLimit",
    "UpdateExchangeRate",
    "UpdateMintingAbility",
    "AddValidatorAndReconfigure",
    "RegisterValidatorConfig",
    "RemoveValidatorAndReconfigure",
    "SetValidatorConfigAndReconfigure",
    "SetValidatorOperator",
    "SetValidatorOperatorWithNonceAdmin",
    "ScriptCallUnion",
    "CALL_REGISTRY",
    "build_call_registry",
    "call_class_for",
    "parse_script_call",
    "list_operations",
]
