# Diem wire type definitions
# Move type tags, transaction arguments, the two script payload dialects and
# the transaction metadata union, with their BCS encodings.

from __future__ import annotations
from typing import Annotated, Any, Callable, ClassVar, Dict, List, Literal, Optional, Type, TypeVar, Union

from pydantic import BaseModel, Field, StrictBool, StrictBytes, StrictInt, StrictStr

from .codec.options import BcsOptions
from .codec.reader import BcsDeserializer
from .codec.writer import BcsSerializer, MAX_U64, MAX_U128
from .runtime.address import AccountAddress
from .runtime.errors import UnmarshalError

U8 = Annotated[StrictInt, Field(ge=0, le=0xFF)]
U64 = Annotated[StrictInt, Field(ge=0, le=MAX_U64)]
U128 = Annotated[StrictInt, Field(ge=0, le=MAX_U128)]

ModelT = TypeVar("ModelT", bound="BcsModel")


class BcsModel(BaseModel):
    """Base for wire types that have a BCS encoding."""

    model_config = {"populate_by_name": True}

    def serialize(self, serializer: BcsSerializer) -> None:
        raise NotImplementedError

    @classmethod
    def deserialize(cls: Type[ModelT], deserializer: BcsDeserializer) -> ModelT:
        raise NotImplementedError

    def bcs_serialize(self) -> bytes:
        """Serialize this value to BCS bytes."""
        serializer = BcsSerializer()
        self.serialize(serializer)
        return serializer.to_bytes()

    @classmethod
    def bcs_deserialize(cls: Type[ModelT], data: bytes, options: Optional[BcsOptions] = None) -> ModelT:
        """Deserialize a value from BCS bytes; every input byte must be consumed."""
        deserializer = BcsDeserializer(data, options)
        value = _guard_nesting(cls.deserialize, deserializer)
        deserializer.check_consumed()
        return value

    def to_hex(self) -> str:
        return self.bcs_serialize().hex()

    @classmethod
    def from_hex(cls: Type[ModelT], data: str, options: Optional[BcsOptions] = None) -> ModelT:
        return cls.bcs_deserialize(bytes.fromhex(data), options)


def _serialize_sequence(items: List[Any], serializer: BcsSerializer,
                        write: Callable[[Any, BcsSerializer], None]) -> None:
    serializer.sequence_length(len(items))
    for item in items:
        write(item, serializer)


def _deserialize_sequence(deserializer: BcsDeserializer,
                          read: Callable[[BcsDeserializer], Any]) -> List[Any]:
    return [read(deserializer) for _ in range(deserializer.sequence_length())]


def _serialize_option(value: Any, serializer: BcsSerializer,
                      write: Callable[[Any, BcsSerializer], None]) -> None:
    serializer.option_tag(value is not None)
    if value is not None:
        write(value, serializer)


def _deserialize_option(deserializer: BcsDeserializer,
                        read: Callable[[BcsDeserializer], Any]) -> Any:
    return read(deserializer) if deserializer.option_tag() else None


def _guard_nesting(read: Callable[[BcsDeserializer], Any], deserializer: BcsDeserializer) -> Any:
    # Struct type parameters still nest through the call stack.
    try:
        return read(deserializer)
    except RecursionError as e:
        raise UnmarshalError(
            "Exceeded maximum nesting depth",
            details={"offset": deserializer.offset},
            cause=e,
        ) from e


def _deserialize_variant(deserializer: BcsDeserializer, variants: Dict[int, type], union_name: str):
    deserializer.increase_container_depth()
    index = deserializer.variant_index()
    variant = variants.get(index)
    if variant is None:
        raise UnmarshalError(f"Unknown variant index for {union_name}: {index}")
    value = variant.load(deserializer)
    deserializer.decrease_container_depth()
    return value


# =============================================================================
# Type Tags
# =============================================================================

class StructTag(BcsModel):
    """Fully qualified Move struct type: address::module::name<type_params>."""
    address: AccountAddress
    module: StrictStr
    name: StrictStr
    type_params: List["TypeTag"] = Field(default_factory=list, alias="typeParams")

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.fixed_bytes(self.address.to_bytes())
        serializer.str(self.module)
        serializer.str(self.name)
        _serialize_sequence(self.type_params, serializer, lambda t, s: t.serialize(s))

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer) -> StructTag:
        deserializer.increase_container_depth()
        address = AccountAddress(deserializer.fixed_bytes(AccountAddress.LENGTH))
        module = deserializer.str()
        name = deserializer.str()
        type_params = _deserialize_sequence(deserializer, deserialize_type_tag)
        deserializer.decrease_container_depth()
        return cls(address=address, module=module, name=name, type_params=type_params)


class _TypeTagBase(BcsModel):
    VARIANT_INDEX: ClassVar[int]

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.variant_index(self.VARIANT_INDEX)

    @classmethod
    def load(cls, deserializer: BcsDeserializer):
        return cls()

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer):
        return deserialize_type_tag(deserializer)


class TypeTagBool(_TypeTagBase):
    VARIANT_INDEX: ClassVar[int] = 0
    type: Literal["bool"] = "bool"


class TypeTagU8(_TypeTagBase):
    VARIANT_INDEX: ClassVar[int] = 1
    type: Literal["u8"] = "u8"


class TypeTagU64(_TypeTagBase):
    VARIANT_INDEX: ClassVar[int] = 2
    type: Literal["u64"] = "u64"


class TypeTagU128(_TypeTagBase):
    VARIANT_INDEX: ClassVar[int] = 3
    type: Literal["u128"] = "u128"


class TypeTagAddress(_TypeTagBase):
    VARIANT_INDEX: ClassVar[int] = 4
    type: Literal["address"] = "address"


class TypeTagSigner(_TypeTagBase):
    VARIANT_INDEX: ClassVar[int] = 5
    type: Literal["signer"] = "signer"


class TypeTagVector(_TypeTagBase):
    VARIANT_INDEX: ClassVar[int] = 6
    type: Literal["vector"] = "vector"
    value: "TypeTag"

    def serialize(self, serializer: BcsSerializer) -> None:
        tag = self
        while isinstance(tag, TypeTagVector):
            serializer.variant_index(tag.VARIANT_INDEX)
            tag = tag.value
        tag.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TypeTagVector:
        return cls(value=deserialize_type_tag(deserializer))


class TypeTagStruct(_TypeTagBase):
    VARIANT_INDEX: ClassVar[int] = 7
    type: Literal["struct"] = "struct"
    value: StructTag

    def serialize(self, serializer: BcsSerializer) -> None:
        super().serialize(serializer)
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TypeTagStruct:
        return cls(value=StructTag.deserialize(deserializer))


TypeTag = Annotated[
    Union[TypeTagBool, TypeTagU8, TypeTagU64, TypeTagU128,
          TypeTagAddress, TypeTagSigner, TypeTagVector, TypeTagStruct],
    Field(discriminator="type"),
]

TYPE_TAG_VARIANTS: Dict[int, type] = {
    cls.VARIANT_INDEX: cls
    for cls in (TypeTagBool, TypeTagU8, TypeTagU64, TypeTagU128,
                TypeTagAddress, TypeTagSigner, TypeTagVector, TypeTagStruct)
}


def deserialize_type_tag(deserializer: BcsDeserializer):
    """
    Read one TypeTag.

    Chains of vector prefixes are read in a loop, one container level each,
    and the nested tags are built from the innermost element outwards.
    """
    vectors = 0
    while True:
        deserializer.increase_container_depth()
        index = deserializer.variant_index()
        if index != TypeTagVector.VARIANT_INDEX:
            break
        vectors += 1
    variant = TYPE_TAG_VARIANTS.get(index)
    if variant is None:
        raise UnmarshalError(f"Unknown variant index for TypeTag: {index}")
    tag = variant.load(deserializer)
    deserializer.decrease_container_depth()
    for _ in range(vectors):
        tag = TypeTagVector(value=tag)
        deserializer.decrease_container_depth()
    return tag


# =============================================================================
# Transaction Arguments (legacy script dialect)
# =============================================================================

class _TransactionArgumentBase(BcsModel):
    VARIANT_INDEX: ClassVar[int]

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.variant_index(self.VARIANT_INDEX)
        self._write_value(serializer)

    def _write_value(self, serializer: BcsSerializer) -> None:
        raise NotImplementedError

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer):
        return deserialize_transaction_argument(deserializer)


class TransactionArgumentU8(_TransactionArgumentBase):
    VARIANT_INDEX: ClassVar[int] = 0
    type: Literal["u8"] = "u8"
    value: U8

    def _write_value(self, serializer: BcsSerializer) -> None:
        serializer.u8(self.value)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionArgumentU8:
        return cls(value=deserializer.u8())


class TransactionArgumentU64(_TransactionArgumentBase):
    VARIANT_INDEX: ClassVar[int] = 1
    type: Literal["u64"] = "u64"
    value: U64

    def _write_value(self, serializer: BcsSerializer) -> None:
        serializer.u64(self.value)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionArgumentU64:
        return cls(value=deserializer.u64())


class TransactionArgumentU128(_TransactionArgumentBase):
    VARIANT_INDEX: ClassVar[int] = 2
    type: Literal["u128"] = "u128"
    value: U128

    def _write_value(self, serializer: BcsSerializer) -> None:
        serializer.u128(self.value)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionArgumentU128:
        return cls(value=deserializer.u128())


class TransactionArgumentAddress(_TransactionArgumentBase):
    VARIANT_INDEX: ClassVar[int] = 3
    type: Literal["address"] = "address"
    value: AccountAddress

    def _write_value(self, serializer: BcsSerializer) -> None:
        serializer.fixed_bytes(self.value.to_bytes())

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionArgumentAddress:
        return cls(value=AccountAddress(deserializer.fixed_bytes(AccountAddress.LENGTH)))


class TransactionArgumentU8Vector(_TransactionArgumentBase):
    VARIANT_INDEX: ClassVar[int] = 4
    type: Literal["u8vector"] = "u8vector"
    value: StrictBytes

    def _write_value(self, serializer: BcsSerializer) -> None:
        serializer.bytes(self.value)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionArgumentU8Vector:
        return cls(value=deserializer.bytes())


class TransactionArgumentBool(_TransactionArgumentBase):
    VARIANT_INDEX: ClassVar[int] = 5
    type: Literal["bool"] = "bool"
    value: StrictBool

    def _write_value(self, serializer: BcsSerializer) -> None:
        serializer.bool(self.value)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionArgumentBool:
        return cls(value=deserializer.bool())


TransactionArgument = Annotated[
    Union[TransactionArgumentU8, TransactionArgumentU64, TransactionArgumentU128,
          TransactionArgumentAddress, TransactionArgumentU8Vector, TransactionArgumentBool],
    Field(discriminator="type"),
]

TRANSACTION_ARGUMENT_VARIANTS: Dict[int, type] = {
    cls.VARIANT_INDEX: cls
    for cls in (TransactionArgumentU8, TransactionArgumentU64, TransactionArgumentU128,
                TransactionArgumentAddress, TransactionArgumentU8Vector, TransactionArgumentBool)
}


def deserialize_transaction_argument(deserializer: BcsDeserializer):
    return _deserialize_variant(deserializer, TRANSACTION_ARGUMENT_VARIANTS, "TransactionArgument")


# =============================================================================
# Script payloads
# =============================================================================

class Script(BcsModel):
    """Legacy dialect payload: compiled bytecode plus self-tagged arguments."""
    code: StrictBytes
    ty_args: List[TypeTag] = Field(default_factory=list, alias="tyArgs")
    args: List[TransactionArgument] = Field(default_factory=list)

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.bytes(self.code)
        _serialize_sequence(self.ty_args, serializer, lambda t, s: t.serialize(s))
        _serialize_sequence(self.args, serializer, lambda a, s: a.serialize(s))

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer) -> Script:
        deserializer.increase_container_depth()
        code = deserializer.bytes()
        ty_args = _deserialize_sequence(deserializer, deserialize_type_tag)
        args = _deserialize_sequence(deserializer, deserialize_transaction_argument)
        deserializer.decrease_container_depth()
        return cls(code=code, ty_args=ty_args, args=args)


class ModuleId(BcsModel):
    """A published Move module: address::name."""
    address: AccountAddress
    name: StrictStr

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.fixed_bytes(self.address.to_bytes())
        serializer.str(self.name)

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer) -> ModuleId:
        deserializer.increase_container_depth()
        address = AccountAddress(deserializer.fixed_bytes(AccountAddress.LENGTH))
        name = deserializer.str()
        deserializer.decrease_container_depth()
        return cls(address=address, name=name)


class ScriptFunction(BcsModel):
    """Invocation dialect payload: a named module function plus untagged BCS arguments."""
    module: ModuleId
    function: StrictStr
    ty_args: List[TypeTag] = Field(default_factory=list, alias="tyArgs")
    args: List[StrictBytes] = Field(default_factory=list)

    def serialize(self, serializer: BcsSerializer) -> None:
        self.module.serialize(serializer)
        serializer.str(self.function)
        _serialize_sequence(self.ty_args, serializer, lambda t, s: t.serialize(s))
        _serialize_sequence(self.args, serializer, lambda a, s: s.bytes(a))

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer) -> ScriptFunction:
        deserializer.increase_container_depth()
        module = ModuleId.deserialize(deserializer)
        function = deserializer.str()
        ty_args = _deserialize_sequence(deserializer, deserialize_type_tag)
        args = _deserialize_sequence(deserializer, lambda d: d.bytes())
        deserializer.decrease_container_depth()
        return cls(module=module, function=function, ty_args=ty_args, args=args)


# =============================================================================
# Transaction Payload
# =============================================================================

class _TransactionPayloadBase(BcsModel):
    VARIANT_INDEX: ClassVar[int]

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer):
        return deserialize_transaction_payload(deserializer)


class TransactionPayloadScript(_TransactionPayloadBase):
    VARIANT_INDEX: ClassVar[int] = 1
    type: Literal["script"] = "script"
    value: Script

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.variant_index(self.VARIANT_INDEX)
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionPayloadScript:
        return cls(value=Script.deserialize(deserializer))


class TransactionPayloadModule(_TransactionPayloadBase):
    VARIANT_INDEX: ClassVar[int] = 2
    type: Literal["module"] = "module"
    code: StrictBytes

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.variant_index(self.VARIANT_INDEX)
        serializer.bytes(self.code)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionPayloadModule:
        deserializer.increase_container_depth()
        code = deserializer.bytes()
        deserializer.decrease_container_depth()
        return cls(code=code)


class TransactionPayloadScriptFunction(_TransactionPayloadBase):
    VARIANT_INDEX: ClassVar[int] = 3
    type: Literal["scriptFunction"] = "scriptFunction"
    value: ScriptFunction

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.variant_index(self.VARIANT_INDEX)
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TransactionPayloadScriptFunction:
        return cls(value=ScriptFunction.deserialize(deserializer))


TransactionPayload = Annotated[
    Union[TransactionPayloadScript, TransactionPayloadModule, TransactionPayloadScriptFunction],
    Field(discriminator="type"),
]

TRANSACTION_PAYLOAD_VARIANTS: Dict[int, type] = {
    cls.VARIANT_INDEX: cls
    for cls in (TransactionPayloadScript, TransactionPayloadModule, TransactionPayloadScriptFunction)
}


def deserialize_transaction_payload(deserializer: BcsDeserializer):
    return _deserialize_variant(deserializer, TRANSACTION_PAYLOAD_VARIANTS, "TransactionPayload")


def bcs_deserialize_transaction_payload(data: bytes, options: Optional[BcsOptions] = None):
    """Deserialize any TransactionPayload variant from BCS bytes."""
    deserializer = BcsDeserializer(data, options)
    payload = _guard_nesting(deserialize_transaction_payload, deserializer)
    deserializer.check_consumed()
    return payload


# =============================================================================
# Transaction Metadata
# =============================================================================
# Carried as the ``metadata`` argument of peer_to_peer_with_metadata.

class GeneralMetadataV0(BcsModel):
    """Sub-addresses of a payment, and the event it refunds if any."""
    to_subaddress: Optional[StrictBytes] = Field(default=None, alias="toSubaddress")
    from_subaddress: Optional[StrictBytes] = Field(default=None, alias="fromSubaddress")
    referenced_event: Optional[U64] = Field(default=None, alias="referencedEvent")

    def serialize(self, serializer: BcsSerializer) -> None:
        _serialize_option(self.to_subaddress, serializer, lambda v, s: s.bytes(v))
        _serialize_option(self.from_subaddress, serializer, lambda v, s: s.bytes(v))
        _serialize_option(self.referenced_event, serializer, lambda v, s: s.u64(v))

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer) -> GeneralMetadataV0:
        deserializer.increase_container_depth()
        to_subaddress = _deserialize_option(deserializer, lambda d: d.bytes())
        from_subaddress = _deserialize_option(deserializer, lambda d: d.bytes())
        referenced_event = _deserialize_option(deserializer, lambda d: d.u64())
        deserializer.decrease_container_depth()
        return cls(to_subaddress=to_subaddress, from_subaddress=from_subaddress,
                   referenced_event=referenced_event)


class TravelRuleMetadataV0(BcsModel):
    off_chain_reference_id: Optional[StrictStr] = Field(default=None, alias="offChainReferenceId")

    def serialize(self, serializer: BcsSerializer) -> None:
        _serialize_option(self.off_chain_reference_id, serializer, lambda v, s: s.str(v))

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer) -> TravelRuleMetadataV0:
        deserializer.increase_container_depth()
        reference_id = _deserialize_option(deserializer, lambda d: d.str())
        deserializer.decrease_container_depth()
        return cls(off_chain_reference_id=reference_id)


class UnstructuredBytesMetadata(BcsModel):
    metadata: Optional[StrictBytes] = None

    def serialize(self, serializer: BcsSerializer) -> None:
        _serialize_option(self.metadata, serializer, lambda v, s: s.bytes(v))

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer) -> UnstructuredBytesMetadata:
        deserializer.increase_container_depth()
        metadata = _deserialize_option(deserializer, lambda d: d.bytes())
        deserializer.decrease_container_depth()
        return cls(metadata=metadata)


class _VariantBase(BcsModel):
    """Union member written as its variant index followed by ``_write_value``."""
    VARIANT_INDEX: ClassVar[int]

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.variant_index(self.VARIANT_INDEX)
        self._write_value(serializer)

    def _write_value(self, serializer: BcsSerializer) -> None:
        pass

    @classmethod
    def load(cls, deserializer: BcsDeserializer):
        return cls()


class _RefundReasonBase(_VariantBase):
    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer):
        return deserialize_refund_reason(deserializer)


class RefundReasonOther(_RefundReasonBase):
    VARIANT_INDEX: ClassVar[int] = 0
    type: Literal["otherReason"] = "otherReason"


class RefundReasonInvalidSubaddress(_RefundReasonBase):
    VARIANT_INDEX: ClassVar[int] = 1
    type: Literal["invalidSubaddress"] = "invalidSubaddress"


class RefundReasonUserInitiatedPartialRefund(_RefundReasonBase):
    VARIANT_INDEX: ClassVar[int] = 2
    type: Literal["userInitiatedPartialRefund"] = "userInitiatedPartialRefund"


class RefundReasonUserInitiatedFullRefund(_RefundReasonBase):
    VARIANT_INDEX: ClassVar[int] = 3
    type: Literal["userInitiatedFullRefund"] = "userInitiatedFullRefund"


RefundReason = Annotated[
    Union[RefundReasonOther, RefundReasonInvalidSubaddress,
          RefundReasonUserInitiatedPartialRefund, RefundReasonUserInitiatedFullRefund],
    Field(discriminator="type"),
]

REFUND_REASON_VARIANTS: Dict[int, type] = {
    cls.VARIANT_INDEX: cls
    for cls in (RefundReasonOther, RefundReasonInvalidSubaddress,
                RefundReasonUserInitiatedPartialRefund, RefundReasonUserInitiatedFullRefund)
}


def deserialize_refund_reason(deserializer: BcsDeserializer):
    return _deserialize_variant(deserializer, REFUND_REASON_VARIANTS, "RefundReason")


class RefundMetadataV0(BcsModel):
    """Refund of the transaction at ``transaction_version``."""
    transaction_version: U64 = Field(alias="transactionVersion")
    reason: RefundReason

    def serialize(self, serializer: BcsSerializer) -> None:
        serializer.u64(self.transaction_version)
        self.reason.serialize(serializer)

    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer) -> RefundMetadataV0:
        deserializer.increase_container_depth()
        transaction_version = deserializer.u64()
        reason = deserialize_refund_reason(deserializer)
        deserializer.decrease_container_depth()
        return cls(transaction_version=transaction_version, reason=reason)


# Each versioned metadata family has a single version so far.

class _VersionBase(_VariantBase):
    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer):
        return _deserialize_variant(deserializer, {cls.VARIANT_INDEX: cls}, cls.__name__)


class GeneralMetadataVersion0(_VersionBase):
    VARIANT_INDEX: ClassVar[int] = 0
    type: Literal["generalMetadataVersion0"] = "generalMetadataVersion0"
    value: GeneralMetadataV0

    def _write_value(self, serializer: BcsSerializer) -> None:
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> GeneralMetadataVersion0:
        return cls(value=GeneralMetadataV0.deserialize(deserializer))


class TravelRuleMetadataVersion0(_VersionBase):
    VARIANT_INDEX: ClassVar[int] = 0
    type: Literal["travelRuleMetadataVersion0"] = "travelRuleMetadataVersion0"
    value: TravelRuleMetadataV0

    def _write_value(self, serializer: BcsSerializer) -> None:
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> TravelRuleMetadataVersion0:
        return cls(value=TravelRuleMetadataV0.deserialize(deserializer))


class RefundMetadataVersion0(_VersionBase):
    VARIANT_INDEX: ClassVar[int] = 0
    type: Literal["refundMetadataVersion0"] = "refundMetadataVersion0"
    value: RefundMetadataV0

    def _write_value(self, serializer: BcsSerializer) -> None:
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> RefundMetadataVersion0:
        return cls(value=RefundMetadataV0.deserialize(deserializer))


GeneralMetadata = GeneralMetadataVersion0
TravelRuleMetadata = TravelRuleMetadataVersion0
RefundMetadata = RefundMetadataVersion0

GENERAL_METADATA_VARIANTS: Dict[int, type] = {GeneralMetadataVersion0.VARIANT_INDEX: GeneralMetadataVersion0}
TRAVEL_RULE_METADATA_VARIANTS: Dict[int, type] = {TravelRuleMetadataVersion0.VARIANT_INDEX: TravelRuleMetadataVersion0}
REFUND_METADATA_VARIANTS: Dict[int, type] = {RefundMetadataVersion0.VARIANT_INDEX: RefundMetadataVersion0}


class _MetadataBase(_VariantBase):
    @classmethod
    def deserialize(cls, deserializer: BcsDeserializer):
        return deserialize_metadata(deserializer)


class MetadataUndefined(_MetadataBase):
    VARIANT_INDEX: ClassVar[int] = 0
    type: Literal["undefined"] = "undefined"


class MetadataGeneralMetadata(_MetadataBase):
    VARIANT_INDEX: ClassVar[int] = 1
    type: Literal["generalMetadata"] = "generalMetadata"
    value: GeneralMetadata

    def _write_value(self, serializer: BcsSerializer) -> None:
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> MetadataGeneralMetadata:
        return cls(value=_deserialize_variant(deserializer, GENERAL_METADATA_VARIANTS, "GeneralMetadata"))


class MetadataTravelRuleMetadata(_MetadataBase):
    VARIANT_INDEX: ClassVar[int] = 2
    type: Literal["travelRuleMetadata"] = "travelRuleMetadata"
    value: TravelRuleMetadata

    def _write_value(self, serializer: BcsSerializer) -> None:
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> MetadataTravelRuleMetadata:
        return cls(value=_deserialize_variant(deserializer, TRAVEL_RULE_METADATA_VARIANTS, "TravelRuleMetadata"))


class MetadataUnstructuredBytesMetadata(_MetadataBase):
    VARIANT_INDEX: ClassVar[int] = 3
    type: Literal["unstructuredBytesMetadata"] = "unstructuredBytesMetadata"
    value: UnstructuredBytesMetadata

    def _write_value(self, serializer: BcsSerializer) -> None:
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> MetadataUnstructuredBytesMetadata:
        return cls(value=UnstructuredBytesMetadata.deserialize(deserializer))


class MetadataRefundMetadata(_MetadataBase):
    VARIANT_INDEX: ClassVar[int] = 4
    type: Literal["refundMetadata"] = "refundMetadata"
    value: RefundMetadata

    def _write_value(self, serializer: BcsSerializer) -> None:
        self.value.serialize(serializer)

    @classmethod
    def load(cls, deserializer: BcsDeserializer) -> MetadataRefundMetadata:
        return cls(value=_deserialize_variant(deserializer, REFUND_METADATA_VARIANTS, "RefundMetadata"))


Metadata = Annotated[
    Union[MetadataUndefined, MetadataGeneralMetadata, MetadataTravelRuleMetadata,
          MetadataUnstructuredBytesMetadata, MetadataRefundMetadata],
    Field(discriminator="type"),
]

METADATA_VARIANTS: Dict[int, type] = {
    cls.VARIANT_INDEX: cls
    for cls in (MetadataUndefined, MetadataGeneralMetadata, MetadataTravelRuleMetadata,
                MetadataUnstructuredBytesMetadata, MetadataRefundMetadata)
}


def deserialize_metadata(deserializer: BcsDeserializer):
    return _deserialize_variant(deserializer, METADATA_VARIANTS, "Metadata")


def bcs_deserialize_metadata(data: bytes, options: Optional[BcsOptions] = None):
    """Deserialize any Metadata variant from BCS bytes."""
    deserializer = BcsDeserializer(data, options)
    metadata = _guard_nesting(deserialize_metadata, deserializer)
    deserializer.check_consumed()
    return metadata


StructTag.model_rebuild()
TypeTagVector.model_rebuild()
TypeTagStruct.model_rebuild()
Script.model_rebuild()
ScriptFunction.model_rebuild()


__all__ = [
    "BcsModel",
    "StructTag",
    "TypeTag",
    "TypeTagBool",
    "TypeTagU8",
    "TypeTagU64",
    "TypeTagU128",
    "TypeTagAddress",
    "TypeTagSigner",
    "TypeTagVector",
    "TypeTagStruct",
    "deserialize_type_tag",
    "TransactionArgument",
    "TransactionArgumentU8",
    "TransactionArgumentU64",
    "TransactionArgumentU128",
    "TransactionArgumentAddress",
    "TransactionArgumentU8Vector",
    "TransactionArgumentBool",
    "deserialize_transaction_argument",
    "Script",
    "ModuleId",
    "ScriptFunction",
    "TransactionPayload",
    "TransactionPayloadScript",
    "TransactionPayloadModule",
    "TransactionPayloadScriptFunction",
    "deserialize_transaction_payload",
    "bcs_deserialize_transaction_payload",
    "GeneralMetadataV0",
    "TravelRuleMetadataV0",
    "UnstructuredBytesMetadata",
    "RefundReason",
    "RefundReasonOther",
    "RefundReasonInvalidSubaddress",
    "RefundReasonUserInitiatedPartialRefund",
    "RefundReasonUserInitiatedFullRefund",
    "deserialize_refund_reason",
    "RefundMetadataV0",
    "GeneralMetadata",
    "GeneralMetadataVersion0",
    "TravelRuleMetadata",
    "TravelRuleMetadataVersion0",
    "RefundMetadata",
    "RefundMetadataVersion0",
    "Metadata",
    "MetadataUndefined",
    "MetadataGeneralMetadata",
    "MetadataTravelRuleMetadata",
    "MetadataUnstructuredBytesMetadata",
    "MetadataRefundMetadata",
    "deserialize_metadata",
    "bcs_deserialize_metadata",
]
