#!/usr/bin/env python3

"""Unit tests for the Diem wire types and their BCS encodings"""

import pytest
from pydantic import TypeAdapter, ValidationError

from diem_client.runtime.address import AccountAddress, CORE_CODE_ADDRESS
from diem_client.runtime.errors import UnmarshalError
from diem_client.types import (
    ModuleId,
    Script,
    ScriptFunction,
    StructTag,
    TransactionArgumentAddress,
    TransactionArgumentBool,
    TransactionArgumentU8,
    TransactionArgumentU8Vector,
    TransactionArgumentU64,
    TransactionArgumentU128,
    TransactionPayloadModule,
    TransactionPayloadScript,
    TransactionPayloadScriptFunction,
    TypeTag,
    TypeTagBool,
    TypeTagSigner,
    TypeTagStruct,
    TypeTagU8,
    TypeTagU64,
    TypeTagVector,
    GeneralMetadataV0,
    GeneralMetadataVersion0,
    Metadata,
    MetadataGeneralMetadata,
    MetadataRefundMetadata,
    MetadataUndefined,
    MetadataUnstructuredBytesMetadata,
    RefundMetadataV0,
    RefundMetadataVersion0,
    RefundReasonInvalidSubaddress,
    RefundReasonUserInitiatedFullRefund,
    UnstructuredBytesMetadata,
    bcs_deserialize_metadata,
    bcs_deserialize_transaction_payload,
    deserialize_transaction_argument,
)
from diem_client.codec import BcsDeserializer

CORE = b"\x00" * 15 + b"\x01"


class TestTypeTags:
    """Test TypeTag encodings"""

    def test_primitive_variant_indices(self):
        assert TypeTagBool().bcs_serialize() == b"\x00"
        assert TypeTagU8().bcs_serialize() == b"\x01"
        assert TypeTagU64().bcs_serialize() == b"\x02"
        assert TypeTagSigner().bcs_serialize() == b"\x05"

    def test_vector(self):
        tag = TypeTagVector(value=TypeTagU8())
        assert tag.bcs_serialize() == b"\x06\x01"

    def test_struct(self, xus):
        expected = b"\x07" + CORE + b"\x03XUS" + b"\x03XUS" + b"\x00"
        assert xus.bcs_serialize() == expected
        assert TypeTagStruct.bcs_deserialize(expected) == xus

    def test_struct_with_type_params(self):
        tag = TypeTagStruct(value=StructTag(
            address=CORE_CODE_ADDRESS, module="Diem", name="Diem", type_params=[TypeTagU64()],
        ))
        data = tag.bcs_serialize()
        assert data.endswith(b"\x01\x02")
        assert TypeTagStruct.bcs_deserialize(data) == tag

    def test_parse_from_python(self):
        adapter = TypeAdapter(TypeTag)
        tag = adapter.validate_python({"type": "vector", "value": {"type": "u8"}})
        assert tag == TypeTagVector(value=TypeTagU8())

    def test_struct_tag_alias(self):
        tag = StructTag(address=CORE_CODE_ADDRESS, module="XUS", name="XUS", typeParams=[TypeTagBool()])
        assert tag.type_params == [TypeTagBool()]


class TestTransactionArguments:
    """Test tagged legacy arguments"""

    def test_encodings(self, payee):
        assert TransactionArgumentU8(value=7).bcs_serialize() == b"\x00\x07"
        assert TransactionArgumentU64(value=1000).bcs_serialize() == b"\x01" + (1000).to_bytes(8, "little")
        assert TransactionArgumentU128(value=1).bcs_serialize() == b"\x02" + (1).to_bytes(16, "little")
        assert TransactionArgumentAddress(value=payee).bcs_serialize() == b"\x03" + payee.to_bytes()
        assert TransactionArgumentU8Vector(value=b"ab").bcs_serialize() == b"\x04\x02ab"
        assert TransactionArgumentBool(value=True).bcs_serialize() == b"\x05\x01"

    def test_deserialize_dispatches_on_variant(self):
        arg = deserialize_transaction_argument(BcsDeserializer(b"\x05\x00"))
        assert arg == TransactionArgumentBool(value=False)

    def test_unknown_variant(self):
        with pytest.raises(UnmarshalError, match="Unknown variant index"):
            deserialize_transaction_argument(BcsDeserializer(b"\x09"))

    def test_strict_values(self):
        with pytest.raises(ValidationError):
            TransactionArgumentU64(value=-1)
        with pytest.raises(ValidationError):
            TransactionArgumentU64(value=1 << 64)
        with pytest.raises(ValidationError):
            TransactionArgumentU64(value=True)
        with pytest.raises(ValidationError):
            TransactionArgumentBool(value=1)
        with pytest.raises(ValidationError):
            TransactionArgumentU8Vector(value="ab")


class TestScript:
    """Test the legacy Script payload"""

    def test_layout(self):
        script = Script(code=b"\x01\x02", ty_args=[TypeTagBool()], args=[TransactionArgumentU8(value=7)])
        assert script.bcs_serialize() == b"\x02\x01\x02" + b"\x01\x00" + b"\x01\x00\x07"

    def test_roundtrip_and_hex(self, payee, xus):
        script = Script(
            code=b"\xa1\x1c\xeb\x0b",
            ty_args=[xus],
            args=[TransactionArgumentAddress(value=payee), TransactionArgumentU8Vector(value=b"")],
        )
        assert Script.bcs_deserialize(script.bcs_serialize()) == script
        assert Script.from_hex(script.to_hex()) == script

    def test_trailing_bytes_rejected(self):
        data = Script(code=b"\x01").bcs_serialize()
        with pytest.raises(UnmarshalError, match="not read"):
            Script.bcs_deserialize(data + b"\x00")

    def test_alias(self):
        script = Script(code=b"", tyArgs=[TypeTagU8()])
        assert script.ty_args == [TypeTagU8()]


class TestScriptFunction:
    """Test the ScriptFunction payload and ModuleId"""

    def test_module_id_layout(self):
        module = ModuleId(address=CORE_CODE_ADDRESS, name="PaymentScripts")
        assert module.bcs_serialize() == CORE + b"\x0ePaymentScripts"

    def test_layout(self):
        function = ScriptFunction(
            module=ModuleId(address=CORE_CODE_ADDRESS, name="M"),
            function="f",
            ty_args=[TypeTagU8()],
            args=[b"\x01", b""],
        )
        assert function.bcs_serialize() == CORE + b"\x01M" + b"\x01f" + b"\x01\x01" + b"\x02\x01\x01\x00"
        assert ScriptFunction.bcs_deserialize(function.bcs_serialize()) == function


class TestTransactionPayload:
    """Test TransactionPayload variants"""

    def test_variant_indices(self):
        script = Script(code=b"\x01")
        function = ScriptFunction(module=ModuleId(address=CORE_CODE_ADDRESS, name="M"), function="f")
        assert TransactionPayloadScript(value=script).bcs_serialize()[0] == 1
        assert TransactionPayloadModule(code=b"\x00").bcs_serialize()[0] == 2
        assert TransactionPayloadScriptFunction(value=function).bcs_serialize()[0] == 3

    def test_roundtrip_each_variant(self):
        payloads = [
            TransactionPayloadScript(value=Script(code=b"\x01", args=[TransactionArgumentBool(value=True)])),
            TransactionPayloadModule(code=b"\xa1\x1c"),
            TransactionPayloadScriptFunction(value=ScriptFunction(
                module=ModuleId(address=AccountAddress(b"\x05" * 16), name="M"), function="f", args=[b"\x00"],
            )),
        ]
        for payload in payloads:
            assert bcs_deserialize_transaction_payload(payload.bcs_serialize()) == payload

    def test_write_set_variant_unsupported(self):
        with pytest.raises(UnmarshalError, match="Unknown variant index"):
            bcs_deserialize_transaction_payload(b"\x00")


class TestMetadata:
    """Test the transaction Metadata union"""

    def test_undefined(self):
        assert MetadataUndefined().bcs_serialize() == b"\x00"
        assert bcs_deserialize_metadata(b"\x00") == MetadataUndefined()

    def test_general_metadata_options(self):
        metadata = MetadataGeneralMetadata(value=GeneralMetadataVersion0(value=GeneralMetadataV0(
            to_subaddress=b"\x01" * 8, referenced_event=2,
        )))
        data = metadata.bcs_serialize()
        assert data == b"\x01\x00" + b"\x01\x08" + b"\x01" * 8 + b"\x00" + b"\x01" + (2).to_bytes(8, "little")
        assert bcs_deserialize_metadata(data) == metadata

    def test_unstructured_bytes(self):
        metadata = MetadataUnstructuredBytesMetadata(value=UnstructuredBytesMetadata(metadata=b"memo"))
        assert metadata.bcs_serialize() == b"\x03\x01\x04memo"
        assert MetadataUnstructuredBytesMetadata(value=UnstructuredBytesMetadata()).bcs_serialize() == b"\x03\x00"

    def test_refund_metadata(self):
        metadata = MetadataRefundMetadata(value=RefundMetadataVersion0(value=RefundMetadataV0(
            transaction_version=9, reason=RefundReasonInvalidSubaddress(),
        )))
        data = metadata.bcs_serialize()
        assert data == b"\x04\x00" + (9).to_bytes(8, "little") + b"\x01"
        assert bcs_deserialize_metadata(data) == metadata
        assert MetadataRefundMetadata.bcs_deserialize(data) == metadata

    def test_refund_reasons(self):
        data = b"\x04\x00" + bytes(8) + b"\x03"
        assert isinstance(bcs_deserialize_metadata(data).value.value.reason, RefundReasonUserInitiatedFullRefund)
        with pytest.raises(UnmarshalError, match="Unknown variant index for RefundReason"):
            bcs_deserialize_metadata(b"\x04\x00" + bytes(8) + b"\x04")

    def test_unknown_version(self):
        with pytest.raises(UnmarshalError, match="Unknown variant index for GeneralMetadata"):
            bcs_deserialize_metadata(b"\x01\x01")

    def test_invalid_option_tag(self):
        with pytest.raises(UnmarshalError, match="Invalid option tag"):
            bcs_deserialize_metadata(b"\x03\x02")

    def test_trailing_bytes(self):
        with pytest.raises(UnmarshalError, match="not read"):
            bcs_deserialize_metadata(b"\x00\x00")

    def test_parse_from_json_with_aliases(self):
        metadata = TypeAdapter(Metadata).validate_python({
            "type": "generalMetadata",
            "value": {"type": "generalMetadataVersion0", "value": {"fromSubaddress": b"\x02" * 8}},
        })
        assert metadata.value.value.from_subaddress == b"\x02" * 8
        assert metadata.value.value.to_subaddress is None
