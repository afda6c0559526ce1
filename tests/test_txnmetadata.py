"""
Transaction metadata builder tests.

Expected encodings are the published Diem client vectors.
"""

import pytest

from diem_client.runtime.address import AccountAddress
from diem_client.runtime.errors import UnmarshalError
from diem_client.stdlib import PeerToPeerWithMetadata, decode_script, encode_script
from diem_client.txnmetadata import (
    decode_event_metadata,
    make_sub_address,
    new_general_metadata_from_subaddress,
    new_general_metadata_to_subaddress,
    new_general_metadata_with_from_to_subaddresses,
    new_refund_metadata,
    new_travel_rule_metadata,
)
from diem_client.types import (
    GeneralMetadataV0,
    MetadataGeneralMetadata,
    MetadataTravelRuleMetadata,
    MetadataUndefined,
    bcs_deserialize_metadata,
)

SUB_ADDRESS = "8f8b82153010a1bd"
OTHER_SUB_ADDRESS = "111111153010a111"


class TestTravelRuleMetadata:
    """Test travel rule metadata and its signing message"""

    def test_metadata_and_signing_message(self):
        sender = AccountAddress.from_hex("f72589b71ff4f8d139674a3f7369c69b")
        metadata, signing_message = new_travel_rule_metadata("off chain reference id", sender, 1000)

        assert metadata.hex() == "020001166f666620636861696e207265666572656e6365206964"
        assert signing_message.hex() == (
            "020001166f666620636861696e207265666572656e6365206964"
            "f72589b71ff4f8d139674a3f7369c69b"
            "e803000000000000"
            "404024244449454d5f41545445535424244040"
        )

    def test_metadata_decodes(self, payee):
        metadata, _ = new_travel_rule_metadata("ref-1", payee, 5)
        decoded = bcs_deserialize_metadata(metadata)
        assert isinstance(decoded, MetadataTravelRuleMetadata)
        assert decoded.value.value.off_chain_reference_id == "ref-1"


class TestGeneralMetadata:
    """Test sub-address metadata builders"""

    def test_to_subaddress(self):
        assert new_general_metadata_to_subaddress(SUB_ADDRESS).hex() == "010001088f8b82153010a1bd0000"

    def test_from_subaddress(self):
        assert new_general_metadata_from_subaddress(SUB_ADDRESS).hex() == "01000001088f8b82153010a1bd00"

    def test_from_and_to_subaddresses(self):
        data = new_general_metadata_with_from_to_subaddresses(SUB_ADDRESS, OTHER_SUB_ADDRESS)
        assert data.hex() == "01000108111111153010a11101088f8b82153010a1bd00"

    def test_raw_bytes_accepted(self):
        assert new_general_metadata_to_subaddress(bytes.fromhex(SUB_ADDRESS)) == \
            new_general_metadata_to_subaddress(SUB_ADDRESS)

    @pytest.mark.parametrize("value", ["8f8b", b"\x00" * 9, "zz" * 8, 12345])
    def test_invalid_sub_address(self, value):
        with pytest.raises(ValueError):
            make_sub_address(value)

    def test_metadata_fits_transfer_call(self, xus, payee):
        call = PeerToPeerWithMetadata(
            currency=xus, payee=payee, amount=10,
            metadata=new_general_metadata_to_subaddress(SUB_ADDRESS), metadata_signature=b"",
        )
        assert decode_script(encode_script(call)) == call


class TestRefundMetadata:
    """Test refunds built from a received payment's metadata"""

    def test_swaps_sub_addresses_and_references_event(self):
        received = bytes(range(1, 9))
        sent = bytes(range(8, 0, -1))
        event_metadata = new_general_metadata_with_from_to_subaddresses(received, sent).hex()

        data = new_refund_metadata(123, decode_event_metadata(event_metadata))

        refund = bcs_deserialize_metadata(data)
        assert refund.value.value == GeneralMetadataV0(
            from_subaddress=sent, to_subaddress=received, referenced_event=123,
        )
        assert data.hex() == "0100" + "0108" + received.hex() + "0108" + sent.hex() + "01" + "7b00000000000000"

    def test_one_sided_metadata(self):
        event_metadata = new_general_metadata_from_subaddress(SUB_ADDRESS)
        refund = bcs_deserialize_metadata(new_refund_metadata(7, bcs_deserialize_metadata(event_metadata)))
        assert refund.value.value == GeneralMetadataV0(
            to_subaddress=bytes.fromhex(SUB_ADDRESS), referenced_event=7,
        )

    def test_travel_rule_metadata_rejected(self, payee):
        metadata, _ = new_travel_rule_metadata("ref", payee, 1)
        with pytest.raises(ValueError, match="general metadata"):
            new_refund_metadata(1, bcs_deserialize_metadata(metadata))

    def test_missing_metadata_rejected(self):
        with pytest.raises(ValueError, match="general metadata"):
            new_refund_metadata(1, None)


class TestEventMetadata:
    """Test decoding of payment event metadata"""

    def test_empty_is_none(self):
        assert decode_event_metadata("") is None

    def test_general_metadata(self):
        decoded = decode_event_metadata(new_general_metadata_to_subaddress(SUB_ADDRESS).hex())
        assert isinstance(decoded, MetadataGeneralMetadata)
        assert decoded.value.value.to_subaddress == bytes.fromhex(SUB_ADDRESS)

    def test_undefined(self):
        assert decode_event_metadata("00") == MetadataUndefined()

    def test_invalid_hex(self):
        with pytest.raises(UnmarshalError, match="Decode event metadata failed"):
            decode_event_metadata("0g")

    def test_invalid_encoding(self):
        with pytest.raises(UnmarshalError, match="Unknown variant index for Metadata"):
            decode_event_metadata("09")
