"""
Transaction metadata builders.

Payments through ``peer_to_peer_with_metadata`` carry a BCS-encoded
``Metadata`` value identifying the sub-accounts involved (general metadata)
or an off-chain reference for transfers above the travel rule threshold.
"""

from typing import Optional, Tuple, Union

from .codec.options import BcsOptions
from .codec.writer import BcsSerializer
from .runtime.address import AccountAddress
from .runtime.errors import UnmarshalError
from .types import (
    GeneralMetadataV0,
    GeneralMetadataVersion0,
    MetadataGeneralMetadata,
    MetadataTravelRuleMetadata,
    TravelRuleMetadataV0,
    TravelRuleMetadataVersion0,
    bcs_deserialize_metadata,
)

SUB_ADDRESS_LENGTH = 8
TRAVEL_RULE_ATTEST_SUFFIX = b"@@$$DIEM_ATTEST$$@@"


def make_sub_address(value: Union[bytes, bytearray, str]) -> bytes:
    """
    Validate a sub-address given as raw bytes or a hex string.

    Raises:
        ValueError: If the value is not valid hex or not 8 bytes long
    """
    if isinstance(value, str):
        try:
            value = bytes.fromhex(value)
        except ValueError as e:
            raise ValueError(f"Invalid hex sub-address: {value!r}") from e
    if not isinstance(value, (bytes, bytearray)):
        raise ValueError(f"Invalid sub-address: {value!r}")
    if len(value) != SUB_ADDRESS_LENGTH:
        raise ValueError(
            f"Sub-address should be {SUB_ADDRESS_LENGTH} bytes, but given {len(value)} bytes"
        )
    return bytes(value)


def _general_metadata(from_sub_address: Optional[bytes], to_sub_address: Optional[bytes],
                      referenced_event: Optional[int] = None) -> MetadataGeneralMetadata:
    return MetadataGeneralMetadata(value=GeneralMetadataVersion0(value=GeneralMetadataV0(
        from_subaddress=from_sub_address,
        to_subaddress=to_sub_address,
        referenced_event=referenced_event,
    )))


def new_travel_rule_metadata(off_chain_reference_id: str, sender: AccountAddress,
                             amount: int) -> Tuple[bytes, bytes]:
    """
    Build travel rule metadata for a transfer between two custodial accounts.

    Args:
        off_chain_reference_id: Reference agreed off-chain by both parties
        sender: Sending account address
        amount: Transfer amount

    Returns:
        The metadata bytes, and the message the receiver signs to produce
        ``metadata_signature``
    """
    metadata = MetadataTravelRuleMetadata(value=TravelRuleMetadataVersion0(
        value=TravelRuleMetadataV0(off_chain_reference_id=off_chain_reference_id)
    ))
    serializer = BcsSerializer()
    metadata.serialize(serializer)
    serializer.fixed_bytes(sender.to_bytes())
    serializer.u64(amount)
    signing_message = serializer.to_bytes() + TRAVEL_RULE_ATTEST_SUFFIX
    return metadata.bcs_serialize(), signing_message


def new_general_metadata_to_subaddress(to_sub_address: Union[bytes, str]) -> bytes:
    """Metadata for a payment from a non-custodial account into a custodial sub-account."""
    return _general_metadata(None, make_sub_address(to_sub_address)).bcs_serialize()


def new_general_metadata_from_subaddress(from_sub_address: Union[bytes, str]) -> bytes:
    """Metadata for a payment from a custodial sub-account to a non-custodial account."""
    return _general_metadata(make_sub_address(from_sub_address), None).bcs_serialize()


def new_general_metadata_with_from_to_subaddresses(from_sub_address: Union[bytes, str],
                                                   to_sub_address: Union[bytes, str]) -> bytes:
    """Metadata for a payment between two custodial sub-accounts under the travel rule threshold."""
    return _general_metadata(
        make_sub_address(from_sub_address), make_sub_address(to_sub_address)
    ).bcs_serialize()


def decode_event_metadata(metadata_hex: str, options: Optional[BcsOptions] = None):
    """
    Decode the hex metadata of a payment event.

    Returns:
        The Metadata value, or None if the event carries no metadata

    Raises:
        UnmarshalError: If the value is not hex or not a valid Metadata encoding
    """
    if not metadata_hex:
        return None
    try:
        data = bytes.fromhex(metadata_hex)
    except ValueError as e:
        raise UnmarshalError("Decode event metadata failed", cause=e) from e
    return bcs_deserialize_metadata(data, options)


def new_refund_metadata(event_sequence_number: int, metadata: MetadataGeneralMetadata) -> bytes:
    """
    Build general metadata refunding a received payment.

    The sub-addresses of the received payment are swapped and the payment
    event is referenced by its sequence number. Payments made with travel
    rule metadata are refunded as ordinary transfers instead.

    Raises:
        ValueError: If ``metadata`` is not general metadata
    """
    if not isinstance(metadata, MetadataGeneralMetadata):
        raise ValueError(f"Refund needs general metadata, got {type(metadata).__name__}")
    received = metadata.value.value
    return _general_metadata(
        received.to_subaddress, received.from_subaddress, event_sequence_number
    ).bcs_serialize()


__all__ = [
    "SUB_ADDRESS_LENGTH",
    "TRAVEL_RULE_ATTEST_SUFFIX",
    "make_sub_address",
    "new_travel_rule_metadata",
    "new_general_metadata_to_subaddress",
    "new_general_metadata_from_subaddress",
    "new_general_metadata_with_from_to_subaddresses",
    "decode_event_metadata",
    "new_refund_metadata",
]
