"""
AccountAddress Pydantic custom type for Diem account addresses.
"""

from typing import Any, Union
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

ACCOUNT_ADDRESS_LENGTH = 16


class AccountAddress:
    """Custom Pydantic type for fixed-length Diem account addresses."""

    LENGTH = ACCOUNT_ADDRESS_LENGTH

    def __init__(self, value: Union[bytes, bytearray]):
        if not isinstance(value, (bytes, bytearray)):
            raise ValueError("AccountAddress must be bytes")
        if len(value) != ACCOUNT_ADDRESS_LENGTH:
            raise ValueError(
                f"Account address should be {ACCOUNT_ADDRESS_LENGTH} bytes, but given {len(value)} bytes"
            )
        self._value = bytes(value)

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"AccountAddress('{self.hex()}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, AccountAddress):
            return self._value == other._value
        return False

    def __hash__(self) -> int:
        return hash(self._value)

    def __bytes__(self) -> bytes:
        return self._value

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the AccountAddress."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda address: address.hex(), when_used="json"
            ),
        )

    @classmethod
    def _validate(cls, value: Any, _info=None) -> "AccountAddress":
        """Validate and convert the input to an AccountAddress."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(value)
        if isinstance(value, str):
            return cls.from_hex(value)
        raise ValueError(f"Invalid AccountAddress: {value!r}")

    @classmethod
    def from_hex(cls, address: str) -> "AccountAddress":
        """Create an account address from a hex string, with or without ``0x``."""
        if address.startswith(("0x", "0X")):
            address = address[2:]
        try:
            raw = bytes.fromhex(address)
        except ValueError as e:
            raise ValueError(f"Invalid hex account address: {address!r}") from e
        return cls(raw)

    @classmethod
    def from_short_hex(cls, address: str) -> "AccountAddress":
        """Create an address from a short hex literal such as ``0x1``, left-padding with zeros."""
        if address.startswith(("0x", "0X")):
            address = address[2:]
        if len(address) > ACCOUNT_ADDRESS_LENGTH * 2:
            raise ValueError(f"Address literal too long: {address!r}")
        return cls.from_hex(address.rjust(ACCOUNT_ADDRESS_LENGTH * 2, "0"))

    def hex(self) -> str:
        """Return the lowercase hex encoding of the address."""
        return self._value.hex()

    def to_bytes(self) -> bytes:
        """Convert the address to its raw bytes."""
        return self._value


CORE_CODE_ADDRESS = AccountAddress.from_short_hex("0x1")
