"""
Shared fixtures for the Diem script codec tests.
"""

import pytest

from diem_client.runtime.address import AccountAddress
from diem_client.stdlib import STDLIB_CATALOG, PeerToPeerWithMetadata, currency_type_tag
from diem_client.types import TypeTagU64, TypeTagVector


@pytest.fixture
def payee():
    """A deterministic non-core account address."""
    return AccountAddress.from_hex("ab" * 16)


@pytest.fixture
def other_address():
    return AccountAddress(bytes(range(16)))


@pytest.fixture
def xus():
    """Type descriptor for the XUS currency."""
    return currency_type_tag("XUS")


@pytest.fixture
def vector_type_tag():
    return TypeTagVector(value=TypeTagU64())


@pytest.fixture
def transfer_call(payee, xus):
    """A peer-to-peer transfer of 1000 XUS with empty metadata."""
    return PeerToPeerWithMetadata(
        currency=xus,
        payee=payee,
        amount=1000,
        metadata=b"",
        metadata_signature=b"",
    )


@pytest.fixture
def catalog():
    return STDLIB_CATALOG
