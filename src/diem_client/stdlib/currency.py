"""Currency type descriptors."""

from ..runtime.address import CORE_CODE_ADDRESS
from ..types import StructTag, TypeTagStruct


def currency_type_tag(code: str) -> TypeTagStruct:
    """
    Build the type descriptor for a currency, e.g. ``XUS``.

    Currencies are published at the core code address as ``0x1::<code>::<code>``.
    """
    if not code:
        raise ValueError("Currency code must not be empty")
    return TypeTagStruct(value=StructTag(address=CORE_CODE_ADDRESS, module=code, name=code))
