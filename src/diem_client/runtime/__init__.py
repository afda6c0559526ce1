"""Runtime helpers for the Diem client SDK"""

from .address import AccountAddress, CORE_CODE_ADDRESS
from .errors import DiemError

__all__ = [
    "AccountAddress",
    "CORE_CODE_ADDRESS",
    "DiemError",
]
