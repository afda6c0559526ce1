"""
Diem Client Error Model

This module provides the error handling framework for the Diem client SDK.
Decode failures are raised to the immediate caller as typed exceptions that
carry enough context (identity, expected vs actual counts and types) to be
diagnosed without re-deriving codec state.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Diem client error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_BINARY = 102
    MARSHAL_ERROR = 103
    UNMARSHAL_ERROR = 104

    # Script decoding errors (200-299)
    DECODE_ERROR = 200
    UNKNOWN_OPERATION = 201
    ARITY_MISMATCH = 202
    ARGUMENT_TYPE_MISMATCH = 203

    # Catalog defects (900-999)
    CATALOG_ERROR = 900


class DiemError(Exception):
    """
    Base class for all Diem client errors.

    Provides structured error information: a code, a message and a details
    mapping holding the values needed to diagnose the failure.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Diem error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EncodingError(DiemError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class MarshalError(EncodingError):
    """BCS serialization error."""

    def __init__(self, message: str = "Marshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MARSHAL_ERROR, details, cause)


class UnmarshalError(EncodingError):
    """BCS deserialization error."""

    def __init__(self, message: str = "Unmarshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNMARSHAL_ERROR, details, cause)


class DecodeError(EncodingError):
    """A wire payload could not be recognized as a structured call."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DECODE_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UnknownOperation(DecodeError):
    """The payload identity matches no catalog entry."""

    def __init__(self, identity: Any, details: Optional[Dict[str, Any]] = None):
        self.identity = identity
        super().__init__(
            f"Unknown operation: {_describe_identity(identity)}",
            ErrorCode.UNKNOWN_OPERATION,
            {"identity": _describe_identity(identity), **(details or {})},
        )


class ArityMismatch(DecodeError):
    """
    The payload carries a different number of arguments than declared.

    ``kind`` is ``"type"`` for the type-parameter list and ``"value"`` for
    the value-argument list.
    """

    def __init__(self, expected: int, actual: int, kind: str = "value",
                 operation: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.kind = kind
        self.operation = operation
        details: Dict[str, Any] = {"kind": kind, "expected": expected, "actual": actual}
        if operation:
            details["operation"] = operation
        super().__init__(
            f"Was expecting {expected} {kind} arguments, got {actual}",
            ErrorCode.ARITY_MISMATCH,
            details,
        )


class ArgumentTypeMismatch(DecodeError):
    """A positional wire value does not have the declared semantic type."""

    def __init__(self, expected_type: Any, position: Optional[int] = None,
                 actual: Optional[str] = None, operation: Optional[str] = None,
                 cause: Optional[Exception] = None):
        self.expected_type = expected_type
        self.position = position
        self.actual = actual
        self.operation = operation
        expected_name = getattr(expected_type, "name", str(expected_type))
        details: Dict[str, Any] = {"expected_type": expected_name}
        if position is not None:
            details["position"] = position
        if actual is not None:
            details["actual"] = actual
        if operation:
            details["operation"] = operation
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Was expecting a {expected_name} argument{where}",
            ErrorCode.ARGUMENT_TYPE_MISMATCH,
            details,
            cause,
        )

    def at(self, position: int, operation: Optional[str] = None) -> "ArgumentTypeMismatch":
        """Return a copy of this error pinned to an argument position."""
        return ArgumentTypeMismatch(self.expected_type, position, self.actual, operation, self.cause)


class CatalogError(DiemError):
    """
    The operation catalog is inconsistent.

    Raised while the catalog is being built, or when a structured call has no
    catalog entry. Either case is a programming defect, not a runtime
    condition, and is not meant to be handled.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CATALOG_ERROR, details)


def _describe_identity(identity: Any) -> str:
    if isinstance(identity, (bytes, bytearray)):
        return bytes(identity).hex()
    if isinstance(identity, tuple):
        return "::".join(str(part) for part in identity)
    return str(identity)


__all__ = [
    "ErrorCode",
    "DiemError",
    "EncodingError",
    "MarshalError",
    "UnmarshalError",
    "DecodeError",
    "UnknownOperation",
    "ArityMismatch",
    "ArgumentTypeMismatch",
    "CatalogError",
]
