"""
Multihash Error Model

This module provides the error handling framework for the multihash codec.
Every failure of the codec is raised as a subclass of MultihashError carrying
a numeric ErrorCode, so callers can branch on the code or on the class.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, TYPE_CHECKING
from enum import IntEnum

if TYPE_CHECKING:
    from ..codec.multihash import DecodedMultihash


class ErrorCode(IntEnum):
    """Multihash error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1

    # Structural decode errors (100-199)
    TOO_SHORT = 100
    TOO_LONG = 101
    INCONSISTENT_LENGTH = 102
    INVALID_MULTIHASH = 103

    # Encode errors (200-299)
    LENGTH_NOT_SUPPORTED = 200

    # Function code errors (300-399)
    UNKNOWN_CODE = 300
    NAME_NOT_FOUND = 301

    # Text format errors (400-499)
    INVALID_HEX = 400
    INVALID_BASE58 = 401


class MultihashError(Exception):
    """
    Base class for all multihash errors.

    Provides structured error information: a message, an error code,
    optional details and the underlying cause.
    """

    default_code = ErrorCode.UNKNOWN
    default_message = "Multihash error"

    def __init__(self, message: Optional[str] = None, code: Optional[ErrorCode] = None,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a multihash error.

        Args:
            message: Error message (defaults to the class message)
            code: Error code (defaults to the class code)
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
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


class DecodeError(MultihashError):
    """Wire bytes are not a structurally valid multihash."""


class TooShortError(DecodeError):
    """Multihash shorter than the 3-byte minimum."""

    default_code = ErrorCode.TOO_SHORT
    default_message = "multihash too short: must be at least 3 bytes"


class TooLongError(DecodeError):
    """Multihash longer than the 129-byte maximum."""

    default_code = ErrorCode.TOO_LONG
    default_message = "multihash too long: must be at most 129 bytes"


class InconsistentLengthError(DecodeError):
    """
    Length byte disagrees with the number of digest bytes present.

    The partially decoded value is kept on ``decoded`` for diagnostics.
    """

    default_code = ErrorCode.INCONSISTENT_LENGTH
    default_message = "multihash length inconsistent"

    def __init__(self, decoded: "DecodedMultihash", message: Optional[str] = None,
                 cause: Optional[Exception] = None):
        if message is None:
            message = (f"multihash length inconsistent: length byte is {decoded.length}, "
                       f"digest has {len(decoded.digest)} bytes")
        super().__init__(message, details={"decoded": decoded.to_dict()}, cause=cause)
        self.decoded = decoded


class InvalidMultihashError(DecodeError):
    """Input decoded to an empty byte sequence."""

    default_code = ErrorCode.INVALID_MULTIHASH
    default_message = "input isn't valid multihash"


class EncodeError(MultihashError):
    """A digest cannot be encoded."""


class LengthNotSupportedError(EncodeError):
    """Digest longer than 127 bytes."""

    default_code = ErrorCode.LENGTH_NOT_SUPPORTED
    default_message = "multihash does not support digests longer than 127 bytes"


class CodeError(MultihashError):
    """Function code or name cannot be resolved."""


class UnknownCodeError(CodeError):
    """Code is neither application-reserved nor registered."""

    default_code = ErrorCode.UNKNOWN_CODE
    default_message = "unknown multihash code"


class NameNotFoundError(CodeError):
    """Hash function name is not registered."""

    default_code = ErrorCode.NAME_NOT_FOUND
    default_message = "unknown multihash function name"


class TextFormatError(MultihashError):
    """Text form of a multihash cannot be converted to bytes."""


class InvalidHexError(TextFormatError):
    """Malformed hexadecimal text."""

    default_code = ErrorCode.INVALID_HEX
    default_message = "invalid hex string"


class InvalidBase58Error(TextFormatError):
    """Malformed base-58 text."""

    default_code = ErrorCode.INVALID_BASE58
    default_message = "invalid base58 string"


_ERRORS_BY_CODE = {
    ErrorCode.TOO_SHORT: TooShortError,
    ErrorCode.TOO_LONG: TooLongError,
    ErrorCode.INVALID_MULTIHASH: InvalidMultihashError,
    ErrorCode.LENGTH_NOT_SUPPORTED: LengthNotSupportedError,
    ErrorCode.UNKNOWN_CODE: UnknownCodeError,
    ErrorCode.NAME_NOT_FOUND: NameNotFoundError,
    ErrorCode.INVALID_HEX: InvalidHexError,
    ErrorCode.INVALID_BASE58: InvalidBase58Error,
}


def error_from_dict(data: Dict[str, Any]) -> MultihashError:
    """
    Create an appropriate error from its dictionary representation.

    Inconsistent-length errors cannot be rebuilt without their decoded
    value and come back as a plain DecodeError with the same code.

    Args:
        data: Dictionary produced by MultihashError.to_dict()

    Returns:
        Error instance of the class matching the code
    """
    message = data.get("message")
    details = data.get("details")

    try:
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
    except ValueError:
        code = ErrorCode.UNKNOWN

    error_cls = _ERRORS_BY_CODE.get(code)
    if error_cls is not None:
        return error_cls(message, details=details)
    if code == ErrorCode.INCONSISTENT_LENGTH:
        return DecodeError(message, code, details)
    return MultihashError(message, code, details)


__all__ = [
    "ErrorCode",
    "MultihashError",
    "DecodeError",
    "TooShortError",
    "TooLongError",
    "InconsistentLengthError",
    "InvalidMultihashError",
    "EncodeError",
    "LengthNotSupportedError",
    "CodeError",
    "UnknownCodeError",
    "NameNotFoundError",
    "TextFormatError",
    "InvalidHexError",
    "InvalidBase58Error",
    "error_from_dict",
]
