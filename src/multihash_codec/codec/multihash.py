"""
Multihash Codec

Encodes raw digests into the multihash wire format and decodes them back:

    byte 0       : function code (low 8 bits)
    byte 1       : digest length in bytes (0-127)
    bytes 2..N+1 : raw digest

Function codes wider than a byte (the generated blake2 families) are
truncated to their low 8 bits on the wire.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

from pydantic import BaseModel, Field

from ..registry import code_for_name, name_for_code, valid_code
from ..runtime.errors import (
    InconsistentLengthError,
    LengthNotSupportedError,
    NameNotFoundError,
    TooLongError,
    TooShortError,
    UnknownCodeError,
)
from .reader import BinaryReader
from .writer import BinaryWriter

if TYPE_CHECKING:
    from ..runtime.multihash import Multihash

BytesLike = Union[bytes, bytearray, memoryview]

# Wire format limits
MIN_MULTIHASH_LENGTH = 3
MAX_MULTIHASH_LENGTH = 129
MAX_DIGEST_LENGTH = 127


class DecodedMultihash(BaseModel):
    """
    A multihash split into its fields.

    ``name`` is None when the code has no registry entry.
    """

    code: int = Field(ge=0, le=0xFF, description="Function code byte")
    name: Optional[str] = Field(default=None, description="Registered hash function name")
    length: int = Field(ge=0, le=0xFF, description="Digest length byte")
    digest: bytes = Field(description="Raw digest bytes")

    model_config = {"frozen": True}

    @property
    def known(self) -> bool:
        """True if the code is registered."""
        return self.name is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary with the digest in hex."""
        return {
            "code": self.code,
            "name": self.name,
            "length": self.length,
            "digest": self.digest.hex(),
        }


def _as_bytes(buf: Any, what: str) -> bytes:
    if not isinstance(buf, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like, got {type(buf).__name__}")
    return bytes(buf)


def _as_code(code: Any) -> int:
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"code must be int, got {type(code).__name__}")
    return code


def encode(digest: BytesLike, code: int) -> bytes:
    """
    Encode a hash digest along with the specified function code.

    The length byte is derived from the digest itself.

    Args:
        digest: Raw digest bytes (at most 127)
        code: Function code, application-reserved or registered

    Returns:
        Wire bytes ``[code & 0xFF][len(digest)][digest...]``

    Raises:
        UnknownCodeError: If the code is neither application-reserved nor registered
        LengthNotSupportedError: If the digest is longer than 127 bytes
    """
    digest = _as_bytes(digest, "digest")
    code = _as_code(code)

    if not valid_code(code):
        raise UnknownCodeError(f"unknown multihash code: {code:#x}", details={"code": code})

    if len(digest) > MAX_DIGEST_LENGTH:
        raise LengthNotSupportedError(details={"length": len(digest)})

    writer = BinaryWriter()
    writer.u8(code)
    writer.u8(len(digest))
    writer.bytes(digest)
    return writer.to_bytes()


def encode_name(digest: BytesLike, name: str) -> bytes:
    """
    Encode a hash digest using the function registered under ``name``.

    Raises:
        NameNotFoundError: If no hash function is registered under ``name``
    """
    code = code_for_name(name)
    if code is None:
        raise NameNotFoundError(f"unknown multihash function name: {name!r}",
                                details={"name": name})
    return encode(digest, code)


def decode(buf: BytesLike) -> DecodedMultihash:
    """
    Decode wire bytes into their fields.

    Unknown codes decode successfully with ``name=None``; checking the code
    is left to ``cast``.

    Args:
        buf: Wire bytes

    Returns:
        DecodedMultihash with ``length == len(digest)``

    Raises:
        TooShortError: If ``buf`` has fewer than 3 bytes
        TooLongError: If ``buf`` has more than 129 bytes
        InconsistentLengthError: If the length byte disagrees with the digest size
    """
    buf = _as_bytes(buf, "multihash")

    if len(buf) < MIN_MULTIHASH_LENGTH:
        raise TooShortError(details={"length": len(buf)})

    if len(buf) > MAX_MULTIHASH_LENGTH:
        raise TooLongError(details={"length": len(buf)})

    reader = BinaryReader(buf)
    code = reader.u8()
    length = reader.u8()
    decoded = DecodedMultihash(
        code=code,
        name=name_for_code(code),
        length=length,
        digest=reader.rest(),
    )

    if len(decoded.digest) != decoded.length:
        raise InconsistentLengthError(decoded)

    return decoded


def cast(buf: BytesLike) -> "Multihash":
    """
    Validate raw bytes and wrap them as a Multihash.

    Decode failures propagate unchanged.

    Raises:
        UnknownCodeError: If the decoded code is neither application-reserved nor registered
    """
    # Import here to avoid circular imports
    from ..runtime.multihash import Multihash

    decoded = decode(buf)

    if not valid_code(decoded.code):
        raise UnknownCodeError(f"unknown multihash code: {decoded.code:#x}",
                               details={"code": decoded.code})

    return Multihash._from_validated(buf)


__all__ = [
    "DecodedMultihash",
    "MIN_MULTIHASH_LENGTH",
    "MAX_MULTIHASH_LENGTH",
    "MAX_DIGEST_LENGTH",
    "encode",
    "encode_name",
    "decode",
    "cast",
]
