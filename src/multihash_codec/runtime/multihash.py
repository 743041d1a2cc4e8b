"""
Multihash bytes type with text conversions and Pydantic support.
"""

from __future__ import annotations
import binascii
from typing import Any, Optional

import base58
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..codec.multihash import BytesLike, DecodedMultihash, cast, decode, encode, encode_name
from .errors import InvalidBase58Error, InvalidHexError, InvalidMultihashError, MultihashError


class Multihash(bytes):
    """
    Validated multihash wire bytes.

    Constructing a Multihash always validates its contents: the bytes decode
    cleanly and carry an application-reserved or registered code.
    """

    def __new__(cls, value: BytesLike) -> "Multihash":
        return cast(value)

    @classmethod
    def _from_validated(cls, buf: BytesLike) -> "Multihash":
        return bytes.__new__(cls, buf)

    @classmethod
    def cast(cls, buf: BytesLike) -> "Multihash":
        """Validate raw bytes and wrap them as a Multihash."""
        return cast(buf)

    @classmethod
    def encode(cls, digest: BytesLike, code: int) -> "Multihash":
        """
        Encode a digest under a function code and validate the result.

        Empty digests and wide codes whose low byte is not a valid code
        fail here even though the plain codec ``encode`` accepts them.
        """
        return cast(encode(digest, code))

    @classmethod
    def encode_name(cls, digest: BytesLike, name: str) -> "Multihash":
        """Encode a digest under a registered hash function name and validate the result."""
        return cast(encode_name(digest, name))

    def decoded(self) -> DecodedMultihash:
        """Split the wire bytes into code, name, length and digest."""
        return decode(self)

    @property
    def code(self) -> int:
        return self[0]

    @property
    def name(self) -> Optional[str]:
        return self.decoded().name

    @property
    def length(self) -> int:
        return self[1]

    @property
    def digest(self) -> bytes:
        return bytes(self[2:])

    # Hex

    def hex_string(self) -> str:
        """Lowercase hexadecimal encoding of the wire bytes."""
        return self.hex()

    @classmethod
    def from_hex_string(cls, s: str) -> "Multihash":
        """
        Parse a Multihash from hexadecimal text.

        Args:
            s: Hex string without separators

        Returns:
            Validated Multihash

        Raises:
            InvalidHexError: If ``s`` is not valid hex
            MultihashError: If the decoded bytes are not a valid multihash
        """
        if not isinstance(s, str):
            raise TypeError(f"hex string must be str, got {type(s).__name__}")
        try:
            buf = binascii.unhexlify(s)
        except (binascii.Error, ValueError) as e:
            raise InvalidHexError(f"invalid hex string: {e}", details={"value": s}, cause=e) from e
        return cast(buf)

    # Base58

    def b58_string(self) -> str:
        """Base-58 (Bitcoin alphabet) encoding of the wire bytes."""
        return base58.b58encode(bytes(self)).decode("ascii")

    @classmethod
    def from_b58_string(cls, s: str) -> "Multihash":
        """
        Parse a Multihash from base-58 text.

        Args:
            s: Base-58 string (Bitcoin alphabet)

        Returns:
            Validated Multihash

        Raises:
            InvalidBase58Error: If ``s`` contains characters outside the alphabet
            InvalidMultihashError: If ``s`` decodes to no bytes at all
            MultihashError: If the decoded bytes are not a valid multihash
        """
        if not isinstance(s, str):
            raise TypeError(f"base58 string must be str, got {type(s).__name__}")
        # b58decode strips trailing whitespace; reject it like the hex parser does
        if any(c.isspace() for c in s):
            raise InvalidBase58Error("invalid base58 string: contains whitespace", details={"value": s})
        try:
            buf = base58.b58decode(s)
        except ValueError as e:
            raise InvalidBase58Error(f"invalid base58 string: {e}", details={"value": s}, cause=e) from e
        if len(buf) == 0:
            raise InvalidMultihashError()
        return cast(buf)

    def __str__(self) -> str:
        return self.hex_string()

    def __repr__(self) -> str:
        return f"Multihash('{self.hex_string()}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates and serializes a Multihash."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.hex_string()
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "Multihash":
        """Validate and convert the input to a Multihash (hex for str input)."""
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                return cls.from_hex_string(value)
            if isinstance(value, (bytes, bytearray, memoryview)):
                return cast(value)
        except MultihashError as e:
            raise ValueError(str(e)) from e
        raise ValueError(f"Invalid Multihash: {value!r}")


__all__ = ["Multihash"]
