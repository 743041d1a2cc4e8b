"""
Multihash Binary Codec Module

Implements the multihash wire format: a function code byte, a length byte
and the raw digest.

Key components:
- writer.py: Binary writer for header bytes and raw digests
- reader.py: Bounds-checked binary reader
- multihash.py: encode/decode/cast and the DecodedMultihash model
"""

from .multihash import (
    DecodedMultihash,
    MAX_DIGEST_LENGTH,
    MAX_MULTIHASH_LENGTH,
    MIN_MULTIHASH_LENGTH,
    cast,
    decode,
    encode,
    encode_name,
)
from .reader import BinaryReader
from .writer import BinaryWriter

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "DecodedMultihash",
    "MIN_MULTIHASH_LENGTH",
    "MAX_MULTIHASH_LENGTH",
    "MAX_DIGEST_LENGTH",
    "cast",
    "decode",
    "encode",
    "encode_name",
]
