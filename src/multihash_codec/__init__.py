"""
multihash-codec - self-describing hash digests

Tags raw hash digests with a function code and a length byte so a consumer
can tell which hash function produced a digest without external metadata.
Digests themselves are supplied by the caller; nothing here computes hashes.
"""

# Registry (must be importable before the codec)
from .registry import (
    HashCode, HashFunction,
    BLAKE2B_MIN, BLAKE2B_MAX, BLAKE2S_MIN, BLAKE2S_MAX, APP_CODE_LIMIT,
    NAMES, CODES, DEFAULT_LENGTHS,
    code_for_name, name_for_code, default_length_for_code,
    is_known_code, is_app_code, valid_code,
    get_hash_function, all_hash_functions,
)

# Codec
from .codec import (
    DecodedMultihash,
    MIN_MULTIHASH_LENGTH, MAX_MULTIHASH_LENGTH, MAX_DIGEST_LENGTH,
    encode, encode_name, decode, cast,
)

# Surface type and errors
from .runtime.multihash import Multihash
from .runtime.errors import *

__version__ = "1.0.0"
__all__ = [
    # Registry
    "HashCode",
    "HashFunction",
    "BLAKE2B_MIN",
    "BLAKE2B_MAX",
    "BLAKE2S_MIN",
    "BLAKE2S_MAX",
    "APP_CODE_LIMIT",
    "NAMES",
    "CODES",
    "DEFAULT_LENGTHS",
    "code_for_name",
    "name_for_code",
    "default_length_for_code",
    "is_known_code",
    "is_app_code",
    "valid_code",
    "get_hash_function",
    "all_hash_functions",

    # Codec
    "DecodedMultihash",
    "MIN_MULTIHASH_LENGTH",
    "MAX_MULTIHASH_LENGTH",
    "MAX_DIGEST_LENGTH",
    "encode",
    "encode_name",
    "decode",
    "cast",

    # Surface type
    "Multihash",

    # Errors
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
