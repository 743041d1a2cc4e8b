"""
Hash function registry for multihash codes.

Provides the canonical mapping between hash function names, numeric
function codes and default digest lengths. The fixed entries are listed
explicitly; the blake2b and blake2s families are generated from their
code ranges.

The table is built once at import time and only exposed through
read-only views and lookup functions.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class HashCode(IntEnum):
    """Function codes of the fixed registry entries."""

    SHA1 = 0x11
    SHA2_256 = 0x12
    SHA2_512 = 0x13
    SHA3 = 0x14
    DBL_SHA2_256 = 0x56


# Generated family ranges (inclusive)
BLAKE2B_MIN = 0xB201
BLAKE2B_MAX = 0xB240
BLAKE2S_MIN = 0xB241
BLAKE2S_MAX = 0xB260

# Codes below this value are reserved for applications
APP_CODE_LIMIT = 0x10


@dataclass(frozen=True)
class HashFunction:
    """A single registry entry."""

    name: str
    code: int
    default_length: int


_FIXED_ENTRIES: Tuple[HashFunction, ...] = (
    HashFunction("sha1", HashCode.SHA1, 20),
    HashFunction("sha2-256", HashCode.SHA2_256, 32),
    HashFunction("sha2-512", HashCode.SHA2_512, 64),
    HashFunction("sha3", HashCode.SHA3, 64),
    HashFunction("dbl-sha2-256", HashCode.DBL_SHA2_256, 32),
)

_GENERATED_FAMILIES: Tuple[Tuple[str, int, int], ...] = (
    ("blake2b", BLAKE2B_MIN, BLAKE2B_MAX),
    ("blake2s", BLAKE2S_MIN, BLAKE2S_MAX),
)


def _family_entries(family: str, first: int, last: int) -> Tuple[HashFunction, ...]:
    """
    Generate the entries of a parameterized hash family.

    Each code in ``first..last`` gets a digest length of
    ``code - first + 1`` bytes and is named after the length in bits,
    e.g. ``blake2b-8`` for ``first`` itself.
    """
    entries = []
    for code in range(first, last + 1):
        n = code - first + 1
        entries.append(HashFunction(f"{family}-{n * 8}", code, n))
    return tuple(entries)


def _build_registry() -> Tuple[Dict[str, HashFunction], Dict[int, HashFunction]]:
    """
    Build the name and code indexes.

    Raises:
        RuntimeError: If two entries share a name or a code
    """
    entries = list(_FIXED_ENTRIES)
    for family, first, last in _GENERATED_FAMILIES:
        entries.extend(_family_entries(family, first, last))

    by_name: Dict[str, HashFunction] = {}
    by_code: Dict[int, HashFunction] = {}
    for entry in entries:
        if entry.name in by_name:
            raise RuntimeError(f"Duplicate hash function name: {entry.name}")
        if entry.code in by_code:
            raise RuntimeError(f"Duplicate hash function code: {entry.code:#x}")
        # Store plain ints so lookups never leak the IntEnum type
        entry = HashFunction(entry.name, int(entry.code), entry.default_length)
        by_name[entry.name] = entry
        by_code[entry.code] = entry

    logger.debug(f"Initialized hash function registry with {len(by_code)} entries")
    return by_name, by_code


_BY_NAME, _BY_CODE = _build_registry()

# Read-only views: name -> code, code -> name, code -> default length
NAMES: Mapping[str, int] = MappingProxyType({e.name: e.code for e in _BY_NAME.values()})
CODES: Mapping[int, str] = MappingProxyType({e.code: e.name for e in _BY_CODE.values()})
DEFAULT_LENGTHS: Mapping[int, int] = MappingProxyType(
    {e.code: e.default_length for e in _BY_CODE.values()}
)


def code_for_name(name: str) -> Optional[int]:
    """Return the function code registered under ``name``, or None."""
    return NAMES.get(name)


def name_for_code(code: int) -> Optional[str]:
    """Return the name registered for ``code``, or None."""
    return CODES.get(code)


def default_length_for_code(code: int) -> Optional[int]:
    """Return the default digest length in bytes for ``code``, or None."""
    return DEFAULT_LENGTHS.get(code)


def is_known_code(code: int) -> bool:
    """Check whether ``code`` has a registry entry."""
    return code in _BY_CODE


def is_app_code(code: int) -> bool:
    """Check whether ``code`` is in the application-reserved range [0, 16)."""
    return 0 <= code < APP_CODE_LIMIT


def valid_code(code: int) -> bool:
    """
    Check whether a function code is valid.

    A code is valid when it is application-reserved or registered.

    Args:
        code: Function code to check

    Returns:
        True if the code may be used to encode or cast a multihash
    """
    return is_app_code(code) or is_known_code(code)


def get_hash_function(key: Union[str, int]) -> Optional[HashFunction]:
    """
    Look up a registry entry by name or by code.

    Args:
        key: Hash function name (str) or function code (int)

    Returns:
        The matching HashFunction, or None if nothing is registered
    """
    if isinstance(key, str):
        return _BY_NAME.get(key)
    return _BY_CODE.get(key)


def all_hash_functions() -> Tuple[HashFunction, ...]:
    """Return every registry entry ordered by code."""
    return tuple(_BY_CODE[code] for code in sorted(_BY_CODE))


__all__ = [
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
]
