"""
Tests for the hash function registry.

Covers the fixed entries, the generated blake2 families, lookup misses
and the application-reserved code range.
"""

import logging

import pytest

from multihash_codec import registry
from multihash_codec.registry import (
    HashCode, HashFunction,
    BLAKE2B_MIN, BLAKE2B_MAX, BLAKE2S_MIN, BLAKE2S_MAX,
    NAMES, CODES, DEFAULT_LENGTHS,
    code_for_name, name_for_code, default_length_for_code,
    is_known_code, is_app_code, valid_code,
    get_hash_function, all_hash_functions,
)


class TestFixedEntries:
    """Test the explicitly listed hash functions."""

    @pytest.mark.parametrize("name,code,length", [
        ("sha1", 0x11, 20),
        ("sha2-256", 0x12, 32),
        ("sha2-512", 0x13, 64),
        ("sha3", 0x14, 64),
        ("dbl-sha2-256", 0x56, 32),
    ])
    def test_fixed_entry(self, name, code, length):
        """Test name, code and default length of each fixed entry."""
        assert code_for_name(name) == code
        assert name_for_code(code) == name
        assert default_length_for_code(code) == length
        assert is_known_code(code)

    def test_hash_code_enum(self):
        """Test HashCode values match the registry."""
        assert HashCode.SHA1 == 0x11
        assert HashCode.DBL_SHA2_256 == 0x56
        for member in HashCode:
            assert is_known_code(member)

    def test_lookups_return_plain_ints(self):
        """Test that lookups return int, not the enum type."""
        assert type(code_for_name("sha1")) is int


class TestGeneratedFamilies:
    """Test the procedurally generated blake2 entries."""

    @pytest.mark.parametrize("code,name,length", [
        (0xB201, "blake2b-8", 1),
        (0xB220, "blake2b-256", 32),
        (0xB240, "blake2b-512", 64),
        (0xB241, "blake2s-8", 1),
        (0xB250, "blake2s-128", 16),
        (0xB260, "blake2s-256", 32),
    ])
    def test_family_boundaries(self, code, name, length):
        """Test names and default lengths at and inside the range bounds."""
        assert name_for_code(code) == name
        assert default_length_for_code(code) == length
        assert code_for_name(name) == code

    def test_family_sizes(self):
        """Test that blake2b has 64 codes and blake2s has 32."""
        blake2b = [c for c in CODES if BLAKE2B_MIN <= c <= BLAKE2B_MAX]
        blake2s = [c for c in CODES if BLAKE2S_MIN <= c <= BLAKE2S_MAX]
        assert len(blake2b) == 64
        assert len(blake2s) == 32

    def test_bits_suffix_matches_length(self):
        """Test that every generated name encodes its default length in bits."""
        for code in range(BLAKE2B_MIN, BLAKE2S_MAX + 1):
            name = name_for_code(code)
            bits = int(name.rsplit("-", 1)[1])
            assert bits == default_length_for_code(code) * 8

    def test_outside_ranges(self):
        """Test codes just outside the generated ranges."""
        assert name_for_code(BLAKE2B_MIN - 1) is None
        assert name_for_code(BLAKE2S_MAX + 1) is None


class TestLookups:
    """Test lookup functions and read-only views."""

    def test_misses_return_none(self):
        """Test that unknown names and codes return None."""
        assert code_for_name("md5") is None
        assert name_for_code(0x99) is None
        assert default_length_for_code(0x99) is None
        assert get_hash_function("md5") is None
        assert get_hash_function(0x99) is None

    def test_get_hash_function(self):
        """Test lookup by name and by code returns the same entry."""
        by_name = get_hash_function("sha2-256")
        by_code = get_hash_function(0x12)
        assert by_name == by_code == HashFunction("sha2-256", 0x12, 32)

    def test_all_hash_functions(self):
        """Test all entries are returned once, ordered by code."""
        entries = all_hash_functions()
        assert len(entries) == 5 + 64 + 32
        codes = [e.code for e in entries]
        assert codes == sorted(codes)
        assert len({e.name for e in entries}) == len(entries)

    def test_views_are_read_only(self):
        """Test that the exported tables cannot be mutated."""
        with pytest.raises(TypeError):
            NAMES["md5"] = 0xD5
        with pytest.raises(TypeError):
            CODES[0xD5] = "md5"
        with pytest.raises(TypeError):
            DEFAULT_LENGTHS[0x11] = 1

    def test_views_agree(self):
        """Test NAMES and CODES are inverse mappings."""
        for name, code in NAMES.items():
            assert CODES[code] == name
        assert set(CODES) == set(DEFAULT_LENGTHS)


class TestCodeValidity:
    """Test application-reserved and valid code predicates."""

    @pytest.mark.parametrize("code", [0x00, 0x05, 0x0F])
    def test_app_codes(self, code):
        """Test codes in [0, 16) are application-reserved and valid."""
        assert is_app_code(code)
        assert not is_known_code(code)
        assert valid_code(code)

    @pytest.mark.parametrize("code", [-1, 0x10, 0x99, 0xFF])
    def test_invalid_codes(self, code):
        """Test codes that are neither reserved nor registered."""
        assert not is_app_code(code)
        assert not valid_code(code)

    def test_registered_codes_are_valid(self):
        """Test every registered code is valid."""
        for entry in all_hash_functions():
            assert valid_code(entry.code)


class TestRegistryConstruction:
    """Test building the registry tables."""

    def test_build_logs_entry_count(self, caplog):
        """Test that building the registry logs its size at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="multihash_codec.registry"):
            by_name, by_code = registry._build_registry()
        assert len(by_code) == 101
        assert len(by_name) == 101
        assert "101 entries" in caplog.text

    def test_duplicate_name_rejected(self, monkeypatch):
        """Test that duplicate names fail registry construction."""
        duplicated = registry._FIXED_ENTRIES + (HashFunction("sha1", 0x15, 20),)
        monkeypatch.setattr(registry, "_FIXED_ENTRIES", duplicated)
        with pytest.raises(RuntimeError, match="name"):
            registry._build_registry()

    def test_duplicate_code_rejected(self, monkeypatch):
        """Test that duplicate codes fail registry construction."""
        duplicated = registry._FIXED_ENTRIES + (HashFunction("sha1-copy", 0x11, 20),)
        monkeypatch.setattr(registry, "_FIXED_ENTRIES", duplicated)
        with pytest.raises(RuntimeError, match="code"):
            registry._build_registry()
