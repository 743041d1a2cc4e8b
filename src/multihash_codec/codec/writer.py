"""
Binary Writer

Accumulates the bytes of a multihash header and digest. Integer fields are
written as single unsigned bytes and truncated to their low 8 bits.
"""

from typing import List


class BinaryWriter:
    """Append-only byte writer."""

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Values wider than a byte keep only their low 8 bits.

        Args:
            v: Integer value to write
        """
        self._bb.append(v & 0xFF)

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def __len__(self) -> int:
        return len(self._bb)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
