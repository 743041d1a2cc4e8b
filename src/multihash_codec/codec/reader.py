"""
Binary Reader

Bounds-checked sequential reader over a byte buffer. Reading past the end
raises IndexError; the multihash decoder checks buffer sizes first so this
never reaches callers of the codec.
"""

import builtins


class BinaryReader:
    """Sequential reader over an immutable byte buffer."""

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = buf
        self._off = 0

    @property
    def eof(self) -> bool:
        """True once every byte has been consumed."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return max(len(self._buf) - self._off, 0)

    def u8(self) -> int:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value
        """
        if self._off >= len(self._buf):
            raise IndexError("Buffer overflow: attempting to read beyond end")
        val = self._buf[self._off]
        self._off += 1
        return val

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        if self._off + n > len(self._buf):
            raise IndexError(f"Buffer overflow: attempting to read {n} bytes beyond end")
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def rest(self) -> builtins.bytes:
        """Read every remaining byte."""
        return self.bytes(self.remaining)
