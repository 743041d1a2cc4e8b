"""
Test bootstrap:
- Force-add src/ to sys.path so the suite runs from a plain checkout
- Provide shared digest fixtures
"""
import sys
import pathlib
import pytest

ROOT = pathlib.Path(__file__).resolve().parent.parent
SRC = ROOT / "src"

# Ensure src importability at collect-time
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def fake_digest():
    """Four-byte stand-in digest used by the wire format examples."""
    return bytes([0xAA, 0xBB, 0xCC, 0xDD])


@pytest.fixture
def sha2_256_digest():
    """Real SHA-256 digest of b"multihash"."""
    import hashlib
    return hashlib.sha256(b"multihash").digest()
