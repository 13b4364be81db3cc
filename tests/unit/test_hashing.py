"""
Tests for hash functions
"""

from oacrypto.hashing import HASH160_SIZE, double_sha256, hash160, sha256


class TestHashing:
    """Test digest helpers."""

    def test_sha256_empty(self):
        """Test SHA-256 of empty input."""
        assert sha256(b'').hex() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_double_sha256_empty(self):
        """Test double SHA-256 of empty input."""
        assert double_sha256(b'').hex() == "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"

    def test_hash160_empty(self):
        """Test HASH160 of empty input."""
        assert hash160(b'').hex() == "b472a266d0bd89c13706a4132ccfb16f7c3b9fcb"

    def test_hash160_size(self):
        """Test HASH160 always returns 20 bytes."""
        for data in (b'', b'\x00', b'x' * 1000):
            assert len(hash160(data)) == HASH160_SIZE

    def test_hash160_is_deterministic(self):
        """Test HASH160 is a pure function of its input."""
        script = bytes.fromhex("76a914010966776006953d5567439e5e39f86a0d273bee88ac")
        assert hash160(script) == hash160(bytes(script))
        assert hash160(script) != hash160(script + b'\x00')

    def test_package_distinct_from_pycryptodome(self):
        """Test the package directory does not collide with Crypto on case-insensitive filesystems."""
        from pathlib import Path

        import Crypto
        import oacrypto

        ours = Path(oacrypto.__file__).parent.name.lower()
        assert ours != Path(Crypto.__file__).parent.name.lower()
