"""
Hash Functions for the Open Assets codec

This module provides the digests used across the protocol:

- SHA-256 and double SHA-256 (Base58Check checksums)
- HASH160, i.e. RIPEMD160(SHA256(data)), used for asset IDs and addresses

References:
- https://github.com/OpenAssets/open-assets-protocol/blob/master/specification.mediawiki
"""

import hashlib

from Crypto.Hash import RIPEMD160


HASH160_SIZE = 20


def sha256(data: bytes) -> bytes:
    """Compute a single SHA-256 digest."""
    return hashlib.sha256(data).digest()


def double_sha256(data: bytes) -> bytes:
    """
    Calculate double SHA256 hash.

    Args:
        data: Data to hash

    Returns:
        32-byte SHA256(SHA256(data)) digest
    """
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def hash160(data: bytes) -> bytes:
    """
    Compute HASH160 (RIPEMD160(SHA256(data))).

    Args:
        data: Input data to hash, typically a locking script

    Returns:
        20-byte HASH160 digest
    """
    rmd = RIPEMD160.new()
    rmd.update(sha256(data))
    return rmd.digest()
