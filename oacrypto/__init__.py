"""
Open Assets Codec - Cryptographic Primitives

This package provides the hashing and text encoding primitives used by the
Open Assets protocol layer:
- SHA-256, double SHA-256 and HASH160 digests
- Base58Check encoding with version bytes and checksums

Dependencies:
- pycryptodome: RIPEMD-160
- base58: base-58 alphabet conversion
"""

from .exceptions import (
    CryptoError,
    Base58Error,
    InvalidCharacterError,
    ChecksumMismatchError,
    TooShortError,
)
from .hashing import sha256, double_sha256, hash160
from .base58check import (
    checksum,
    encode_check,
    decode_check,
    b58check_encode,
    b58check_decode,
)

__all__ = [
    'CryptoError',
    'Base58Error',
    'InvalidCharacterError',
    'ChecksumMismatchError',
    'TooShortError',
    'sha256',
    'double_sha256',
    'hash160',
    'checksum',
    'encode_check',
    'decode_check',
    'b58check_encode',
    'b58check_decode',
]
