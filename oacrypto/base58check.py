"""
Base58Check Encoding and Decoding

This module implements the checksum-protected base-58 text encoding shared by
Open Assets asset IDs and addresses. The alphabet conversion itself is done by
the ``base58`` package; this module adds the version byte, the 4-byte double
SHA-256 checksum and the error taxonomy callers rely on.
"""

import logging
from typing import Tuple

import base58

from .exceptions import (
    ChecksumMismatchError,
    InvalidCharacterError,
    TooShortError,
)
from .hashing import double_sha256


CHECKSUM_SIZE = 4
MIN_DECODED_SIZE = 1 + CHECKSUM_SIZE  # version byte + checksum
ALPHABET = base58.BITCOIN_ALPHABET.decode('ascii')

logger = logging.getLogger(__name__)


def checksum(data: bytes) -> bytes:
    """Return the 4-byte Base58Check checksum of ``data``."""
    return double_sha256(data)[:CHECKSUM_SIZE]


def encode_check(data: bytes) -> str:
    """
    Append a checksum to raw bytes and base58-encode the result.

    Leading zero bytes are preserved as leading '1' characters.

    Args:
        data: Bytes to encode (version prefix included)

    Returns:
        Base58Check string
    """
    return base58.b58encode(bytes(data) + checksum(data)).decode('ascii')


def decode_check(text: str) -> bytes:
    """
    Decode a Base58Check string and verify its checksum.

    Args:
        text: Base58Check string

    Returns:
        Decoded bytes with the checksum stripped (version prefix included)

    Raises:
        InvalidCharacterError: If a character is outside the base-58 alphabet
        TooShortError: If fewer than 5 bytes are decoded
        ChecksumMismatchError: If the checksum does not match
    """
    if not isinstance(text, str):
        raise TypeError(f"Base58Check input must be str, got {type(text).__name__}")

    for position, character in enumerate(text):
        if character not in ALPHABET:
            raise InvalidCharacterError(character, position)

    raw = base58.b58decode(text)
    if len(raw) < MIN_DECODED_SIZE:
        raise TooShortError(len(raw), MIN_DECODED_SIZE)

    data, claimed = raw[:-CHECKSUM_SIZE], raw[-CHECKSUM_SIZE:]
    computed = checksum(data)
    if claimed != computed:
        logger.debug("Base58Check checksum mismatch for %s", text)
        raise ChecksumMismatchError(computed, claimed)

    return data


def b58check_encode(version: int, payload: bytes) -> str:
    """
    Encode a version byte and payload as a Base58Check string.

    Args:
        version: Version byte (0-255)
        payload: Payload bytes, e.g. a 20-byte hash

    Returns:
        Base58Check string
    """
    if not isinstance(version, int) or not 0 <= version <= 0xFF:
        raise ValueError(f"Version must be a single byte, got {version!r}")

    return encode_check(bytes([version]) + bytes(payload))


def b58check_decode(text: str) -> Tuple[int, bytes]:
    """
    Decode a Base58Check string into its version byte and payload.

    Args:
        text: Base58Check string

    Returns:
        Tuple of (version, payload)
    """
    data = decode_check(text)
    return data[0], data[1:]
