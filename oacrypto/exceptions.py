"""
Cryptographic Exceptions for the Open Assets codec

This module defines custom exceptions for hashing and Base58Check operations.
"""


class CryptoError(Exception):
    """Base exception for all cryptographic errors."""
    pass


class Base58Error(CryptoError):
    """Base exception for Base58Check encoding and decoding errors."""
    pass


class InvalidCharacterError(Base58Error):
    """Raised when a string contains a character outside the base-58 alphabet."""

    def __init__(self, character: str, position: int, message: str = None):
        self.character = character
        self.position = position
        if message is None:
            message = f"Invalid base58 character {character!r} at position {position}"
        super().__init__(message)


class ChecksumMismatchError(Base58Error):
    """Raised when the embedded checksum does not match the decoded data."""

    def __init__(self, expected: bytes, actual: bytes, message: str = None):
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Checksum mismatch: expected {expected.hex()}, got {actual.hex()}"
        super().__init__(message)


class TooShortError(Base58Error):
    """Raised when decoded data cannot hold a version byte and a checksum."""

    def __init__(self, length: int, minimum: int, message: str = None):
        self.length = length
        self.minimum = minimum
        if message is None:
            message = f"Decoded data too short: {length} bytes (minimum {minimum})"
        super().__init__(message)
