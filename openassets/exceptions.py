"""
Open Assets Protocol - Exceptions

This module defines custom exceptions for marker output, asset ID and
address operations.
"""


class OpenAssetsError(Exception):
    """Base exception for Open Assets protocol errors."""
    pass


class InvalidScriptError(OpenAssetsError):
    """Exception raised for invalid or truncated scripts."""
    pass


class VarIntError(OpenAssetsError):
    """Base exception for variable-length integer errors."""
    pass


class MalformedVarIntError(VarIntError):
    """Exception raised when a LEB128 integer cannot be decoded."""
    pass


class VarIntOverflowError(VarIntError):
    """Exception raised when a value is outside the encodable range."""

    def __init__(self, value, message: str = None):
        self.value = value
        if message is None:
            message = f"Value out of encodable range: {value!r}"
        super().__init__(message)


class MarkerPayloadError(OpenAssetsError):
    """Base exception for marker output payload errors."""
    pass


class MalformedMarkerPayloadError(MarkerPayloadError):
    """Exception raised when a recognized marker payload cannot be parsed."""
    pass


class AssetIdError(OpenAssetsError):
    """Exception raised for asset ID derivation and parsing errors."""
    pass


class UnrecognizedAssetVersionError(AssetIdError):
    """Exception raised when an asset ID carries an unknown version byte."""

    def __init__(self, version: int, message: str = None):
        self.version = version
        if message is None:
            message = f"Unrecognized asset ID version byte: 0x{version:02x}"
        super().__init__(message)


class AddressError(OpenAssetsError):
    """Exception raised for address conversion errors."""
    pass


class UnsupportedAddressVersionError(AddressError):
    """Exception raised when an address version has no conversion entry."""

    def __init__(self, version, message: str = None):
        self.version = version
        if message is None:
            if isinstance(version, (bytes, bytearray)):
                shown = version.hex()
            elif isinstance(version, int):
                shown = f"0x{version:02x}"
            else:
                shown = str(version)
            message = f"Unsupported address version: {shown}"
        super().__init__(message)
