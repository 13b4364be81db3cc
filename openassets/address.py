"""
Open Assets Protocol - Address Conversion

An Open Assets address is the Base58Check encoding of the namespace byte 0x13,
the payment address version byte and the 20-byte hash. Conversion in either
direction is a pure version substitution: the hash is never recomputed.
"""

import logging
from dataclasses import dataclass

from oacrypto.base58check import b58check_decode, decode_check, encode_check

from .exceptions import AddressError, UnsupportedAddressVersionError
from .networks import (
    ADDRESS_VERSIONS_BY_OPEN_ASSETS,
    ADDRESS_VERSIONS_BY_PAYMENT,
    BECH32_PREFIXES,
    OPEN_ASSETS_NAMESPACE,
    AddressKind,
    AddressVersion,
    Network,
)
from .script import create_p2pkh_script, create_p2sh_script


HASH_SIZE = 20

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedAddress:
    """A decoded payment or Open Assets address."""
    version: AddressVersion
    hash: bytes
    open_assets: bool = False

    @property
    def network(self) -> Network:
        return self.version.network

    @property
    def kind(self) -> AddressKind:
        return self.version.kind

    def to_payment_address(self) -> str:
        return encode_check(bytes([self.version.payment_version]) + self.hash)

    def to_open_assets_address(self) -> str:
        return encode_check(self.version.open_assets_version + self.hash)

    def script(self) -> bytes:
        """Standard locking script paying to this address."""
        if self.kind is AddressKind.PUBKEY_HASH:
            return create_p2pkh_script(self.hash)
        return create_p2sh_script(self.hash)

    def __str__(self):
        return self.to_open_assets_address() if self.open_assets else self.to_payment_address()


def _reject_witness(address: str):
    if address.lower().startswith(BECH32_PREFIXES):
        raise UnsupportedAddressVersionError(
            "witness",
            f"Segwit address has no Open Assets form: {address}"
        )


def _check_hash(payload: bytes, address: str) -> bytes:
    if len(payload) != HASH_SIZE:
        raise AddressError(
            f"Invalid address payload length {len(payload)} (expected {HASH_SIZE}): {address}"
        )
    return payload


def decode_payment_address(address: str) -> DecodedAddress:
    """
    Decode a Base58Check payment address.

    Raises:
        UnsupportedAddressVersionError: If the version byte is not in the table
        AddressError: If the payload is not a 20-byte hash
    """
    _reject_witness(address)
    version, payload = b58check_decode(address)

    entry = ADDRESS_VERSIONS_BY_PAYMENT.get(version)
    if entry is None:
        raise UnsupportedAddressVersionError(version)

    return DecodedAddress(entry, _check_hash(payload, address), open_assets=False)


def decode_open_assets_address(address: str) -> DecodedAddress:
    """
    Decode an Open Assets address.

    Raises:
        UnsupportedAddressVersionError: If the two-byte prefix is not in the table
        AddressError: If the payload is not a 20-byte hash
    """
    _reject_witness(address)
    data = decode_check(address)

    prefix = data[:2]
    entry = ADDRESS_VERSIONS_BY_OPEN_ASSETS.get(prefix)
    if entry is None:
        raise UnsupportedAddressVersionError(prefix)

    return DecodedAddress(entry, _check_hash(data[2:], address), open_assets=True)


def parse_address(address: str) -> DecodedAddress:
    """
    Decode either a payment address or an Open Assets address.

    Args:
        address: Base58Check address string

    Returns:
        DecodedAddress, with ``open_assets`` set for Open Assets addresses
    """
    _reject_witness(address)
    data = decode_check(address)
    if data[0] == OPEN_ASSETS_NAMESPACE:
        return decode_open_assets_address(address)
    return decode_payment_address(address)


def to_open_assets_address(address: str) -> str:
    """
    Convert a payment address to its Open Assets address.

    Args:
        address: P2PKH or P2SH payment address

    Returns:
        Open Assets address carrying the same hash
    """
    decoded = decode_payment_address(address)
    converted = decoded.to_open_assets_address()
    logger.debug("Converted %s -> %s", address, converted)
    return converted


def to_payment_address(address: str) -> str:
    """
    Convert an Open Assets address back to its payment address.

    Args:
        address: Open Assets address

    Returns:
        Payment address carrying the same hash
    """
    decoded = decode_open_assets_address(address)
    converted = decoded.to_payment_address()
    logger.debug("Converted %s -> %s", address, converted)
    return converted


def script_for_address(address: str) -> bytes:
    """
    Build the standard locking script for a payment or Open Assets address.

    Args:
        address: Address string

    Returns:
        P2PKH or P2SH script bytes
    """
    return parse_address(address).script()
