"""
Open Assets Protocol - Networks and Version Bytes

Protocol-fixed version bytes for payment addresses, Open Assets addresses and
asset IDs. Regtest shares every version byte with testnet, so textual forms
carrying testnet bytes always parse back as TESTNET.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Network(Enum):
    """Networks with distinct version-byte sets."""
    MAINNET = "mainnet"
    TESTNET = "testnet"
    REGTEST = "regtest"

    @classmethod
    def from_name(cls, name: str) -> 'Network':
        """Look up a network by name (case-insensitive; 'bitcoin' is an alias for mainnet)."""
        normalized = name.strip().lower()
        if normalized == 'bitcoin':
            normalized = cls.MAINNET.value
        for network in cls:
            if network.value == normalized:
                return network
        raise ValueError(f"Unknown network: {name}")

    @property
    def canonical(self) -> 'Network':
        """The network whose version bytes this one uses."""
        return Network.TESTNET if self is Network.REGTEST else self


class AddressKind(Enum):
    """Base58 address kinds that have an Open Assets counterpart."""
    PUBKEY_HASH = "pubkey_hash"
    SCRIPT_HASH = "script_hash"


# Leading byte of every Open Assets address
OPEN_ASSETS_NAMESPACE = 0x13


@dataclass(frozen=True)
class AddressVersion:
    """One row of the payment <-> Open Assets version table."""
    network: Network
    kind: AddressKind
    payment_version: int

    @property
    def open_assets_version(self) -> bytes:
        return bytes([OPEN_ASSETS_NAMESPACE, self.payment_version])


ADDRESS_VERSIONS: Tuple[AddressVersion, ...] = (
    AddressVersion(Network.MAINNET, AddressKind.PUBKEY_HASH, 0x00),
    AddressVersion(Network.MAINNET, AddressKind.SCRIPT_HASH, 0x05),
    AddressVersion(Network.TESTNET, AddressKind.PUBKEY_HASH, 0x6f),
    AddressVersion(Network.TESTNET, AddressKind.SCRIPT_HASH, 0xc4),
)

ADDRESS_VERSIONS_BY_PAYMENT: Dict[int, AddressVersion] = {
    entry.payment_version: entry for entry in ADDRESS_VERSIONS
}

ADDRESS_VERSIONS_BY_OPEN_ASSETS: Dict[bytes, AddressVersion] = {
    entry.open_assets_version: entry for entry in ADDRESS_VERSIONS
}

ASSET_ID_VERSIONS: Dict[Network, int] = {
    Network.MAINNET: 0x17,
    Network.TESTNET: 0x73,
}

ASSET_ID_NETWORKS: Dict[int, Network] = {
    version: network for network, version in ASSET_ID_VERSIONS.items()
}

# Segwit addresses are bech32 and have no Open Assets form
BECH32_PREFIXES = ('bc1', 'tb1', 'bcrt1')


def address_version(network: Network, kind: AddressKind) -> AddressVersion:
    """Return the table row for a network and address kind."""
    canonical = network.canonical
    for entry in ADDRESS_VERSIONS:
        if entry.network is canonical and entry.kind is kind:
            return entry
    raise KeyError(f"No address version for {network.value}/{kind.value}")


def asset_id_version(network: Network) -> int:
    """Return the asset ID version byte for a network."""
    return ASSET_ID_VERSIONS[network.canonical]
