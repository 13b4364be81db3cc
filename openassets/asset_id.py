"""
Open Assets Protocol - Asset ID Derivation and Parsing

An asset ID is the Base58Check encoding of a network-specific asset version
byte followed by HASH160 of the issuing output's locking script.
"""

import logging
from dataclasses import dataclass

from oacrypto.base58check import b58check_decode, b58check_encode
from oacrypto.hashing import HASH160_SIZE, hash160

from .address import parse_address
from .exceptions import AssetIdError, UnrecognizedAssetVersionError
from .networks import ASSET_ID_NETWORKS, Network, asset_id_version


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetId:
    """An asset ID: asset version byte plus the issuing script hash."""
    version: int
    hash: bytes

    def __post_init__(self):
        """Validate asset ID fields."""
        if self.version not in ASSET_ID_NETWORKS:
            raise UnrecognizedAssetVersionError(self.version)
        if len(self.hash) != HASH160_SIZE:
            raise AssetIdError(
                f"Asset ID hash must be {HASH160_SIZE} bytes, got {len(self.hash)}"
            )
        object.__setattr__(self, 'hash', bytes(self.hash))

    @property
    def network(self) -> Network:
        return ASSET_ID_NETWORKS[self.version]

    @classmethod
    def from_script(cls, script: bytes, network: Network = Network.MAINNET) -> 'AssetId':
        """
        Derive the asset ID of assets issued by an output with this script.

        Args:
            script: Locking script of the issuing output (the first input's
                previous output)
            network: Network selecting the asset version byte

        Returns:
            AssetId
        """
        return cls(asset_id_version(network), hash160(bytes(script)))

    @classmethod
    def from_address(cls, address: str) -> 'AssetId':
        """Derive the asset ID for an issuing P2PKH/P2SH or Open Assets address."""
        decoded = parse_address(address)
        return cls.from_script(decoded.script(), decoded.network)

    @classmethod
    def parse(cls, text: str) -> 'AssetId':
        """
        Parse a textual asset ID.

        Args:
            text: Base58Check asset ID

        Returns:
            AssetId

        Raises:
            UnrecognizedAssetVersionError: If the version byte is not an asset version
            AssetIdError: If the hash is not 20 bytes
        """
        version, payload = b58check_decode(text)
        return cls(version, payload)

    def to_string(self) -> str:
        return b58check_encode(self.version, self.hash)

    def __str__(self):
        return self.to_string()


def derive_asset_id(issuing_script: bytes, network: Network = Network.MAINNET) -> str:
    """
    Derive the textual asset ID for an issuing script.

    Args:
        issuing_script: Locking script of the issuing output
        network: Network selecting the asset version byte

    Returns:
        Base58Check asset ID string
    """
    asset_id = AssetId.from_script(issuing_script, network)
    logger.debug("Derived asset ID %s for script %s", asset_id, bytes(issuing_script).hex())
    return str(asset_id)


def parse_asset_id(text: str) -> AssetId:
    """Parse a textual asset ID into an AssetId."""
    return AssetId.parse(text)


def asset_id_for_address(address: str) -> str:
    """Derive the textual asset ID for assets issued from an address."""
    return str(AssetId.from_address(address))
