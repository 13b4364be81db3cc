"""
Open Assets Protocol - Encoding Layer

This package implements the parts of the Open Assets Protocol that must match
other implementations byte for byte:
- marker output payloads (asset quantities and metadata in an OP_RETURN output)
- asset IDs derived from issuing scripts
- conversion between payment addresses and Open Assets addresses
"""

from .exceptions import *
from .varint import encode_varint, decode_varint, read_varint, MAX_VARINT_BYTES, MAX_VARINT_VALUE
from .networks import Network, AddressKind, AddressVersion
from .script import TransactionOutput
from .marker import (
    MarkerPayload,
    Marker,
    NotAMarker,
    MarkerEncoder,
    MarkerDecoder,
    OPEN_ASSETS_TAG,
    encode_payload,
    decode_payload,
    build_marker_script,
    build_marker_output,
    classify_output,
    is_marker_output,
    parse_marker_output,
    find_marker_output,
)
from .asset_id import AssetId, derive_asset_id, parse_asset_id, asset_id_for_address
from .address import (
    DecodedAddress,
    parse_address,
    to_open_assets_address,
    to_payment_address,
    script_for_address,
)

__all__ = [
    'OpenAssetsError',
    'InvalidScriptError',
    'VarIntError',
    'MalformedVarIntError',
    'VarIntOverflowError',
    'MarkerPayloadError',
    'MalformedMarkerPayloadError',
    'AssetIdError',
    'UnrecognizedAssetVersionError',
    'AddressError',
    'UnsupportedAddressVersionError',
    'encode_varint',
    'decode_varint',
    'read_varint',
    'MAX_VARINT_BYTES',
    'MAX_VARINT_VALUE',
    'Network',
    'AddressKind',
    'AddressVersion',
    'TransactionOutput',
    'MarkerPayload',
    'Marker',
    'NotAMarker',
    'MarkerEncoder',
    'MarkerDecoder',
    'OPEN_ASSETS_TAG',
    'encode_payload',
    'decode_payload',
    'build_marker_script',
    'build_marker_output',
    'classify_output',
    'is_marker_output',
    'parse_marker_output',
    'find_marker_output',
    'AssetId',
    'derive_asset_id',
    'parse_asset_id',
    'asset_id_for_address',
    'DecodedAddress',
    'parse_address',
    'to_open_assets_address',
    'to_payment_address',
    'script_for_address',
]

__version__ = '1.0.0'
