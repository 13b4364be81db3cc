"""
Unit tests for payment and Open Assets address conversion.
"""

import pytest

from oacrypto.base58check import b58check_decode, b58check_encode
from oacrypto.exceptions import Base58Error
from openassets.address import (
    DecodedAddress,
    decode_open_assets_address,
    decode_payment_address,
    parse_address,
    script_for_address,
    to_open_assets_address,
    to_payment_address,
)
from openassets.exceptions import AddressError, UnsupportedAddressVersionError
from openassets.networks import (
    ADDRESS_VERSIONS,
    AddressKind,
    Network,
    address_version,
)
from openassets.script import create_p2pkh_script, create_p2sh_script

from tests.vectors import (
    OA_ADDRESS,
    PAYMENT_ADDRESS,
    SEGWIT_ADDRESS,
    TESTNET_OA_ADDRESS,
    TESTNET_PAYMENT_ADDRESS,
)


SAMPLE_HASH = bytes(range(20))


class TestAddressConversion:
    """Test conversion between payment and Open Assets addresses."""

    def test_mainnet_to_open_assets(self):
        """Test the known mainnet conversion."""
        assert to_open_assets_address(PAYMENT_ADDRESS) == OA_ADDRESS

    def test_mainnet_to_payment(self):
        """Test converting back yields the original address."""
        assert to_payment_address(OA_ADDRESS) == PAYMENT_ADDRESS

    def test_testnet_to_open_assets(self):
        """Test the known testnet conversion."""
        assert to_open_assets_address(TESTNET_PAYMENT_ADDRESS) == TESTNET_OA_ADDRESS

    def test_testnet_to_payment(self):
        """Test the testnet reverse conversion."""
        assert to_payment_address(TESTNET_OA_ADDRESS) == TESTNET_PAYMENT_ADDRESS

    def test_hash_is_preserved(self):
        """Test conversion keeps the 20-byte hash."""
        _, payload = b58check_decode(PAYMENT_ADDRESS)
        decoded = decode_open_assets_address(OA_ADDRESS)
        assert decoded.hash == payload

    @pytest.mark.parametrize("entry", ADDRESS_VERSIONS,
                             ids=lambda e: f"{e.network.value}-{e.kind.value}")
    def test_round_trip_every_version(self, entry):
        """Test conversion is an involution for every table entry."""
        payment = b58check_encode(entry.payment_version, SAMPLE_HASH)
        open_assets = to_open_assets_address(payment)

        assert open_assets != payment
        assert to_payment_address(open_assets) == payment
        assert decode_open_assets_address(open_assets).version == entry

    def test_open_assets_addresses_share_namespace(self):
        """Test every Open Assets address carries the 0x13 namespace byte."""
        for entry in ADDRESS_VERSIONS:
            open_assets = to_open_assets_address(b58check_encode(entry.payment_version, SAMPLE_HASH))
            version, payload = b58check_decode(open_assets)
            assert version == 0x13
            assert payload[0] == entry.payment_version


class TestConversionErrors:
    """Test addresses that cannot be converted."""

    def test_segwit_rejected(self):
        """Test bech32 addresses have no Open Assets form."""
        with pytest.raises(UnsupportedAddressVersionError) as exc_info:
            to_open_assets_address(SEGWIT_ADDRESS)
        assert exc_info.value.version == "witness"

    def test_testnet_segwit_rejected(self):
        """Test testnet bech32 addresses are rejected too."""
        with pytest.raises(UnsupportedAddressVersionError):
            parse_address("tb1qw508d6qejxtdg4y5r3zarvary0c5xw7kxpjzsx")

    def test_open_assets_address_forward(self):
        """Test converting an address that is already Open Assets."""
        with pytest.raises(UnsupportedAddressVersionError) as exc_info:
            to_open_assets_address(OA_ADDRESS)
        assert exc_info.value.version == 0x13

    def test_payment_address_backward(self):
        """Test converting a payment address back."""
        with pytest.raises(UnsupportedAddressVersionError):
            to_payment_address(PAYMENT_ADDRESS)

    def test_unknown_version(self):
        """Test version bytes outside the table."""
        address = b58check_encode(0x30, SAMPLE_HASH)
        with pytest.raises(UnsupportedAddressVersionError, match="0x30"):
            to_open_assets_address(address)

    def test_unknown_open_assets_prefix(self):
        """Test Open Assets addresses wrapping an unknown payment version."""
        address = b58check_encode(0x13, b'\x30' + SAMPLE_HASH)
        with pytest.raises(UnsupportedAddressVersionError, match="1330"):
            to_payment_address(address)

    def test_short_hash(self):
        """Test payloads that are not 20 bytes."""
        address = b58check_encode(0x00, SAMPLE_HASH[:19])
        with pytest.raises(AddressError, match="payload length 19"):
            to_open_assets_address(address)

    def test_corrupted_address(self):
        """Test Base58Check errors propagate unchanged."""
        corrupted = PAYMENT_ADDRESS[:-1] + ('9' if PAYMENT_ADDRESS[-1] != '9' else '8')
        with pytest.raises(Base58Error):
            to_open_assets_address(corrupted)


class TestParseAddress:
    """Test decoding either address form."""

    def test_parse_payment_address(self):
        """Test a mainnet P2PKH address."""
        decoded = parse_address(PAYMENT_ADDRESS)
        assert isinstance(decoded, DecodedAddress)
        assert decoded.network is Network.MAINNET
        assert decoded.kind is AddressKind.PUBKEY_HASH
        assert not decoded.open_assets
        assert str(decoded) == PAYMENT_ADDRESS

    def test_parse_open_assets_address(self):
        """Test a testnet Open Assets address."""
        decoded = parse_address(TESTNET_OA_ADDRESS)
        assert decoded.network is Network.TESTNET
        assert decoded.open_assets
        assert str(decoded) == TESTNET_OA_ADDRESS
        assert decoded.to_payment_address() == TESTNET_PAYMENT_ADDRESS

    def test_both_forms_decode_to_same_hash(self):
        """Test both forms of one address carry the same hash."""
        assert parse_address(PAYMENT_ADDRESS).hash == parse_address(OA_ADDRESS).hash

    def test_p2sh_address(self):
        """Test P2SH addresses round-trip and yield P2SH scripts."""
        address = b58check_encode(0x05, SAMPLE_HASH)
        decoded = decode_payment_address(address)
        assert decoded.kind is AddressKind.SCRIPT_HASH
        assert decoded.script() == create_p2sh_script(SAMPLE_HASH)
        assert to_payment_address(to_open_assets_address(address)) == address

    def test_script_for_address(self):
        """Test scripts are the same for both address forms."""
        _, payload = b58check_decode(PAYMENT_ADDRESS)
        assert script_for_address(PAYMENT_ADDRESS) == create_p2pkh_script(payload)
        assert script_for_address(OA_ADDRESS) == create_p2pkh_script(payload)


class TestNetworks:
    """Test network lookup helpers."""

    @pytest.mark.parametrize("name,network", [
        ("mainnet", Network.MAINNET),
        ("bitcoin", Network.MAINNET),
        ("Testnet", Network.TESTNET),
        (" regtest ", Network.REGTEST),
    ])
    def test_from_name(self, name, network):
        """Test network names are matched case-insensitively."""
        assert Network.from_name(name) is network

    def test_unknown_network(self):
        """Test unknown network names."""
        with pytest.raises(ValueError, match="Unknown network"):
            Network.from_name("signet")

    def test_regtest_uses_testnet_versions(self):
        """Test regtest resolves to the testnet table rows."""
        assert address_version(Network.REGTEST, AddressKind.PUBKEY_HASH).payment_version == 0x6f
        assert address_version(Network.MAINNET, AddressKind.SCRIPT_HASH).payment_version == 0x05
