"""
Tests for script utilities
"""

import pytest

from openassets.exceptions import InvalidScriptError
from openassets.script import (
    OP_0,
    OP_CHECKSIG,
    OP_PUSHDATA1,
    OP_PUSHDATA2,
    OP_RETURN,
    TransactionOutput,
    create_op_return_script,
    create_p2pkh_script,
    create_p2sh_script,
    encode_push_data,
    extract_op_return_push,
    op_return_data,
    parse_script,
)


class TestPushData:
    """Test push-data encoding."""

    def test_empty_push(self):
        """Test empty data is pushed with OP_0."""
        assert encode_push_data(b'') == bytes([OP_0])

    def test_direct_push(self):
        """Test data up to 75 bytes uses a direct push."""
        assert encode_push_data(b'\xab') == b'\x01\xab'
        assert encode_push_data(b'x' * 75) == b'\x4b' + b'x' * 75

    def test_pushdata1(self):
        """Test data of 76-255 bytes uses OP_PUSHDATA1."""
        assert encode_push_data(b'x' * 76) == bytes([OP_PUSHDATA1, 76]) + b'x' * 76
        assert encode_push_data(b'x' * 255)[:2] == bytes([OP_PUSHDATA1, 255])

    def test_pushdata2(self):
        """Test data of 256+ bytes uses OP_PUSHDATA2."""
        assert encode_push_data(b'x' * 256)[:3] == bytes([OP_PUSHDATA2, 0x00, 0x01])


class TestParseScript:
    """Test script iteration."""

    def test_parse_p2pkh(self):
        """Test parsing a P2PKH script."""
        elements = parse_script(bytes.fromhex("76a914010966776006953d5567439e5e39f86a0d273bee88ac"))
        assert [e.opcode for e in elements] == [0x76, 0xa9, 20, 0x88, OP_CHECKSIG]
        assert elements[2].data.hex() == "010966776006953d5567439e5e39f86a0d273bee"
        assert not elements[0].is_push_data

    @pytest.mark.parametrize("size", [0, 1, 75, 76, 255, 256, 1000])
    def test_parse_pushes(self, size):
        """Test every push size parses back to its data."""
        data = bytes(range(256)) * 4
        data = data[:size]
        elements = parse_script(encode_push_data(data))
        assert len(elements) == 1
        assert elements[0].data == data

    @pytest.mark.parametrize("script", ["05aabb", "4c", "4c05aa", "4d01", "4e0100"])
    def test_truncated_push(self, script):
        """Test pushes running past the end of the script."""
        with pytest.raises(InvalidScriptError):
            parse_script(bytes.fromhex(script))


class TestOpReturn:
    """Test OP_RETURN helpers."""

    def test_create_op_return_script(self):
        """Test building an OP_RETURN script."""
        assert create_op_return_script(b'hello') == b'\x6a\x05hello'

    def test_extract_exact_shape(self):
        """Test extracting the operand of OP_RETURN <push>."""
        assert extract_op_return_push(b'\x6a\x05hello') == b'hello'
        assert extract_op_return_push(create_op_return_script(b'y' * 100)) == b'y' * 100

    @pytest.mark.parametrize("script", [
        "",                          # empty
        "6a",                        # OP_RETURN alone
        "6a0161" + "0162",           # two pushes
        "6a0161ac",                  # push followed by an opcode
        "6a51",                      # OP_1 is not a push
        "6a05aabb",                  # truncated push
        "0161",                      # no OP_RETURN
        "76a914010966776006953d5567439e5e39f86a0d273bee88ac",
    ])
    def test_extract_rejects_other_shapes(self, script):
        """Test any other script shape yields None."""
        assert extract_op_return_push(bytes.fromhex(script)) is None

    def test_op_return_data(self):
        """Test first-push extraction used for raw OP_RETURN data."""
        script = bytes.fromhex(
            "6a244f4101000364007b1b753d68747470733a2f2f6370722e736d2f35596753553150672d71"
        )
        assert op_return_data(script).hex() == (
            "4f4101000364007b1b753d68747470733a2f2f6370722e736d2f35596753553150672d71"
        )

    def test_op_return_data_without_op_return(self):
        """Test non-OP_RETURN scripts have no data."""
        script = bytes.fromhex("76a91446c2fbfbecc99a63148fa076de58cf29b0bcf0b088ac")
        assert op_return_data(script) == b''
        assert op_return_data(bytes([OP_RETURN])) == b''


class TestStandardScripts:
    """Test standard locking scripts."""

    def test_p2pkh(self):
        """Test P2PKH script layout."""
        script = create_p2pkh_script(bytes.fromhex("010966776006953d5567439e5e39f86a0d273bee"))
        assert script.hex() == "76a914010966776006953d5567439e5e39f86a0d273bee88ac"

    def test_p2sh(self):
        """Test P2SH script layout."""
        script = create_p2sh_script(bytes.fromhex("f9d499817e88ef7b10a88673296c6d6df2f4292d"))
        assert script.hex() == "a914f9d499817e88ef7b10a88673296c6d6df2f4292d87"

    def test_invalid_hash_length(self):
        """Test hashes must be 20 bytes."""
        with pytest.raises(InvalidScriptError):
            create_p2pkh_script(b'\x00' * 19)
        with pytest.raises(InvalidScriptError):
            create_p2sh_script(b'\x00' * 32)


class TestTransactionOutput:
    """Test the output value type."""

    def test_negative_value(self):
        """Test negative output values are rejected."""
        with pytest.raises(ValueError):
            TransactionOutput(value=-1, script=b'')

    def test_equality(self):
        """Test outputs compare by value and script."""
        assert TransactionOutput(0, b'\x6a') == TransactionOutput(0, bytearray(b'\x6a'))
