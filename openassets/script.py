"""
Open Assets Protocol - Script Utilities

This module provides the small amount of Bitcoin script handling the protocol
layer needs: push-data encoding, script iteration, OP_RETURN construction and
extraction, and the standard P2PKH/P2SH locking scripts used for asset IDs.
"""

import struct
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .exceptions import InvalidScriptError


# Opcodes
OP_0 = 0x00
OP_PUSHDATA1 = 0x4c
OP_PUSHDATA2 = 0x4d
OP_PUSHDATA4 = 0x4e
OP_RETURN = 0x6a
OP_DUP = 0x76
OP_EQUAL = 0x87
OP_EQUALVERIFY = 0x88
OP_HASH160 = 0xa9
OP_CHECKSIG = 0xac

MAX_DIRECT_PUSH = 75


@dataclass(frozen=True)
class TransactionOutput:
    """A transaction output as seen by the protocol layer."""
    value: int
    script: bytes

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Output value cannot be negative: {self.value}")
        object.__setattr__(self, 'script', bytes(self.script))


@dataclass(frozen=True)
class ScriptElement:
    """A single opcode in a script, with its data when it is a push."""
    opcode: int
    data: Optional[bytes] = None

    @property
    def is_push_data(self) -> bool:
        return self.data is not None


def encode_push_data(data: bytes) -> bytes:
    """
    Encode data as a minimal push operation.

    Args:
        data: Data to push

    Returns:
        Push opcode, length prefix (if any) and data
    """
    length = len(data)
    if length == 0:
        return bytes([OP_0])
    if length <= MAX_DIRECT_PUSH:
        return bytes([length]) + data
    if length <= 0xff:
        return bytes([OP_PUSHDATA1, length]) + data
    if length <= 0xffff:
        return bytes([OP_PUSHDATA2]) + struct.pack('<H', length) + data
    if length <= 0xffffffff:
        return bytes([OP_PUSHDATA4]) + struct.pack('<I', length) + data
    raise InvalidScriptError(f"Push data too large: {length} bytes")


def iter_script(script: bytes) -> Iterator[ScriptElement]:
    """
    Iterate over the opcodes of a script.

    Args:
        script: Raw script bytes

    Yields:
        ScriptElement for every opcode; pushes carry their data

    Raises:
        InvalidScriptError: If a push runs past the end of the script
    """
    pc = 0
    while pc < len(script):
        opcode = script[pc]
        pc += 1

        if opcode == OP_0:
            yield ScriptElement(opcode, b'')
            continue

        if opcode <= MAX_DIRECT_PUSH:
            data_len = opcode
        elif opcode == OP_PUSHDATA1:
            if pc + 1 > len(script):
                raise InvalidScriptError("Missing length byte for OP_PUSHDATA1")
            data_len = script[pc]
            pc += 1
        elif opcode == OP_PUSHDATA2:
            if pc + 2 > len(script):
                raise InvalidScriptError("Missing length bytes for OP_PUSHDATA2")
            data_len = struct.unpack('<H', script[pc:pc + 2])[0]
            pc += 2
        elif opcode == OP_PUSHDATA4:
            if pc + 4 > len(script):
                raise InvalidScriptError("Missing length bytes for OP_PUSHDATA4")
            data_len = struct.unpack('<I', script[pc:pc + 4])[0]
            pc += 4
        else:
            yield ScriptElement(opcode)
            continue

        if pc + data_len > len(script):
            raise InvalidScriptError(
                f"Insufficient data for push at position {pc}: "
                f"need {data_len} bytes, have {len(script) - pc}"
            )
        yield ScriptElement(opcode, bytes(script[pc:pc + data_len]))
        pc += data_len


def parse_script(script: bytes) -> List[ScriptElement]:
    """Parse a script into a list of elements."""
    return list(iter_script(script))


def create_op_return_script(data: bytes) -> bytes:
    """
    Create OP_RETURN script with data.

    Args:
        data: Data to embed as the single push operand

    Returns:
        OP_RETURN script
    """
    return bytes([OP_RETURN]) + encode_push_data(data)


def extract_op_return_push(script: bytes) -> Optional[bytes]:
    """
    Return the operand of a script shaped exactly as OP_RETURN <push>.

    Args:
        script: Script bytes

    Returns:
        The pushed data, or None for any other shape (including truncated scripts)
    """
    if not script or script[0] != OP_RETURN:
        return None

    try:
        elements = parse_script(script[1:])
    except InvalidScriptError:
        return None

    if len(elements) != 1 or not elements[0].is_push_data:
        return None

    return elements[0].data


def op_return_data(script: bytes) -> bytes:
    """
    Extract data from OP_RETURN script.

    Args:
        script: Script bytes

    Returns:
        The first push after OP_RETURN, or b'' when there is none
    """
    if not script or script[0] != OP_RETURN:
        return b''

    try:
        for element in iter_script(script[1:]):
            return element.data if element.is_push_data else b''
    except InvalidScriptError:
        pass
    return b''


def create_p2pkh_script(pubkey_hash: bytes) -> bytes:
    """
    Create P2PKH output script.

    Args:
        pubkey_hash: 20-byte public key hash

    Returns:
        OP_DUP OP_HASH160 <hash> OP_EQUALVERIFY OP_CHECKSIG
    """
    if len(pubkey_hash) != 20:
        raise InvalidScriptError(f"Invalid pubkey hash length: {len(pubkey_hash)}")

    return bytes([OP_DUP, OP_HASH160, 20]) + pubkey_hash + bytes([OP_EQUALVERIFY, OP_CHECKSIG])


def create_p2sh_script(script_hash: bytes) -> bytes:
    """
    Create P2SH output script.

    Args:
        script_hash: 20-byte script hash

    Returns:
        OP_HASH160 <hash> OP_EQUAL
    """
    if len(script_hash) != 20:
        raise InvalidScriptError(f"Invalid script hash length: {len(script_hash)}")

    return bytes([OP_HASH160, 20]) + script_hash + bytes([OP_EQUAL])
