"""
Open Assets Protocol - Variable-Length Integers

Unsigned LEB128: each byte carries 7 data bits, least-significant group
first, with the high bit set on every byte except the last. Only the minimal
encoding of a value is accepted, and at most 9 bytes (63 data bits) are read,
which caps values at the maximum Open Assets asset quantity.
"""

from typing import BinaryIO, Tuple

from .exceptions import MalformedVarIntError, VarIntOverflowError


MAX_VARINT_BYTES = 9
MAX_VARINT_VALUE = (1 << (7 * MAX_VARINT_BYTES)) - 1  # 2**63 - 1

_DATA_MASK = 0x7F
_CONTINUATION_BIT = 0x80


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned integer as minimal LEB128.

    Args:
        value: Integer in the range 0 to MAX_VARINT_VALUE

    Returns:
        Encoded bytes (1 to 9 bytes)

    Raises:
        VarIntOverflowError: If value is not an integer or lies outside
            0 to MAX_VARINT_VALUE (2**63 - 1). Nine 7-bit groups hold 63 bits,
            so u64 values from 2**63 to 2**64 - 1 are not encodable.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise VarIntOverflowError(value, f"Value must be an integer, got {type(value).__name__}")
    if value < 0 or value > MAX_VARINT_VALUE:
        raise VarIntOverflowError(value)

    result = bytearray()
    while True:
        byte = value & _DATA_MASK
        value >>= 7
        if value:
            result.append(byte | _CONTINUATION_BIT)
        else:
            result.append(byte)
            return bytes(result)


def decode_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a LEB128 integer from a buffer.

    Args:
        data: Buffer containing the encoded integer
        offset: Position of the first encoded byte

    Returns:
        Tuple of (value, bytes_consumed)

    Raises:
        MalformedVarIntError: If the buffer ends before the terminating byte,
            the encoding is longer than MAX_VARINT_BYTES, or it is not minimal
    """
    value = 0
    position = offset

    for index in range(MAX_VARINT_BYTES):
        if position >= len(data):
            raise MalformedVarIntError(
                f"Truncated varint at offset {offset}: buffer ended after {index} bytes"
            )

        byte = data[position]
        position += 1
        value |= (byte & _DATA_MASK) << (7 * index)

        if not byte & _CONTINUATION_BIT:
            if byte == 0 and index > 0:
                raise MalformedVarIntError(
                    f"Non-minimal varint at offset {offset}: {index + 1} bytes for value {value}"
                )
            return value, index + 1

    raise MalformedVarIntError(
        f"Varint at offset {offset} exceeds {MAX_VARINT_BYTES} bytes"
    )


def read_varint(stream: BinaryIO) -> int:
    """
    Read one LEB128 integer from a binary stream.

    Args:
        stream: Readable binary stream positioned at the integer

    Returns:
        Decoded value; the stream is left just past the integer
    """
    encoded = bytearray()
    while len(encoded) < MAX_VARINT_BYTES:
        chunk = stream.read(1)
        if not chunk:
            break
        encoded += chunk
        if not chunk[0] & _CONTINUATION_BIT:
            break

    value, _ = decode_varint(bytes(encoded))
    return value
