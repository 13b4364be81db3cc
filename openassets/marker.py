"""
Open Assets Protocol - Marker Output Codec

This module builds and parses the marker output: the OP_RETURN output whose
single push operand carries the asset quantity list and metadata of an Open
Assets transaction.

Payload layout:
    4f41            OAP marker
    0100            protocol version
    varint          asset quantity count N
    N x varint      asset quantities, in output order
    varint          metadata length M
    M bytes         metadata
"""

import io
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from .exceptions import (
    MalformedMarkerPayloadError,
    MalformedVarIntError,
)
from .script import (
    TransactionOutput,
    create_op_return_script,
    extract_op_return_push,
)
from .varint import MAX_VARINT_VALUE, encode_varint, read_varint


# Protocol constants
OPEN_ASSETS_MAGIC = b'\x4f\x41'  # "OA"
OPEN_ASSETS_VERSION = b'\x01\x00'
OPEN_ASSETS_TAG = OPEN_ASSETS_MAGIC + OPEN_ASSETS_VERSION
MAX_ASSET_QUANTITY = MAX_VARINT_VALUE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkerPayload:
    """Asset quantities and metadata carried by a marker output."""
    quantities: Tuple[int, ...] = ()
    metadata: bytes = b''

    def __post_init__(self):
        """Validate and normalize payload fields."""
        if isinstance(self.quantities, (str, bytes)):
            raise MalformedMarkerPayloadError("Quantities must be a sequence of integers")
        try:
            quantities = tuple(self.quantities)
        except TypeError:
            raise MalformedMarkerPayloadError("Quantities must be a sequence of integers")

        for index, quantity in enumerate(quantities):
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise MalformedMarkerPayloadError(
                    f"Quantity {index} must be an integer, got {type(quantity).__name__}"
                )
            if quantity < 0 or quantity > MAX_ASSET_QUANTITY:
                raise MalformedMarkerPayloadError(
                    f"Quantity {index} out of range: {quantity} (max: {MAX_ASSET_QUANTITY})"
                )

        if isinstance(self.metadata, str):
            metadata = self.metadata.encode('utf-8')
        elif isinstance(self.metadata, (bytes, bytearray, memoryview)):
            metadata = bytes(self.metadata)
        else:
            raise MalformedMarkerPayloadError("Metadata must be bytes or str")

        object.__setattr__(self, 'quantities', quantities)
        object.__setattr__(self, 'metadata', metadata)

    @property
    def metadata_text(self) -> str:
        """Metadata decoded as UTF-8, with undecodable bytes replaced."""
        return self.metadata.decode('utf-8', errors='replace')

    def serialize(self) -> bytes:
        """Serialize the payload to marker output bytes."""
        return MarkerEncoder().encode_payload(self)

    @classmethod
    def deserialize(cls, data: bytes) -> 'MarkerPayload':
        """Parse marker output bytes into a payload."""
        return MarkerDecoder().decode_payload(data)


@dataclass(frozen=True)
class NotAMarker:
    """Classification result for an output that is not a marker output."""
    reason: str = ""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Marker:
    """Classification result for a marker output; holds the raw push operand."""
    payload: bytes

    def __bool__(self) -> bool:
        return True

    def decode(self) -> MarkerPayload:
        """Parse the operand; raises MalformedMarkerPayloadError if malformed."""
        return MarkerDecoder().decode_payload(self.payload)


MarkerClassification = Union[NotAMarker, Marker]


class MarkerEncoder:
    """
    Encoder for Open Assets marker outputs.

    Serializes a MarkerPayload and wraps it in an OP_RETURN output of value
    zero.
    """

    def __init__(self):
        """Initialize marker encoder."""
        self.tag = OPEN_ASSETS_TAG
        self.logger = logging.getLogger(__name__)

    def encode_payload(self, payload: MarkerPayload) -> bytes:
        """
        Encode a payload into the marker push operand.

        Args:
            payload: Quantities and metadata to encode

        Returns:
            Serialized payload bytes
        """
        with io.BytesIO() as stream:
            stream.write(self.tag)

            stream.write(encode_varint(len(payload.quantities)))
            for quantity in payload.quantities:
                stream.write(encode_varint(quantity))

            stream.write(encode_varint(len(payload.metadata)))
            stream.write(payload.metadata)

            return stream.getvalue()

    def create_marker_script(self, payload: MarkerPayload) -> bytes:
        """
        Create the complete marker output script.

        Args:
            payload: Payload to encode

        Returns:
            OP_RETURN script bytes
        """
        return create_op_return_script(self.encode_payload(payload))

    def create_marker_output(self, payload: MarkerPayload) -> TransactionOutput:
        """
        Create a marker output carrying the payload.

        Args:
            payload: Payload to encode

        Returns:
            Zero-value output with the marker script
        """
        script = self.create_marker_script(payload)
        self.logger.debug(
            "Built marker output: %d quantities, %d metadata bytes, %d script bytes",
            len(payload.quantities), len(payload.metadata), len(script)
        )
        return TransactionOutput(value=0, script=script)


class MarkerDecoder:
    """
    Decoder for Open Assets marker outputs.

    Classification never raises; decoding a recognized marker raises
    MalformedMarkerPayloadError when the payload does not follow the layout.
    """

    def __init__(self):
        """Initialize marker decoder."""
        self.tag = OPEN_ASSETS_TAG
        self.logger = logging.getLogger(__name__)

    def classify(self, output: Union[TransactionOutput, bytes]) -> MarkerClassification:
        """
        Classify an output (or a raw locking script).

        Args:
            output: Transaction output or its script bytes

        Returns:
            Marker with the push operand, or NotAMarker
        """
        script = output.script if isinstance(output, TransactionOutput) else bytes(output)

        data = extract_op_return_push(script)
        if data is None:
            return NotAMarker("script is not OP_RETURN followed by a single push")

        if not data.startswith(self.tag):
            return NotAMarker("push operand does not start with the Open Assets tag")

        return Marker(data)

    def decode_payload(self, data: bytes) -> MarkerPayload:
        """
        Decode marker push operand bytes.

        Args:
            data: Push operand, starting with the Open Assets tag

        Returns:
            Decoded payload

        Raises:
            MalformedMarkerPayloadError: If the operand does not follow the layout
        """
        with io.BytesIO(bytes(data)) as stream:
            tag = stream.read(len(self.tag))
            if tag != self.tag:
                raise MalformedMarkerPayloadError(
                    f"Invalid marker tag: {tag.hex()} (expected {self.tag.hex()})"
                )

            try:
                count = read_varint(stream)
                quantities = [read_varint(stream) for _ in range(count)]
                metadata_length = read_varint(stream)
            except MalformedVarIntError as e:
                self.logger.debug("Marker payload varint error: %s", e)
                raise MalformedMarkerPayloadError(f"Invalid varint in marker payload: {e}") from e

            metadata = stream.read(metadata_length)
            if len(metadata) != metadata_length:
                raise MalformedMarkerPayloadError(
                    f"Truncated metadata: expected {metadata_length} bytes, got {len(metadata)}"
                )

            if stream.read(1):
                raise MalformedMarkerPayloadError("Unexpected data after marker metadata")

        return MarkerPayload(quantities=quantities, metadata=metadata)

    def decode_output(self, output: Union[TransactionOutput, bytes]) -> Optional[MarkerPayload]:
        """
        Decode an output if it is a marker output.

        Args:
            output: Transaction output or its script bytes

        Returns:
            Decoded payload, or None if the output is not a marker
        """
        classification = self.classify(output)
        if isinstance(classification, NotAMarker):
            self.logger.debug("Not a marker output: %s", classification.reason)
            return None

        return self.decode_payload(classification.payload)


# Utility functions
def encode_payload(payload: MarkerPayload) -> bytes:
    """Serialize a payload into marker push operand bytes."""
    return MarkerEncoder().encode_payload(payload)


def decode_payload(data: bytes) -> MarkerPayload:
    """Parse marker push operand bytes into a payload."""
    return MarkerDecoder().decode_payload(data)


def build_marker_script(payload: MarkerPayload) -> bytes:
    """Build the OP_RETURN script carrying the payload."""
    return MarkerEncoder().create_marker_script(payload)


def build_marker_output(payload: MarkerPayload) -> TransactionOutput:
    """Build a zero-value marker output carrying the payload."""
    return MarkerEncoder().create_marker_output(payload)


def classify_output(output: Union[TransactionOutput, bytes]) -> MarkerClassification:
    """Classify an output as Marker or NotAMarker."""
    return MarkerDecoder().classify(output)


def is_marker_output(output: Union[TransactionOutput, bytes]) -> bool:
    """Check whether an output is shaped like a marker output."""
    return isinstance(classify_output(output), Marker)


def parse_marker_output(output: Union[TransactionOutput, bytes]) -> Optional[MarkerPayload]:
    """Decode a marker output; None when the output is not a marker."""
    return MarkerDecoder().decode_output(output)


def find_marker_output(
    outputs: Iterable[Union[TransactionOutput, bytes]]
) -> Optional[Tuple[int, MarkerPayload]]:
    """
    Locate the marker output of a transaction.

    The marker is the first output that classifies as a marker and whose
    payload decodes; malformed candidates are skipped.

    Args:
        outputs: Transaction outputs in order

    Returns:
        Tuple of (output_index, payload), or None if there is no valid marker
    """
    decoder = MarkerDecoder()
    for index, output in enumerate(outputs):
        classification = decoder.classify(output)
        if isinstance(classification, NotAMarker):
            continue

        try:
            return index, decoder.decode_payload(classification.payload)
        except MalformedMarkerPayloadError as e:
            logger.debug("Skipping malformed marker candidate at output %d: %s", index, e)

    return None
