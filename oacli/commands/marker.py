#!/usr/bin/env python3
"""
Marker Output Commands for the Open Assets CLI

Commands for building marker outputs from asset quantities and metadata, and
for recognizing and decoding marker outputs from raw scripts.
"""

from typing import Optional, Tuple

import click

from openassets.marker import (
    Marker,
    MarkerDecoder,
    MarkerEncoder,
    MarkerPayload,
)

from oacli.commands import parse_hex
from oacli.context import CLIContext, handle_cli_error, pass_context


@click.group()
@pass_context
def marker(ctx: CLIContext):
    """
    Marker output commands.

    Build and decode the OP_RETURN output carrying asset quantities and metadata.
    """
    ctx.logger.debug("Marker command group invoked")


@marker.command('encode')
@click.option('--quantity', '-q', 'quantities', type=int, multiple=True,
              help='Asset quantity for the next output (repeat in output order)')
@click.option('--metadata', '-m', default='', help='Metadata text (UTF-8)')
@click.option('--metadata-hex', help='Metadata as raw hex bytes')
@pass_context
@handle_cli_error
def encode(ctx: CLIContext, quantities: Tuple[int, ...], metadata: str,
           metadata_hex: Optional[str]):
    """
    Build a marker output.

    Examples:
        oap marker encode -q 100 -q 0 -q 123 -m "u=https://cpr.sm/5YgSU1Pg-q"
    """
    if metadata and metadata_hex:
        raise click.UsageError("Use either --metadata or --metadata-hex, not both")

    metadata_bytes = parse_hex(metadata_hex, '--metadata-hex') if metadata_hex else metadata.encode('utf-8')
    payload = MarkerPayload(quantities=list(quantities), metadata=metadata_bytes)

    encoder = MarkerEncoder()
    output = encoder.create_marker_output(payload)
    ctx.logger.info(f"Encoded marker with {len(payload.quantities)} quantities")

    ctx.output({
        'payload': encoder.encode_payload(payload).hex(),
        'script': output.script.hex(),
        'value': output.value,
    })


@marker.command('decode')
@click.argument('data')
@click.option('--payload', 'is_payload', is_flag=True,
              help='DATA is the marker payload rather than the output script')
@pass_context
@handle_cli_error
def decode(ctx: CLIContext, data: str, is_payload: bool):
    """
    Decode a marker output script (hex).

    Prints the asset quantities and metadata, or reports that the script is
    not a marker output.

    Examples:
        oap marker decode 6a244f4101000364007b1b753d68747470733a2f2f6370722e736d2f35596753553150672d71
    """
    raw = parse_hex(data, 'DATA')
    decoder = MarkerDecoder()

    if is_payload:
        payload = decoder.decode_payload(raw)
    else:
        classification = decoder.classify(raw)
        if not isinstance(classification, Marker):
            ctx.output({'marker': False, 'reason': classification.reason})
            return
        payload = classification.decode()

    ctx.output({
        'marker': True,
        'quantities': list(payload.quantities),
        'metadata': payload.metadata_text,
        'metadata_hex': payload.metadata.hex(),
    })
