#!/usr/bin/env python3
"""
Asset ID Commands for the Open Assets CLI

Commands for deriving asset IDs from issuing scripts or addresses and for
parsing textual asset IDs.
"""

from typing import Optional

import click

from openassets.address import parse_address
from openassets.asset_id import AssetId
from openassets.networks import Network

from oacli.commands import parse_hex
from oacli.context import CLIContext, handle_cli_error, pass_context


@click.group('asset-id')
@pass_context
def asset_id(ctx: CLIContext):
    """
    Asset ID commands.

    Derive asset IDs from issuing scripts and inspect textual asset IDs.
    """
    ctx.logger.debug("Asset ID command group invoked")


@asset_id.command('derive')
@click.option('--script', 'script_hex', help='Issuing output script (hex)')
@click.option('--address', help='Issuing address (payment or Open Assets)')
@pass_context
@handle_cli_error
def derive(ctx: CLIContext, script_hex: Optional[str], address: Optional[str]):
    """
    Derive the asset ID for an issuing script or address.

    With --script the network comes from --network or the configuration; with
    --address it comes from the address itself.

    Examples:
        oap asset-id derive --script 76a914010966776006953d5567439e5e39f86a0d273bee88ac
        oap -n testnet asset-id derive --script a914f9d499817e88ef7b10a88673296c6d6df2f4292d87
        oap asset-id derive --address 1F2AQr6oqNtcJQ6p9SiCLQTrHuM9en44H8
    """
    if bool(script_hex) == bool(address):
        raise click.UsageError("Specify exactly one of --script or --address")

    if address:
        decoded = parse_address(address)
        script = decoded.script()
        network = decoded.network
    else:
        script = parse_hex(script_hex, '--script')
        network = ctx.network

    derived = AssetId.from_script(script, network)
    ctx.logger.info(f"Derived asset ID on {network.value}")

    ctx.output({
        'asset_id': str(derived),
        'network': derived.network.value,
        'script': script.hex(),
        'hash160': derived.hash.hex(),
    })


@asset_id.command('parse')
@click.argument('text')
@pass_context
@handle_cli_error
def parse(ctx: CLIContext, text: str):
    """
    Parse a textual asset ID.

    Examples:
        oap asset-id parse ALn3aK1fSuG27N96UGYB1kUYUpGKRhBuBC
    """
    parsed = AssetId.parse(text)

    ctx.output({
        'asset_id': str(parsed),
        'network': parsed.network.value,
        'version': f"0x{parsed.version:02x}",
        'hash160': parsed.hash.hex(),
    })
