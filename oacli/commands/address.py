#!/usr/bin/env python3
"""
Address Commands for the Open Assets CLI

Commands for converting between payment addresses and Open Assets addresses.
"""

import click

from openassets.address import parse_address, to_open_assets_address, to_payment_address

from oacli.context import CLIContext, handle_cli_error, pass_context


@click.group()
@pass_context
def address(ctx: CLIContext):
    """
    Address conversion commands.

    Convert P2PKH/P2SH addresses to and from their Open Assets form.
    """
    ctx.logger.debug("Address command group invoked")


@address.command('to-oa')
@click.argument('payment_address')
@pass_context
@handle_cli_error
def to_oa(ctx: CLIContext, payment_address: str):
    """
    Convert a payment address to an Open Assets address.

    Examples:
        oap address to-oa 1F2AQr6oqNtcJQ6p9SiCLQTrHuM9en44H8
    """
    ctx.output(to_open_assets_address(payment_address))


@address.command('to-payment')
@click.argument('oa_address')
@pass_context
@handle_cli_error
def to_payment(ctx: CLIContext, oa_address: str):
    """
    Convert an Open Assets address back to a payment address.

    Examples:
        oap address to-payment akQz3f1v9JrnJAeGBC4pNzGNRdWXKan4U6E
    """
    ctx.output(to_payment_address(oa_address))


@address.command('info')
@click.argument('text')
@pass_context
@handle_cli_error
def info(ctx: CLIContext, text: str):
    """Show both forms of an address, its network, kind and hash."""
    decoded = parse_address(text)

    ctx.output({
        'payment_address': decoded.to_payment_address(),
        'open_assets_address': decoded.to_open_assets_address(),
        'network': decoded.network.value,
        'kind': decoded.kind.value,
        'hash160': decoded.hash.hex(),
    })
