#!/usr/bin/env python3
"""
Open Assets Protocol - Command Line Interface

Encode and decode marker outputs, derive and parse asset IDs, and convert
between payment and Open Assets addresses.
"""

from typing import Optional

import click

from openassets.networks import Network

from oacli import __version__
from oacli.commands.address import address
from oacli.commands.asset import asset_id
from oacli.commands.config import config
from oacli.commands.marker import marker
from oacli.context import CLIContext, pass_context


@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--config-file', '-c',
              type=click.Path(dir_okay=False),
              help='Path to configuration file')
@click.option('--profile', '-p',
              type=click.Choice(['mainnet', 'testnet', 'regtest']),
              help='Configuration profile')
@click.option('--output-format', '-o',
              type=click.Choice(['table', 'json', 'yaml']),
              help='Output format')
@click.option('--network', '-n',
              type=click.Choice([network.value for network in Network]),
              help='Network for version bytes (default from configuration)')
@click.option('--verbose', '-v',
              count=True,
              help='Increase verbosity (-v for INFO, -vv for DEBUG)')
@click.version_option(__version__, '--version', message='OAP CLI v%(version)s')
@pass_context
def cli(ctx: CLIContext, config_file: Optional[str], profile: Optional[str],
        output_format: Optional[str], network: Optional[str], verbose: int):
    """
    Open Assets Protocol (OAP) Command Line Interface

    Examples:
        oap marker encode -q 100 -q 0 -q 123 -m "u=https://cpr.sm/5YgSU1Pg-q"
        oap marker decode 6a244f4101000364007b1b753d...
        oap asset-id derive --address 1F2AQr6oqNtcJQ6p9SiCLQTrHuM9en44H8
        oap address to-oa 1F2AQr6oqNtcJQ6p9SiCLQTrHuM9en44H8
    """
    ctx.config_file = config_file
    ctx.verbose = verbose
    ctx.setup_logging()
    ctx.load_config(profile)

    configured_verbosity = ctx.get_config('cli.verbose', 0)
    ctx.verbose = verbose or (configured_verbosity if isinstance(configured_verbosity, int) else 0)
    ctx.setup_logging(ctx.get_config('logging.format'))

    ctx.output_format = output_format or ctx.get_config('cli.output_format', 'table')
    try:
        ctx.network = Network.from_name(network) if network else ctx.config_manager.get_network()
    except ValueError as e:
        raise click.UsageError(str(e))

    ctx.logger.debug(f"CLI initialized: network={ctx.network.value}, format={ctx.output_format}")


cli.add_command(marker)
cli.add_command(asset_id)
cli.add_command(address)
cli.add_command(config)


def main():
    """Console script entry point."""
    cli(prog_name='oap')


if __name__ == '__main__':
    main()
