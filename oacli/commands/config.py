#!/usr/bin/env python3
"""
Configuration Commands for the Open Assets CLI

Commands for inspecting the merged configuration and its sources.
"""

import click

from oacli.context import CLIContext, pass_context


@click.group()
@pass_context
def config(ctx: CLIContext):
    """
    Configuration management commands.
    """
    ctx.logger.debug("Config command group invoked")


@config.command('show')
@click.option('--sources', is_flag=True, help='List the configuration sources that were loaded')
@pass_context
def show(ctx: CLIContext, sources: bool):
    """Show the merged configuration."""
    if sources:
        ctx.output(ctx.config_manager.get_sources())
        return

    ctx.output(ctx.config)


@config.command('validate')
@pass_context
def validate(ctx: CLIContext):
    """Validate the merged configuration."""
    errors = ctx.config_manager.validate()
    if errors:
        for error in errors:
            click.echo(f"Error: {error}", err=True)
        raise SystemExit(1)

    click.echo("Configuration is valid")
