#!/usr/bin/env python3
"""
Shared state for the Open Assets CLI

Every command receives the same CLIContext: the merged configuration, the
selected network and output format, and the CLI logger. Commands report
protocol errors through handle_cli_error.
"""

import functools
import json
import logging
import sys
import traceback
from typing import Any, Dict, Optional

import click
import yaml

from oacrypto.exceptions import CryptoError
from openassets.exceptions import OpenAssetsError
from openassets.networks import Network

from .config import ConfigurationManager


VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]

# Library packages whose loggers follow the CLI verbosity
LIBRARY_LOGGERS = ('openassets', 'oacrypto')


class CLIContext:
    """State shared by the oap command group and its subcommands."""

    def __init__(self):
        self.config_file: Optional[str] = None
        self.output_format: str = "table"
        self.verbose: int = 0
        self.network: Network = Network.MAINNET
        self.config: Dict[str, Any] = {}
        self.config_manager: Optional[ConfigurationManager] = None
        self.logger: logging.Logger = logging.getLogger('oap-cli')

    def setup_logging(self, log_format: Optional[str] = None):
        """Send CLI logs to stderr at WARNING, INFO or DEBUG for -v counts 0, 1, 2+."""
        level = VERBOSITY_LEVELS[max(0, min(self.verbose, len(VERBOSITY_LEVELS) - 1))]

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            log_format or '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))

        self.logger = logging.getLogger('oap-cli')
        self.logger.setLevel(level)
        self.logger.handlers = [handler]

        # Library debug output is only shown at -vv
        for name in LIBRARY_LOGGERS:
            library_logger = logging.getLogger(name)
            library_logger.setLevel(level)
            library_logger.handlers = [handler] if level == logging.DEBUG else []

    def load_config(self, profile: Optional[str] = None):
        """Load layered configuration and warn about invalid settings."""
        self.config_manager = ConfigurationManager(self.config_file, profile)
        self.config = self.config_manager.load()
        for problem in self.config_manager.validate():
            self.logger.warning(f"Configuration: {problem}")

    def get_config(self, key: str, default: Any = None) -> Any:
        if self.config_manager is None:
            return default
        return self.config_manager.get(key, default)

    def output(self, data: Any, format_override: Optional[str] = None):
        """
        Print a command result.

        Args:
            data: Mapping, list or scalar to print
            format_override: Format to use instead of the selected one
        """
        renderers = {
            'json': self._render_json,
            'yaml': self._render_yaml,
            'table': self._render_table,
        }
        render = renderers.get(format_override or self.output_format)
        if render is None:
            click.echo(str(data))
        else:
            render(data)

    def _render_json(self, data: Any):
        click.echo(json.dumps(data, indent=2, default=str))

    def _render_yaml(self, data: Any):
        click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip())

    def _render_table(self, data: Any):
        """One 'key value' row per mapping entry; lists print one item per line."""
        if isinstance(data, dict):
            for key, value in data.items():
                if isinstance(value, list):
                    value = ", ".join(str(item) for item in value)
                click.echo(f"{key:20} {value}")
        elif isinstance(data, list):
            for item in data:
                click.echo(item)
        else:
            click.echo(str(data))


pass_context = click.make_pass_decorator(CLIContext, ensure=True)


def handle_cli_error(func):
    """Turn protocol and encoding errors into 'Error: ...' on stderr and exit status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (OpenAssetsError, CryptoError, ValueError) as e:
            cli_context = click.get_current_context().find_object(CLIContext)

            click.echo(f"Error: {e}", err=True)
            if cli_context and cli_context.verbose >= 2:
                click.echo(traceback.format_exc(), err=True)
            else:
                click.echo("Run with -vv for the full traceback.", err=True)

            sys.exit(1)

    return wrapper
