"""
Open Assets CLI Commands Package

Command modules for the Open Assets Protocol CLI.
"""

import click

__all__ = ['marker', 'asset', 'address', 'config', 'parse_hex']


def parse_hex(value: str, param_name: str) -> bytes:
    """Parse a hex command line value, reporting bad input as a parameter error."""
    cleaned = value.strip()
    if cleaned.startswith('0x'):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        raise click.BadParameter(f"Invalid hex string: {value}", param_hint=param_name)
