#!/usr/bin/env python3
"""
Configuration for the Open Assets CLI

Settings are layered: built-in defaults, an optional network profile, one
configuration file (YAML or JSON) and finally OAP_* environment variables.
Later layers override earlier ones key by key.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import yaml

from openassets.networks import Network


# Searched in order when no file is given explicitly; the first hit wins
CONFIG_SEARCH_PATHS = [
    Path.cwd() / '.oap.yml',
    Path.cwd() / '.oap.json',
    Path.home() / '.oap' / 'config.yml',
    Path.home() / '.oap' / 'config.json',
]

ENV_PREFIX = 'OAP_'

OUTPUT_FORMATS = ['table', 'json', 'yaml']

DEFAULT_CONFIG = {
    'network': {
        'type': 'mainnet',
    },
    'cli': {
        'output_format': 'table',
        'verbose': 0,
    },
    'logging': {
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
}

PROFILES = {
    'mainnet': {
        'network': {'type': 'mainnet'},
    },
    'testnet': {
        'network': {'type': 'testnet'},
    },
    'regtest': {
        'network': {'type': 'regtest'},
        'cli': {'verbose': 2},
    },
}

Layer = Tuple[str, Dict[str, Any]]


class ConfigurationManager:
    """Layered CLI settings with dot-path access."""

    def __init__(self, config_file: Optional[str] = None, profile: Optional[str] = None):
        """
        Args:
            config_file: Configuration file to use instead of the search paths
            profile: Network profile name (mainnet, testnet, regtest)
        """
        self.logger = logging.getLogger('oap-cli.config')
        self.config_file = config_file
        self.profile = profile
        self._merged: Optional[Dict[str, Any]] = None
        self._sources: List[str] = []

    def load(self) -> Dict[str, Any]:
        """
        Merge every layer, caching the result until reset().

        Returns:
            Merged settings
        """
        if self._merged is not None:
            return self._merged

        merged: Dict[str, Any] = {}
        sources = []
        for source, layer in self._layers():
            merged = merge_settings(merged, layer)
            sources.append(source)

        self._merged = merged
        self._sources = sources
        return merged

    def _layers(self) -> Iterator[Layer]:
        yield 'defaults', DEFAULT_CONFIG

        if self.profile:
            profile = PROFILES.get(self.profile)
            if profile is None:
                self.logger.warning(f"Ignoring unknown profile: {self.profile}")
            else:
                yield f"profile:{self.profile}", profile

        file_layer = self._file_layer()
        if file_layer:
            yield file_layer

        environment = self._environment_layer()
        if environment:
            yield 'environment', environment

    def _file_layer(self) -> Optional[Layer]:
        if self.config_file:
            candidates = [Path(self.config_file)]
        else:
            candidates = [path for path in CONFIG_SEARCH_PATHS if path.exists()][:1]

        for path in candidates:
            data = self._read_file(path)
            if data:
                self.logger.debug(f"Using configuration file {path}")
                return f"file:{path}", data
        return None

    def _read_file(self, path: Path) -> Optional[Dict[str, Any]]:
        """Read one YAML or JSON file; unreadable files are logged and skipped."""
        if not path.exists():
            self.logger.warning(f"Configuration file does not exist: {path}")
            return None

        readers = {'.yml': yaml.safe_load, '.yaml': yaml.safe_load, '.json': json.load}
        reader = readers.get(path.suffix)
        if reader is None:
            self.logger.warning(f"Unsupported configuration file type: {path}")
            return None

        try:
            with open(path, 'r') as f:
                data = reader(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            self.logger.error(f"Cannot read configuration file {path}: {e}")
            return None

        if data is not None and not isinstance(data, dict):
            self.logger.error(f"Configuration file {path} must contain a mapping")
            return None
        return data

    def _environment_layer(self) -> Dict[str, Any]:
        """Settings from OAP_* variables, e.g. OAP_CLI_OUTPUT_FORMAT -> cli.output_format."""
        layer: Dict[str, Any] = {}

        for name, raw in os.environ.items():
            if not name.startswith(ENV_PREFIX):
                continue

            path = self._env_key_path(name[len(ENV_PREFIX):].lower().split('_'))
            node = layer
            for key in path[:-1]:
                node = node.setdefault(key, {})
            node[path[-1]] = self._parse_env_value(raw)

        return layer

    def _env_key_path(self, parts: List[str]) -> List[str]:
        """Group name parts into known keys, longest match first."""
        path = []
        known: Optional[Dict[str, Any]] = DEFAULT_CONFIG
        index = 0

        while index < len(parts):
            end = index + 1
            if isinstance(known, dict):
                for candidate_end in range(len(parts), index, -1):
                    if '_'.join(parts[index:candidate_end]) in known:
                        end = candidate_end
                        break

            key = '_'.join(parts[index:end])
            known = known.get(key) if isinstance(known, dict) else None
            path.append(key)
            index = end

        return path

    def _parse_env_value(self, value: str) -> Union[str, int, float, bool]:
        lowered = value.lower()
        if lowered in ('true', 'yes'):
            return True
        if lowered in ('false', 'no'):
            return False

        try:
            return json.loads(value)
        except ValueError:
            return value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Look up a setting by dotted path, e.g. 'network.type'.

        Args:
            key_path: Dotted key path
            default: Returned when any part of the path is missing

        Returns:
            The setting, or default
        """
        node = self.load()
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def set(self, key_path: str, value: Any):
        """Override a setting by dotted path for the lifetime of this manager."""
        *parents, leaf = key_path.split('.')
        node = self.load()
        for key in parents:
            node = node.setdefault(key, {})
        node[leaf] = value

    def save(self, path: Optional[str] = None, format: str = 'yaml'):
        """
        Write the merged settings to a file.

        Args:
            path: Destination; defaults to .oap.yml or .oap.json in the
                working directory
            format: 'yaml' or 'json'
        """
        settings = self.load()
        target = Path(path) if path else Path.cwd() / ('.oap.yml' if format == 'yaml' else '.oap.json')
        target.parent.mkdir(parents=True, exist_ok=True)

        with open(target, 'w') as f:
            if format == 'yaml':
                yaml.safe_dump(settings, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(settings, f, indent=2)

        self.logger.info(f"Wrote configuration to {target}")

    def validate(self) -> List[str]:
        """
        Check the merged settings.

        Returns:
            One message per problem; empty when the settings are usable
        """
        problems = []

        network_type = self.get('network.type')
        try:
            Network.from_name(str(network_type))
        except ValueError:
            problems.append(f"Invalid network type: {network_type}")

        output_format = self.get('cli.output_format')
        if output_format not in OUTPUT_FORMATS:
            problems.append(f"Invalid output format: {output_format}")

        verbose = self.get('cli.verbose')
        if isinstance(verbose, bool) or not isinstance(verbose, int) or verbose < 0:
            problems.append(f"Verbosity must be a non-negative integer: {verbose}")

        return problems

    def get_network(self) -> Network:
        return Network.from_name(str(self.get('network.type', 'mainnet')))

    def get_sources(self) -> List[str]:
        """Names of the layers that contributed to the merged settings."""
        self.load()
        return list(self._sources)

    def reset(self):
        """Drop cached settings so the next access re-reads every layer."""
        self._merged = None
        self._sources = []


def merge_settings(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a deep copy of base with override merged in, recursing into mappings."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge_settings(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
