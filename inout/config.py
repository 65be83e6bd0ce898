# inout/config.py
"""
YAML configuration for the formula-order command line.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml
from cerberus import Validator

from core.exceptions import ConfigError

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

CONFIG_SCHEMA: Dict[str, Any] = {
    'log_level': {
        'type': 'string',
        'coerce': 'upper',
        'allowed': LOG_LEVELS,
        'default': 'WARNING',
    },
    'log_file': {
        'type': 'string',
        'nullable': True,
        'default': None,
    },
    'show_cycle': {
        'type': 'boolean',
        'default': False,
    },
    # Raises sys.getrecursionlimit() for deeply nested expressions.
    'recursion_limit': {
        'type': 'integer',
        'min': 100,
        'nullable': True,
        'default': None,
    },
}


class _ConfigValidator(Validator):
    def _normalize_coerce_upper(self, value):
        return value.upper() if isinstance(value, str) else value


@dataclass
class Config:
    log_level: str = 'WARNING'
    log_file: Optional[str] = None
    show_cycle: bool = False
    recursion_limit: Optional[int] = None

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def validate_config(data: Dict[str, Any]) -> Config:
    """
    Validate a configuration mapping and fill in defaults.

    Raises:
        ConfigError: If validation fails.
    """
    validator = _ConfigValidator(CONFIG_SCHEMA)
    if not validator.validate(data):
        raise ConfigError("Configuration validation failed: " + str(validator.errors))
    return Config(**validator.document)


def load_config(path: Optional[str] = None) -> Config:
    """
    Load the YAML configuration at `path`; without a path the defaults apply.

    Raises:
        ConfigError: If the file cannot be read, is not a mapping or fails validation.
    """
    if path is None:
        return validate_config({})

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in '{path}': {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration '{path}' must be a mapping.")
    return validate_config(data)
