"""
Configuration management for fib_report.

Settings come from a YAML file merged over built-in defaults. String values
may reference environment variables as ``${VAR}`` or ``${VAR:-default}``.
Only ambient behaviour (logging, timing) is configurable; the report itself
always covers the first ten numbers.
"""

import copy
import logging
import os
import re
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FIB_REPORT_CONFIG"

_ENV_PATTERN = re.compile(r'\$\{([^:}]+)(?::-([^}]*))?\}')

DEFAULT_CONFIG: Dict[str, Any] = {
    'logging': {
        'level': 'WARNING',
        'format': 'json',
    },
    'report': {
        'timing': False,
    },
}


def _merge(orig: Any, new: Any) -> Any:
    """Recursively merge *new* over *orig*, returning a fresh structure."""
    if isinstance(orig, dict) and isinstance(new, dict):
        result = copy.deepcopy(orig)
        for k, v in new.items():
            result[k] = _merge(orig[k], v) if k in orig else copy.deepcopy(v)
        return result
    return copy.deepcopy(new)


def _parse_scalar(text: str) -> Any:
    """Read *text* as a YAML scalar, keeping the string if it is not one."""
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError:
        return text
    if value is None or isinstance(value, (dict, list)):
        return text
    return value


def expand_env_vars(config: Any) -> Any:
    """Expand ``${VAR:-default}`` references in every string value.

    A string that is exactly one reference is then typed like any other YAML
    scalar, so ``${FLAG:-false}`` becomes ``False`` rather than ``"false"``.
    """
    if isinstance(config, dict):
        return {k: expand_env_vars(v) for k, v in config.items()}
    elif isinstance(config, list):
        return [expand_env_vars(item) for item in config]
    elif isinstance(config, str):
        def replacer(match):
            return os.environ.get(match.group(1), match.group(2) or '')
        expanded = _ENV_PATTERN.sub(replacer, config)
        if expanded and _ENV_PATTERN.fullmatch(config):
            return _parse_scalar(expanded)
        return expanded
    else:
        return config


class ConfigManager:
    """Holds the effective configuration."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._config: Dict[str, Any] = {}
        self.reload()

    def reload(self):
        """Rebuild the configuration from defaults and the config file."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        if self.path:
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f)
            except FileNotFoundError:
                logger.warning({"event": "config_missing", "path": self.path})
                loaded = None
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {self.path}: {e}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigError(f"Cannot read config file {self.path}: {e}") from e

            if loaded is not None:
                if not isinstance(loaded, dict):
                    raise ConfigError(f"Config file {self.path} must contain a mapping")
                config = _merge(config, loaded)
                logger.info({"event": "config_loaded", "path": self.path})
        self._config = expand_env_vars(config)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a nested value using dot notation.

        Args:
            key_path: Path of the key, e.g. ``"logging.level"``
            default: Returned when any part of the path is missing

        Returns:
            The configured value or *default*
        """
        value = self._config
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def get_logging_config(self) -> Dict[str, Any]:
        return self.get('logging', {})

    @property
    def config(self) -> Dict[str, Any]:
        """A copy of the whole configuration."""
        return copy.deepcopy(self._config)


def load_config(path: Optional[str] = None) -> ConfigManager:
    """Build a ConfigManager from *path* or the ``FIB_REPORT_CONFIG`` variable."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    return ConfigManager(path)
