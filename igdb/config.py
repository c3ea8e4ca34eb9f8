"""Client configuration: JSON config file with environment variable overrides.

Config file keys (``config.json``)::

    {
        "igdb_api_key":  "YOUR_IGDB_API_KEY_HERE",
        "igdb_root_url": "https://api-endpoint.igdb.com/",
        "timeout":       10,
        "log_level":     "WARNING"
    }

Environment variables take precedence over config file values:

- ``IGDB_API_KEY``  overrides ``igdb_api_key``
- ``IGDB_ROOT_URL`` overrides ``igdb_root_url``
- ``IGDB_TIMEOUT``  overrides ``timeout``
- ``IGDB_LOG_LEVEL`` overrides ``log_level``
"""
import json
import logging
import os
from typing import Any, Dict

from .errors import ConfigError

DEFAULT_ROOT_URL = 'https://api-endpoint.igdb.com/'
DEFAULT_TIMEOUT = 10  # seconds

_ENV_OVERRIDES = {
    'IGDB_API_KEY': 'igdb_api_key',
    'IGDB_ROOT_URL': 'igdb_root_url',
    'IGDB_TIMEOUT': 'timeout',
    'IGDB_LOG_LEVEL': 'log_level',
}

_PLACEHOLDER_VALUES = {'DEMO_MODE', 'DEMO_KEY', 'YOUR_IGDB_API_KEY_HERE'}

_log = logging.getLogger('igdb.config')


def is_placeholder_value(value: str) -> bool:
    """Return True when *value* cannot serve as an IGDB user-key.

    Blank keys, the ``YOUR_...`` template text from ``config_template.json``
    and the demo markers all count.
    """
    if not value or not isinstance(value, str):
        return True
    return value.startswith('YOUR_') or value in _PLACEHOLDER_VALUES


def load_config(config_path: str = 'config.json') -> Dict[str, Any]:
    """Load configuration from a JSON file with environment variable support.

    A missing file is not an error as long as the environment provides the
    API key.

    Returns:
        Dict with ``igdb_api_key``, ``igdb_root_url``, ``timeout`` and
        ``log_level`` keys.

    Raises:
        ConfigError: The file cannot be read or is not a JSON object, the
            timeout is not a positive number, or no usable API key was found.
    """
    config: Dict[str, Any] = {
        'igdb_root_url': DEFAULT_ROOT_URL,
        'timeout': DEFAULT_TIMEOUT,
        'log_level': 'WARNING',
    }

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"error parsing config file '{config_path}': {e}") from e
        except OSError as e:
            raise ConfigError(f"cannot read config file '{config_path}': {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(
                f"config file '{config_path}' must hold a JSON object, "
                f"not {type(data).__name__}")
        config.update(data)
    else:
        _log.debug("Config file %s not found, using environment only", config_path)

    for env_name, key in _ENV_OVERRIDES.items():
        if os.getenv(env_name):
            config[key] = os.getenv(env_name)

    if is_placeholder_value(config.get('igdb_api_key', '')):
        raise ConfigError(
            'please configure your IGDB API key in config.json '
            'or set the IGDB_API_KEY environment variable')

    try:
        config['timeout'] = float(config['timeout'])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid timeout {config['timeout']!r}") from e
    if config['timeout'] <= 0:
        raise ConfigError('timeout must be positive')

    root = str(config['igdb_root_url'])
    config['igdb_root_url'] = root if root.endswith('/') else root + '/'
    return config
