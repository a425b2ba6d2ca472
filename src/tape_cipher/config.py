# file: src/tape_cipher/config.py

"""
Configuration loading.

Configuration is a YAML mapping merged over built-in defaults, so a user
file only needs the keys it changes.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "tape": {
            "default": "1,2,3,4,5",
        },
        "generator": {
            "default_length": 5,
            "max_value": 255,
            "random_seed": None,
        },
        "io": {
            "encoding": "utf-8",
        },
    }


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(config_path: str) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML config file. None loads the packaged
                     default_config.yaml.

    Returns:
        config: Configuration dictionary (defaults with file values merged in)

    Raises:
        ConfigurationError: If the file exists but is not a valid YAML mapping
    """
    defaults = get_default_config()

    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return defaults
        config_path = DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return defaults

    config = merge_config(defaults, _read_yaml(config_path))
    logger.info(f"Loaded configuration from {config_path}")
    return config
