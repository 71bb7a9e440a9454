"""
blas1 Configuration Loader
==========================

Load the backend selection from blas1.yaml.

Configuration never changes what a kernel computes, only which backend
serves the package-level functions (blas1.axpy, blas1.dot, ...).

File format:

    blas1:
      backend: reference    # or: numpy

Usage:
    from blas1.config.loader import load_config

    config = load_config()                 # first file found, else defaults
    config = load_config('my/blas1.yaml')  # explicit file

Environment:
    BLAS1_CONFIG   path to a config file (checked first)
    BLAS1_BACKEND  overrides the 'backend' key from any source
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from blas1.validation import BLASError

logger = logging.getLogger(__name__)


# Packaged defaults file
CONFIG_PATH = Path(__file__).parent / 'blas1.yaml'

CONFIG_ENV = 'BLAS1_CONFIG'
BACKEND_ENV = 'BLAS1_BACKEND'


class ConfigError(BLASError):
    """Raised when a configuration file exists but cannot be used."""


def get_default_config() -> Dict[str, Any]:
    """Default configuration."""
    return {
        'backend': 'reference',
    }


def get_config_path() -> Path:
    """Get config file path."""
    candidates = []
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        candidates.append(Path(env_path))
    candidates.extend([
        Path('blas1.yaml'),
        CONFIG_PATH,
    ])

    for path in candidates:
        if path.exists():
            return path

    return CONFIG_PATH


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration, merged over defaults.

    Args:
        path: Config file. If None, the first existing candidate from
              get_config_path() is used.

    Returns:
        Configuration dict with keys:
        - backend

    Raises:
        ConfigError: if the file is not valid YAML or not a mapping
    """
    config_file = Path(path) if path is not None else get_config_path()
    config = get_default_config()

    if config_file.exists():
        with open(config_file) as f:
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"{config_file}: invalid YAML: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(f"{config_file}: expected a mapping at top level")

        section = raw.get('blas1', {}) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"{config_file}: 'blas1' must be a mapping")

        # Merge: file overrides defaults
        config = {**config, **section}
        logger.debug("loaded config from %s", config_file)
    else:
        logger.debug("no config at %s, using defaults", config_file)

    env_backend = os.environ.get(BACKEND_ENV)
    if env_backend:
        config['backend'] = env_backend

    if not isinstance(config.get('backend'), str):
        raise ConfigError(f"'backend' must be a string, got {config.get('backend')!r}")

    return config
