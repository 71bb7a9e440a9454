"""blas1 configuration: backend selection from blas1.yaml."""

from .loader import (
    load_config,
    get_default_config,
    get_config_path,
    ConfigError,
)

__all__ = [
    'load_config',
    'get_default_config',
    'get_config_path',
    'ConfigError',
]
