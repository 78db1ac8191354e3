"""
Configuration package.

- Config: YAML file loading with SIGCTL_* environment overrides
- ControlSettings: typed view of the ``control`` section
"""

from .config import Config
from .constants import DEFAULT_ENV_PREFIX, MAX_CONFIG_SIZE_BYTES
from .settings import ControlSettings

__all__ = [
    "Config",
    "ControlSettings",
    "DEFAULT_ENV_PREFIX",
    "MAX_CONFIG_SIZE_BYTES",
]
