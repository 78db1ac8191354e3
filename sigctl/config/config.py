"""
YAML configuration loading with environment variable overrides.

Example file:

    control:
      process_name: gnatsd
      disable_signals: false
    logging:
      level: info
      file: /var/log/gnatsd.log
"""

import os
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ConfigError
from .constants import DEFAULT_ENV_PREFIX, ENV_PATH_SEPARATOR, MAX_CONFIG_SIZE_BYTES


def _check_file_size(path: Path) -> None:
    """Refuse files larger than MAX_CONFIG_SIZE_BYTES."""
    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            "configuration file too large",
            path=str(path),
            size=size,
            limit=MAX_CONFIG_SIZE_BYTES,
        )


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        _check_file_size(path)
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"unable to read configuration: {e.strerror}", path=str(path)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("configuration root must be a mapping", path=str(path))
    return data


class Config(dict):
    """
    Configuration dictionary loaded from a YAML file.

    Supports dotted lookups and environment variable overrides. Override names
    use the prefix followed by the upper-cased path, with components separated
    by a double underscore:

        SIGCTL_LOGGING__LEVEL=debug
        SIGCTL_CONTROL__DISABLE_SIGNALS=true

    Args:
        fname: Path to the YAML file, or None for an empty config
        enable_env_overrides: Whether to apply environment overrides
        env_prefix: Prefix of override variables (default: "SIGCTL_")
    """

    def __init__(
        self,
        fname: str | Path | None = None,
        enable_env_overrides: bool = True,
        env_prefix: str = DEFAULT_ENV_PREFIX,
    ) -> None:
        super().__init__()
        self._enable_env_overrides = enable_env_overrides
        self._env_prefix = env_prefix
        self._config_path: Path | None = None
        if fname is not None:
            self._config_path = Path(fname).resolve()
        self._load()

    @property
    def path(self) -> Path | None:
        return self._config_path

    def _load(self) -> None:
        self.replace(self._read())

    def _read(self) -> dict[str, Any]:
        data = _read_yaml(self._config_path) if self._config_path else {}
        if self._enable_env_overrides:
            data = self._apply_env_overrides(data)
        return data

    def replace(self, data: dict[str, Any]) -> None:
        """Swap the whole contents for data."""
        self.clear()
        self.update(data)

    def load_fresh(self) -> "Config":
        """
        Load the same file with the same options into a new Config.

        The current instance is left untouched, so callers can validate the
        result before adopting it with replace().

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        if self._config_path is None:
            raise ConfigError("config was not loaded from a file")
        return Config(
            self._config_path,
            enable_env_overrides=self._enable_env_overrides,
            env_prefix=self._env_prefix,
        )

    def reload(self) -> "Config":
        """
        Reload configuration from disk.

        The current contents are kept when loading fails.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        self.replace(self.load_fresh())
        return self

    def get(self, key: str, default: Any = None) -> Any:  # type: ignore[override]
        """
        Look up a value by dotted path.

        Example:
            config.get("logging.level", "info")
        """
        current: Any = self
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = dict.__getitem__(current, part)
            else:
                return default
        return current

    def has(self, key: str) -> bool:
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def _apply_env_overrides(self, data: dict[str, Any]) -> dict[str, Any]:
        for path, value in self.get_env_overrides().items():
            self._set_nested_value(data, path.split("."), value)
        return data

    def get_env_overrides(self) -> dict[str, Any]:
        """Environment overrides that apply, keyed by dotted path."""
        if not self._enable_env_overrides:
            return {}
        overrides = {}
        for key, value in os.environ.items():
            if not key.startswith(self._env_prefix) or key == self._env_prefix:
                continue
            parts = key[len(self._env_prefix) :].lower().split(ENV_PATH_SEPARATOR)
            overrides[".".join(parts)] = self._convert_env_value(value)
        return overrides

    @staticmethod
    def _set_nested_value(data: dict, path: list[str], value: Any) -> None:
        current = data
        for part in path[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[path[-1]] = value

    @staticmethod
    def _convert_env_value(value: str) -> bool | int | float | str | None:
        """Convert an environment string to bool, int, float, None or str."""
        lowered = value.lower()
        if lowered in ("null", "none", ""):
            return None
        if lowered in ("true", "false"):
            return lowered == "true"
        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            return value
