"""
Typed view of the ``control`` configuration section.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import ConfigError
from ..resolver import DEFAULT_PROCESS_NAME


@dataclass(frozen=True)
class ControlSettings:
    """
    Signal control settings.

    Attributes:
        process_name: Program name passed to the discovery facility
        disable_signals: When True the in-process listener installs nothing
        pgrep: Discovery executable
        timeout: Seconds to wait for discovery, None to wait indefinitely
    """

    process_name: str = DEFAULT_PROCESS_NAME
    disable_signals: bool = False
    pgrep: str = "pgrep"
    timeout: float | None = None

    @classmethod
    def from_config(cls, config: Any, section: str = "control") -> ControlSettings:
        """
        Build settings from a Config (or dict) section.

        Raises:
            ConfigError: If a value has the wrong type
        """
        current = config.get(section) if isinstance(config, dict) else None
        if current is None:
            current = {}
        if not isinstance(current, dict):
            raise ConfigError("section must be a mapping", section=section)

        process_name = current.get("process_name", DEFAULT_PROCESS_NAME)
        if not isinstance(process_name, str) or not process_name:
            raise ConfigError("process_name must be a non-empty string", section=section)

        disable_signals = current.get("disable_signals", False)
        if not isinstance(disable_signals, bool):
            raise ConfigError("disable_signals must be a boolean", section=section)

        timeout = current.get("timeout")
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise ConfigError("timeout must be a number", section=section)
            timeout = float(timeout)

        return cls(
            process_name=process_name,
            disable_signals=disable_signals,
            pgrep=str(current.get("pgrep", "pgrep")),
            timeout=timeout,
        )
