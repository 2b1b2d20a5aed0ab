"""Dispatcher configuration.

Defaults match the files shipped in .devcontainer/. An optional init.yaml
next to the companion scripts may override them:

    windows_script: init.ps1
    unix_script: init.sh
    powershell: powershell.exe
    unix_shell: /bin/sh
    log_level: INFO

Environment Variables:
- DEVCONTAINER_SCRIPT_DIR: directory holding the companion scripts
  (default: ./.devcontainer)
- DEVCONTAINER_INIT_LOG_LEVEL: logging level, wins over init.yaml
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Final

import yaml

from .errors import ConfigError

logger: Final[logging.Logger] = logging.getLogger(__name__)

CONFIG_FILENAME: Final[str] = "init.yaml"
SCRIPT_DIR_ENV: Final[str] = "DEVCONTAINER_SCRIPT_DIR"
LOG_LEVEL_ENV: Final[str] = "DEVCONTAINER_INIT_LOG_LEVEL"
DEFAULT_SCRIPT_DIR: Final[str] = ".devcontainer"

_OVERRIDABLE: Final[frozenset[str]] = frozenset(
    {"windows_script", "unix_script", "powershell", "unix_shell", "log_level"}
)


@dataclass(frozen=True, slots=True)
class InitConfig:
    """Immutable settings for a single dispatcher run."""

    script_dir: Path
    windows_script: str = "init.ps1"
    unix_script: str = "init.sh"
    powershell: str = "powershell.exe"
    unix_shell: str = "/bin/sh"
    script_mode: int = 0o755
    log_level: str = "WARNING"

    @property
    def workspace_root(self) -> Path:
        """The directory one level above the script directory."""
        return self.script_dir.parent

    @property
    def windows_script_path(self) -> Path:
        return self.script_dir / self.windows_script

    @property
    def unix_script_path(self) -> Path:
        return self.script_dir / self.unix_script


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load init.yaml, rejecting anything but a flat mapping of known keys.

    Raises:
        ConfigError: If the file cannot be parsed, the root is not a mapping,
            names a setting that does not exist, or gives a non-string value
    """
    try:
        raw_data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc

    if raw_data is None:
        return {}
    if not isinstance(raw_data, dict):
        raise ConfigError(f"{path} must contain a mapping at the root")

    unknown = sorted(str(key) for key in raw_data if key not in _OVERRIDABLE)
    if unknown:
        raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")
    invalid = sorted(str(key) for key, value in raw_data.items() if not isinstance(value, str))
    if invalid:
        raise ConfigError(f"Settings in {path} must be strings: {', '.join(invalid)}")
    return raw_data


def _resolve_script_dir(script_dir: Path | None, environ: Mapping[str, str]) -> Path:
    if script_dir is not None:
        return Path(script_dir).resolve()
    configured = environ.get(SCRIPT_DIR_ENV)
    if configured:
        return Path(configured).resolve()
    return (Path.cwd() / DEFAULT_SCRIPT_DIR).resolve()


def load_config(
    script_dir: Path | None = None, environ: Mapping[str, str] | None = None
) -> InitConfig:
    """Build the dispatcher configuration.

    Args:
        script_dir: Directory holding the companion scripts; falls back to
            DEVCONTAINER_SCRIPT_DIR, then ./.devcontainer
        environ: Environment mapping, os.environ when omitted

    Returns:
        Frozen InitConfig with init.yaml and environment overrides applied
    """
    env = os.environ if environ is None else environ
    config = InitConfig(script_dir=_resolve_script_dir(script_dir, env))

    config_path = config.script_dir / CONFIG_FILENAME
    if config_path.is_file():
        logger.debug("Loading overrides from %s", config_path)
        config = replace(config, **_load_yaml(config_path))

    log_level = env.get(LOG_LEVEL_ENV)
    if log_level:
        config = replace(config, log_level=log_level)
    return config
