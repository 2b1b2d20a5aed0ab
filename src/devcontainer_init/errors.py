"""Exceptions raised by the devcontainer init dispatcher."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dispatcher import CommandResult


class InitError(RuntimeError):
    """Base class for failures that abort initialization with exit code 1."""


class ConfigError(InitError):
    """Raised when init.yaml cannot be loaded or contains unknown settings."""


class MissingScriptError(InitError):
    """Raised when the companion script for the host platform is absent."""

    def __init__(self, kind: str, path: Path) -> None:
        super().__init__(f"{kind} script not found: {path}")
        self.kind = kind
        self.path = path


class ScriptFailedError(InitError):
    """Raised when the companion script exits non-zero or cannot be launched."""

    def __init__(self, result: CommandResult) -> None:
        if result.returncode is None:
            detail = result.error or "could not be started"
        else:
            detail = f"exited with status {result.returncode}"
        super().__init__(f"Initialization script failed: {detail}")
        self.result = result
