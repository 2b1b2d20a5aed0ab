"""Cross-platform devcontainer initialization.

Detects the host platform and runs the matching companion script from the
workspace root: init.ps1 through PowerShell on Windows, init.sh elsewhere.
Any failure ends the run with exit code 1.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .config import InitConfig, load_config
from .errors import InitError, MissingScriptError, ScriptFailedError
from .host import HostPlatform, detect_platform
from .log import configure_logging, console, err_console

logger: Final[logging.Logger] = logging.getLogger(__name__)

SUCCESS_MESSAGE: Final[str] = "Initialization completed successfully"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a single companion script invocation."""

    command: tuple[str, ...]
    success: bool
    returncode: int | None = None
    error: str | None = None


def _log(message: str) -> None:
    console.print(message)


def _warn(message: str) -> None:
    err_console.print(message)


def companion_script(config: InitConfig, host: HostPlatform) -> Path:
    """Return the one companion script that applies to ``host``."""
    if host is HostPlatform.WINDOWS:
        return config.windows_script_path
    return config.unix_script_path


def make_executable(script: Path, mode: int = 0o755) -> bool:
    """Set ``mode`` on ``script``; a failure is reported and otherwise ignored."""
    try:
        script.chmod(mode)
    except OSError as exc:
        _warn(f"Could not set execute permission on {script.name}: {exc}")
        return False
    return True


def build_command(script: Path, host: HostPlatform, config: InitConfig) -> list[str]:
    if host is HostPlatform.WINDOWS:
        return [
            config.powershell,
            "-NoProfile",
            "-ExecutionPolicy",
            "Bypass",
            "-File",
            str(script),
        ]
    # Through the shell: scripts without a shebang or exec bit still run.
    return [config.unix_shell, str(script)]


def run_command(command: Sequence[str], cwd: Path | None = None) -> CommandResult:
    """Run ``command`` with inherited standard streams and wait for it."""
    cmd = tuple(command)
    display = " ".join(cmd)
    _log(f"Running: {display}")
    try:
        completed = subprocess.run(list(cmd), cwd=cwd, check=False)
    except OSError as exc:
        result = CommandResult(cmd, success=False, error=str(exc))
    else:
        if completed.returncode == 0:
            return CommandResult(cmd, success=True, returncode=0)
        result = CommandResult(
            cmd,
            success=False,
            returncode=completed.returncode,
            error=f"Command exited with status {completed.returncode}",
        )
    _warn(f"Failed to run command: {display}")
    _warn(f"   {result.error}")
    return result


def run_init(config: InitConfig, host: HostPlatform) -> None:
    """Run the companion script for ``host`` from the workspace root.

    Raises:
        MissingScriptError: If the companion script does not exist; nothing
            is executed in that case
        ScriptFailedError: If the script exits non-zero or cannot be launched
    """
    workspace_root = config.workspace_root
    logger.debug("Changing directory to workspace root %s", workspace_root)
    os.chdir(workspace_root)

    _log(f"Detected {host.label} environment")
    script = companion_script(config, host)
    if not script.is_file():
        kind = "PowerShell" if host is HostPlatform.WINDOWS else "Shell"
        raise MissingScriptError(kind, script)

    if host is HostPlatform.UNIX:
        make_executable(script, config.script_mode)

    result = run_command(build_command(script, host, config), cwd=workspace_root)
    if not result.success:
        raise ScriptFailedError(result)


def main(script_dir: Path | None = None) -> int:
    """Run the devcontainer initialization and return the process exit code."""
    try:
        config = load_config(script_dir)
        configure_logging(config.log_level)
        run_init(config, detect_platform())
    except InitError as exc:
        logger.debug("Initialization aborted", exc_info=True)
        _warn(f"Error: {exc}")
        return 1

    _log(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
