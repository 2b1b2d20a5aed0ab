"""Path and environment report for debugging devcontainer mounts.

Prints how the host resolves the paths that devcontainer.json mounts rely
on. Every value is optional, so the report never fails.
"""

from __future__ import annotations

import ntpath
import os
import platform
import posixpath
import re
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import ModuleType
from typing import Final

from rich.console import Console

from .host import HostPlatform, detect_platform
from .log import console

CACHE_DIR: Final[str] = ".docker-run-cache"
ENV_VARS: Final[tuple[str, ...]] = ("HOME", "USERPROFILE", "USERNAME", "USER")
EXAMPLE_PATHS: Final[tuple[str, ...]] = (
    "C:\\Users\\test\\project",
    "/home/user/project",
    ".docker-run-cache\\home\\user",
    ".docker-run-cache/home/user",
)
NOT_SET: Final[str] = "not set"

_DRIVE_PREFIX = re.compile(r"^([A-Z]):")


@dataclass(frozen=True, slots=True)
class ReportSection:
    title: str
    lines: tuple[str, ...]


def _flavour(host: HostPlatform) -> ModuleType:
    return ntpath if host is HostPlatform.WINDOWS else posixpath


def posix_path(value: str) -> str:
    """Force forward slashes, whatever the host."""
    return value.replace("\\", "/")


def normalize_path(value: str, host: HostPlatform) -> str:
    """Normalize with the host's separator rules; on POSIX a backslash is an ordinary character."""
    return _flavour(host).normpath(value)


def mount_source(
    workspace: str, home: str, host: HostPlatform, cache_dir: str = CACHE_DIR
) -> str:
    """Mirror ``home`` under the workspace cache directory.

    The home directory is appended as a whole, drive letter or leading slash
    included, rather than replacing the workspace prefix.
    """
    flavour = _flavour(host)
    return flavour.normpath(flavour.sep.join((workspace, cache_dir, home)))


def mount_target(home: str, host: HostPlatform) -> str:
    """Translate ``home`` into the path used inside the container."""
    if host is HostPlatform.WINDOWS:
        return _DRIVE_PREFIX.sub(r"/\1", posix_path(home))
    return home


def _env(environ: Mapping[str, str], name: str, fallback: str = NOT_SET) -> str:
    return environ.get(name) or fallback


def build_report(
    host: HostPlatform,
    environ: Mapping[str, str],
    cwd: str,
    home: str,
    system: str,
    platform_name: str = sys.platform,
) -> list[ReportSection]:
    """Assemble the report sections without printing anything."""
    path_lines: list[str] = []
    for index, example in enumerate(EXAMPLE_PATHS):
        if index:
            path_lines.append("")
        path_lines.extend(
            (
                f"Original: {example}",
                f"Normalized: {normalize_path(example, host)}",
                f"POSIX: {posix_path(example)}",
            )
        )

    prefix = "Windows" if host is HostPlatform.WINDOWS else "Unix"
    return [
        ReportSection(
            "Platform Information",
            (
                f"Platform: {platform_name}",
                f"OS Type: {system}",
                f"Home Directory: {home}",
                f"Current Directory: {cwd}",
            ),
        ),
        ReportSection(
            "Environment Variables",
            tuple(f"{name}: {_env(environ, name)}" for name in ENV_VARS),
        ),
        ReportSection("Path Tests", tuple(path_lines)),
        ReportSection(
            "VSCode Variable Examples",
            (
                "${localWorkspaceFolder} would resolve to: " + cwd,
                "${localEnv:HOME} would resolve to: "
                + _env(environ, "HOME", "undefined on Windows"),
                "${localEnv:USERPROFILE} would resolve to: "
                + _env(environ, "USERPROFILE", "undefined on Unix"),
            ),
        ),
        ReportSection(
            "Docker Mount Path Examples",
            (
                f"{prefix} mount source: {mount_source(cwd, home, host)}",
                f"Docker mount target: {mount_target(home, host)}",
            ),
        ),
    ]


def render_report(sections: Sequence[ReportSection], out: Console = console) -> None:
    for index, section in enumerate(sections):
        if index:
            out.print()
        out.print(section.title)
        out.print("=" * len(section.title))
        for line in section.lines:
            out.print(line)


def main() -> int:
    """Print the report for the current host. Always returns 0."""
    sections = build_report(
        host=detect_platform(),
        environ=os.environ,
        cwd=os.getcwd(),
        home=os.path.expanduser("~"),
        system=platform.system() or "unknown",
    )
    render_report(sections)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
