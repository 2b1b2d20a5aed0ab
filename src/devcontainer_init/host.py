"""Host platform detection."""

from __future__ import annotations

import sys
from enum import StrEnum
from functools import lru_cache


class HostPlatform(StrEnum):
    """Platform families the init scripts are written for."""

    WINDOWS = "windows"
    UNIX = "unix"

    @property
    def label(self) -> str:
        return "Windows" if self is HostPlatform.WINDOWS else "Unix/Linux"


@lru_cache(maxsize=1)
def detect_platform() -> HostPlatform:
    """Resolve the host platform once per process."""
    if sys.platform == "win32":
        return HostPlatform.WINDOWS
    return HostPlatform.UNIX
