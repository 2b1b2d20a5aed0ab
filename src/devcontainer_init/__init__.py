"""Devcontainer initialization helpers.

This package contains the canonical implementations behind the
.devcontainer/ entry points:
- dispatcher: runs the platform-specific companion init script
- diagnostics: prints path and environment details for mount debugging
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["cli", "config", "diagnostics", "dispatcher", "errors", "host", "log"]
