#!/usr/bin/env python3
"""Cross-platform devcontainer initializeCommand.

Thin wrapper around devcontainer_init.dispatcher; init.ps1 and init.sh are
resolved from this file's directory and run from the workspace root.
"""

from __future__ import annotations

import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
# Add src to path so the hook works before the package is installed
sys.path.append(str(SCRIPT_DIR.parent / "src"))

from devcontainer_init.dispatcher import main  # noqa: E402 # pylint: disable=wrong-import-position

if __name__ == "__main__":
    raise SystemExit(main(SCRIPT_DIR))
