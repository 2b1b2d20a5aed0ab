#!/usr/bin/env python3
"""Print platform and path details to debug devcontainer mount configuration."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from devcontainer_init.diagnostics import main  # noqa: E402 # pylint: disable=wrong-import-position

if __name__ == "__main__":
    raise SystemExit(main())
