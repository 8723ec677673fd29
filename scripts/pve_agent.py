#!/usr/bin/env python3
"""
Run the pve-mcp agent CLI from a source checkout without installing it.
"""
from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from pve_mcp.agent.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
