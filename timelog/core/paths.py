#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Timelog project.

All paths are resolved relative to the project root:
    ROOT/
    ├── timelog/       # Package source
    ├── data/          # Local store (timelog.db)
    └── logs/          # Application logs

These are defaults only; the CLI accepts --db-path and --log-dir overrides.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/timelog/core/paths.py.

    Raises:
        RuntimeError: If the resolved root does not contain the package
    """
    current_file = Path(__file__).resolve()
    root = current_file.parent.parent.parent

    if not (root / "timelog").is_dir():
        raise RuntimeError(
            f"Cannot determine valid project root. "
            f"Expected {root / 'timelog'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()
DATA_DIR = ROOT / "data"

# --- Database ---
DB_DIR = DATA_DIR
DB_PATH = DB_DIR / "timelog.db"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
