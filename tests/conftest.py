"""Shared test configuration."""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Ensure the project root (which contains the ``pushgate`` package) is importable
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Every test runs against a private in-memory database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("APP_TIMEZONE", "UTC")
