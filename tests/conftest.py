"""Pytest bootstrap for local source imports.

Ensure ``import symbolexport`` resolves to the local package even when the
``pytest`` console script runs with a sys.path that excludes the project root.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)
