#!/usr/bin/env python3
"""
Solve a maze file from a checkout without installing the package.

Usage:
    python scripts/solve.py --Opt maps/multilevel.txt
    python scripts/solve.py --Queue --Incoordinate --Outcoordinate maps/coordinate.txt

See `python scripts/solve.py --Help` for every switch.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mazewalk.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
