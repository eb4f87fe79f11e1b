#!/usr/bin/env python3
"""
AIRMAP Render Script

Usage:
    python scripts/render.py [--config CONFIG_FILE] [--click CODE] [--output FILE]
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from airmap.cli import main


if __name__ == "__main__":
    sys.exit(main())
