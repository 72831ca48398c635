#!/usr/bin/env python3
"""Solve Rubik's cage games and manage evaluation maps.

Example:
    python scripts/evaluator.py evaluate 4 4 evaluations.bin --progress
    python scripts/evaluator.py filter evaluations.bin hard.bin 3
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rubikcage.cli import main


if __name__ == '__main__':
    sys.exit(main())
