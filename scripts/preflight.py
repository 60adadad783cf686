"""Run the preflight checks from a source checkout: python scripts/preflight.py"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from preflight.main import main

if __name__ == "__main__":
    sys.exit(main())
