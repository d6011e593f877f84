"""
Root test configuration.

Puts src/ on the path so the tests run from a plain checkout.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))
sys.path.insert(0, str(PROJECT_ROOT))

pytest_plugins = ["pytester"]
