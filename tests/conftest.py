"""Root conftest for test suite - adds src to Python path."""

import sys
from pathlib import Path

# Make the src layout importable without an editable install
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))
