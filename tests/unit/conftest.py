from pathlib import Path

import pytest


def pytest_collection_modifyitems(items):
    """Mark every test collected under tests/unit as a unit test."""
    unit_dir = Path(__file__).parent
    for item in items:
        if unit_dir in Path(item.fspath).parents:
            item.add_marker(pytest.mark.unit)
