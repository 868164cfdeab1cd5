"""
Configuration for unit tests.

Unit tests are fast, isolated tests of a single estimation stage. They build
small synthetic RDBES tables whose expected results can be worked out by
hand.
"""

from pathlib import Path

import pytest


def pytest_collection_modifyitems(items):
    """Mark tests in this directory as unit tests."""
    unit_dir = Path(__file__).parent
    for item in items:
        if unit_dir in item.path.parents:
            item.add_marker(pytest.mark.unit)
