"""
Configuration for integration tests.

Integration tests run the whole estimation chain, from age readings to the
grand total, on a small but complete set of RDBES tables.
"""

from pathlib import Path

import pytest


def pytest_collection_modifyitems(items):
    """Mark tests in this directory as integration tests."""
    integration_dir = Path(__file__).parent
    for item in items:
        if integration_dir in item.path.parents:
            item.add_marker(pytest.mark.integration)
