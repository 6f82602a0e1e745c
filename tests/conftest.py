# tests/conftest.py
# This file is part of Kleene - Three-Valued Logic
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Kleene test suites.

The configuration handles:
- Python path setup for module imports
- Logger initialization before any output capture starts
- Common fixtures over the value domain
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability and create the shared logger.

    The logger binds its handler to the stream that is current when it is
    first created, so it is created here rather than inside a test that
    captures output.

    Yields:
        None: Control to test execution
    """
    try:
        import kleene
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    utils.get_logger()

    yield


@pytest.fixture
def all_values():
    """Every member of the domain in ascending order.

    Returns:
        List[Value]: FALSE, UNKNOWN, TRUE
    """
    from kleene import Value

    return [Value.FALSE, Value.UNKNOWN, Value.TRUE]
