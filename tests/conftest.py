"""
Shared test fixtures and helpers for the Fixtura test suite.
"""

import pytest

# Import fixtures so pytest can discover them without the installed plugin
from fixtura.testing.fixtures import (  # noqa: F401
    clean_blueprints,
    fixtura_settings,
)
from fixtura.config import FixturaSettings, set_settings


@pytest.fixture(autouse=True)
def _default_settings():
    """Run every test with default settings, whatever the environment holds."""
    set_settings(FixturaSettings())
    yield
    set_settings(FixturaSettings())
