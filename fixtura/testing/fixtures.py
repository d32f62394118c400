"""
Fixtura Testing - Pytest Fixtures.

Registered as a pytest plugin through the ``pytest11`` entry point, so the
fixtures are available as soon as the package is installed.  Without the
entry point, import them in ``conftest.py``::

    from fixtura.testing.fixtures import clean_blueprints, fixtura_settings  # noqa: F401
"""

from __future__ import annotations

import pytest

from fixtura.config import override_settings
from fixtura.registry import BlueprintRegistry


@pytest.fixture
def clean_blueprints():
    """
    Clear every class's blueprints before and after the test.

    Yields the :class:`BlueprintRegistry` class for inspection.
    """
    BlueprintRegistry.clear_all()
    yield BlueprintRegistry
    BlueprintRegistry.clear_all()


@pytest.fixture
def fixtura_settings():
    """
    Fixture factory for overriding settings.

    Usage::

        def test_serials(fixtura_settings):
            with fixtura_settings(serial_format="{:06d}"):
                assert Post.make().slug.endswith("000001")
    """
    return override_settings
