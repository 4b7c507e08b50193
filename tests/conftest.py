"""Test configuration for tincture."""

import pytest

import tincture_engine


@pytest.fixture(autouse=True)
def strict_ieee():
    """Every test starts and ends with the strict IEEE kernels active."""
    tincture_engine.set_strict_ieee(True)
    yield
    tincture_engine.set_strict_ieee(True)
