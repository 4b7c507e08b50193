"""Tests for project metadata."""

import tincture_about


def test_metadata_summary():
    meta = tincture_about.metadata_summary()
    assert meta["title"] == "Tincture"
    assert meta["version"] == tincture_about.__version__
    assert meta["license"] == "LGPL-3.0-or-later"
    assert set(meta) == {"title", "version", "license", "description", "copyright"}


def test_version_format():
    parts = tincture_about.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)
