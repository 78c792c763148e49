"""Tests for the benchtimer version information."""

from datetime import datetime

import benchtimer
from benchtimer.version.benchtimer_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(
        major=1,
        minor=2,
        patch=3,
        hash="abcdef123456",
        date=datetime(2023, 1, 1),
    )

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.hash_short(4) == "abcd"
    assert v.date_string("%Y") == "2023"
    assert "1.2.3" in v.full_version()
    assert "abcdef12" in v.full_version()


def test_benchtimer_version_instance():
    """The package exposes the global version and its string form."""
    from benchtimer.version.benchtimer_version import BENCHTIMER_VERSION

    assert isinstance(BENCHTIMER_VERSION, Version)
    assert benchtimer.__version__ == str(BENCHTIMER_VERSION)
    assert len(BENCHTIMER_VERSION.hash) == 64
