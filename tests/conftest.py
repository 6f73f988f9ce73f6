"""Pytest configuration to make the project root importable.

Lets ``import buildpath`` work when tests run from a source checkout without
an editable install.
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Keep the developer's shell settings out of the tests.
    for key in ("BUILDPATH_BASE_DIR", "BUILDPATH_PROFILE", "BUILDPATH_VERBOSE", "DEBUG"):
        monkeypatch.delenv(key, raising=False)
    from buildpath.util import log

    monkeypatch.setattr(log, "_VERBOSE", False)
