"""
Shared fixtures

Settings are built explicitly so that MDHTML_* variables in the developer's
environment cannot change expected output.
"""

import pytest

from mdhtml.config import AppSettings
from mdhtml.lib.resolver import InlineResolver


@pytest.fixture
def settings(monkeypatch):
    for name in ("MDHTML_BASE_URL", "MDHTML_STYLE", "MDHTML_LINE_SEPARATOR"):
        monkeypatch.delenv(name, raising=False)
    return AppSettings(_env_file=None)


@pytest.fixture
def resolver(settings):
    return InlineResolver(settings=settings)
