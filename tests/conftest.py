"""
Shared pytest configuration

Tests under tests/utils are tagged ``utils`` so they can be selected with
``-m utils``; tests marked ``linux_only`` are skipped off x86_64 Linux.
"""

import platform
import sys

import pytest

from exchange_it.config import reload_config


ON_X86_64_LINUX = sys.platform.startswith("linux") and platform.machine() == "x86_64"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config, items):
    skip_linux_only = pytest.mark.skip(reason="requires x86_64 Linux")
    
    for item in items:
        if item.path.parent.name == "utils":
            item.add_marker(pytest.mark.utils)
        if "linux_only" in item.keywords and not ON_X86_64_LINUX:
            item.add_marker(skip_linux_only)


@pytest.fixture
def fresh_config(monkeypatch):
    """Reload configuration after env changes; restore it afterwards"""
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(f"EXCHANGE_IT_{key.upper()}", value)
        return reload_config()
    
    yield _reload
    monkeypatch.undo()
    reload_config()
