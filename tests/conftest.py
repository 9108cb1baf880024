"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import os

import pytest

from pidfinder.config import get_finder_settings, runtime
from tests.helpers.fake_process_table import FakeProcessTable
from tests.helpers.procfs_builder import build_procfs


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep developer .env files and PIDFINDER_* variables out of tests."""
    for name in list(os.environ):
        if name.startswith("PIDFINDER_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    get_finder_settings.cache_clear()
    yield
    runtime._DEFAULT_VALUES = None
    get_finder_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def nginx_table() -> FakeProcessTable:
    return FakeProcessTable(
        {
            1: "/usr/bin/init",
            42: "/usr/bin/nginx",
            43: "/usr/bin/NGINX",
        }
    )


@pytest.fixture
def procfs_root(tmp_path):
    return build_procfs(
        tmp_path / "proc",
        {
            "1": "/usr/bin/init",
            "42": "/usr/bin/nginx",
            "43": "/usr/bin/NGINX",
            "abc": None,
        },
    )
