"""Pytest configuration ensuring project root and fixtures are importable.

Adds repository root and tests/fixtures to sys.path explicitly to avoid
interpreter/path quirks.
"""
from __future__ import annotations

import importlib
import logging
import os
import sys
import textwrap
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "tests" / "fixtures"
for _p in (ROOT, FIXTURES):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch):  # noqa: D401
    """Ensure global config/env/metrics state does not leak between tests.

    - Point TAGSCAN_CONFIG_DIR at the repository configs
    - Drop TAGSCAN__* overrides from the outer environment
    - Clear aggregated config cache, metrics and event listeners
    """
    from tagscan import metrics
    from tagscan.config import clear_config_cache
    from tagscan.events import reset_listeners_for_tests

    monkeypatch.setenv("TAGSCAN_CONFIG_DIR", str(ROOT / "configs"))
    for key in list(os.environ):
        if key.startswith("TAGSCAN__"):
            monkeypatch.delenv(key)
    clear_config_cache()
    metrics.reset_for_tests()
    try:
        yield
    finally:
        clear_config_cache()
        reset_listeners_for_tests()
        tagscan_logger = logging.getLogger("tagscan")
        for handler in list(tagscan_logger.handlers):
            tagscan_logger.removeHandler(handler)


@pytest.fixture
def make_assembly(tmp_path, monkeypatch):
    """Write throwaway modules under tmp_path and make them importable.

    Usage: make_assembly({"pkg/__init__.py": "...", "pkg/mod.py": "..."})
    Modules imported from tmp_path are purged from sys.modules afterwards.
    """
    monkeypatch.syspath_prepend(str(tmp_path))

    def _make(files: dict[str, str]) -> Path:
        for rel, source in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding="utf-8")
        importlib.invalidate_caches()
        return tmp_path

    yield _make
    for name, module in list(sys.modules.items()):
        origin = getattr(module, "__file__", None) or ""
        if origin.startswith(str(tmp_path)):
            sys.modules.pop(name, None)
