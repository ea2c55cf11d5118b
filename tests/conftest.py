"""Root conftest: shared fixtures and markers."""

from __future__ import annotations

import os

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "mysql: requires running MySQL server")


def pytest_collection_modifyitems(config, items):
    if os.environ.get("SQLGATE_TEST_MYSQL"):
        return

    skip_mysql = pytest.mark.skip(reason="MySQL not available (set SQLGATE_TEST_MYSQL=1)")
    for item in items:
        if "mysql" in item.keywords:
            item.add_marker(skip_mysql)


@pytest.fixture(autouse=True)
def _isolated_query_log(tmp_path, monkeypatch):
    """Keep query-log writes out of the real home directory."""
    monkeypatch.setattr("sqlgate.querylog._LOG_ROOT", tmp_path / "querylog")
