"""Root test configuration: isolate each test's working directory and environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from a clean tmp directory with no MDMIGRATE_* env vars set."""
    for name in list(os.environ):
        if name.startswith("MDMIGRATE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
