"""
Shared fixtures.
"""

import os

import pytest

import tagtree.config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point XDG at an empty dir, drop TAGTREE_* env vars and the cached config."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    for key in [k for k in os.environ if k.startswith("TAGTREE_")]:
        monkeypatch.delenv(key)
    tagtree.config._config = None
    yield tmp_path
    tagtree.config._config = None
