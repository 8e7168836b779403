"""Shared fixtures.

Every test runs against an empty, isolated config directory so a developer's
own settings.json never leaks into results.
"""

import pytest

from shussan.sdk import clear_rules_cache, load_rules


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point SHUSSAN_CALC_CONFIG_PATH at an empty temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("SHUSSAN_CALC_CONFIG_PATH", str(config_dir))
    yield config_dir
    clear_rules_cache()


@pytest.fixture
def rules():
    """Built-in 2024 rules."""
    return load_rules(2024)
