"""
Shared pytest fixtures.
"""
import pytest

from progressors import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config loading at an empty temp dir and clear colour switches."""
    monkeypatch.setattr(config, "_CONFIG_PATH", tmp_path / "config.toml")
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("TERM", raising=False)
    return tmp_path / "config.toml"
