import pytest
from pydantic import ValidationError

from cachefs.config import Settings


def test_defaults(monkeypatch):
    for var in ("CACHEFS_CACHE_SIZE", "CACHEFS_CACHE_POLICIES", "CACHEFS_STORE_NAME"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.cache_size == 10
    assert settings.cache_policies == ["lru", "lfu"]
    assert settings.store_name == "root"


def test_reads_environment(monkeypatch):
    """Test that CACHEFS_* variables override defaults."""
    monkeypatch.setenv("CACHEFS_CACHE_SIZE", "3")
    monkeypatch.setenv("cachefs_cache_policies", '["lfu"]')
    monkeypatch.setenv("CACHEFS_LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.cache_size == 3
    assert settings.cache_policies == ["lfu"]
    assert settings.log_level == "DEBUG"


def test_negative_cache_size_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, cache_size=-1)
