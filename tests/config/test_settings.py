"""
Tests for environment-driven Settings.
"""

import pytest

from storeshell.config.settings import Settings
from storeshell.exceptions import ConfigurationError

_VARS = [
    "STORESHELL_ROOT",
    "STORESHELL_CAPACITY_BYTES",
    "STORESHELL_MAX_DOCUMENT_BYTES",
    "STORESHELL_ATOMIC_WRITES",
    "STORESHELL_CONFIRM_TOKENS",
    "STORESHELL_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.root == "./storage"
        assert settings.capacity_bytes is None
        assert settings.max_document_bytes == 1024
        assert settings.atomic_writes is False
        assert settings.confirm_tokens == frozenset({"Y", "YES"})
        assert settings.log_level == "WARNING"

    def test_overrides(self, clean_env):
        clean_env.setenv("STORESHELL_ROOT", "/data/store")
        clean_env.setenv("STORESHELL_CAPACITY_BYTES", "1441792")
        clean_env.setenv("STORESHELL_MAX_DOCUMENT_BYTES", "256")
        clean_env.setenv("STORESHELL_ATOMIC_WRITES", "1")
        clean_env.setenv("STORESHELL_CONFIRM_TOKENS", "si, oui ,")
        clean_env.setenv("STORESHELL_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.root == "/data/store"
        assert settings.capacity_bytes == 1441792
        assert settings.max_document_bytes == 256
        assert settings.atomic_writes is True
        assert settings.confirm_tokens == frozenset({"SI", "OUI"})
        assert settings.log_level == "DEBUG"

    def test_malformed_integer(self, clean_env):
        clean_env.setenv("STORESHELL_MAX_DOCUMENT_BYTES", "lots")

        with pytest.raises(ConfigurationError, match="must be an integer"):
            Settings()

    def test_non_positive_ceiling(self, clean_env):
        clean_env.setenv("STORESHELL_MAX_DOCUMENT_BYTES", "0")

        with pytest.raises(ConfigurationError, match="must be positive"):
            Settings()

    def test_empty_confirm_tokens(self, clean_env):
        clean_env.setenv("STORESHELL_CONFIRM_TOKENS", " , ")

        with pytest.raises(ConfigurationError, match="must not be empty"):
            Settings()

    @pytest.mark.parametrize("value", ["0", "false", "No"])
    def test_atomic_writes_disabled(self, clean_env, value):
        clean_env.setenv("STORESHELL_ATOMIC_WRITES", value)

        assert Settings().atomic_writes is False
