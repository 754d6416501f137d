"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from storeshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.root: str = self._get_env("STORESHELL_ROOT", "./storage")
        self.capacity_bytes: Optional[int] = self._get_optional_int(
            "STORESHELL_CAPACITY_BYTES"
        )
        self.max_document_bytes: int = self._get_int(
            "STORESHELL_MAX_DOCUMENT_BYTES", 1024
        )
        self.atomic_writes: bool = self._get_bool("STORESHELL_ATOMIC_WRITES", False)
        self.confirm_tokens: frozenset[str] = frozenset(
            token.strip().upper()
            for token in self._get_env("STORESHELL_CONFIRM_TOKENS", "Y,YES").split(",")
            if token.strip()
        )
        self.log_level: str = self._get_env("STORESHELL_LOG_LEVEL", "WARNING").upper()

        if self.max_document_bytes <= 0:
            raise ConfigurationError("STORESHELL_MAX_DOCUMENT_BYTES must be positive")
        if not self.confirm_tokens:
            raise ConfigurationError("STORESHELL_CONFIRM_TOKENS must not be empty")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if malformed."""
        value = self._get_optional_int(key)
        return default if value is None else value

    def _get_optional_int(self, key: str) -> Optional[int]:
        value = os.getenv(key)
        if value is None or not value.strip():
            return None
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got {value!r}"
            )

    def _get_bool(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() not in ("0", "false", "no", "")
