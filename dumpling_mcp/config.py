"""
Runtime configuration.

Settings are read once at startup from the process environment (optionally
seeded from a .env file) and passed to the client explicitly.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://app.dumplingai.com"
DEFAULT_TIMEOUT = 120.0

API_KEY_ENV = "DUMPLING_API_KEY"
BASE_URL_ENV = "DUMPLING_API_BASE"
TIMEOUT_ENV = "DUMPLING_HTTP_TIMEOUT"
LOG_LEVEL_ENV = "DUMPLING_LOG_LEVEL"


class ConfigError(Exception):
    """Raised when the environment holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # keep the key out of logs and tracebacks
        key = "***" if self.api_key else None
        return (
            f"Settings(api_key={key!r}, base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, log_level={self.log_level!r})"
        )

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "Settings":
        if environ is None:
            environ = os.environ

        raw_timeout = environ.get(TIMEOUT_ENV, "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}")
            if timeout <= 0:
                raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw_timeout!r}")
        else:
            timeout = DEFAULT_TIMEOUT

        base_url = (environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL).strip().rstrip("/")

        return cls(
            api_key=(environ.get(API_KEY_ENV) or "").strip() or None,
            base_url=base_url,
            timeout=timeout,
            log_level=(environ.get(LOG_LEVEL_ENV) or "INFO").strip().upper(),
        )


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load .env (without overriding real environment values) and build Settings."""
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Send all logging to stderr; stdout belongs to the MCP stream."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
