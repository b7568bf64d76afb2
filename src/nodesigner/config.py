"""Application configuration using pydantic-settings.

Signing mnemonics are not settings fields: any environment variable (or
.env entry) whose name contains the mnemonic marker, e.g.
ALGO_MNEMONIC_1=..., is picked up by collect_mnemonics().
"""

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MNEMONIC_MARKER = "_MNEMONIC"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: str = Field(default="INFO", description="Log level when debug is off")

    # ======================
    # Signing keys
    # ======================
    secrets_env_file: str = Field(
        default=".env", description="dotenv file scanned for mnemonics in addition to the environment"
    )
    mnemonic_marker: str = Field(
        default=DEFAULT_MNEMONIC_MARKER,
        description="Substring identifying environment variables holding mnemonics",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_mnemonics(self) -> dict[str, str]:
        """Collect configured mnemonics keyed by variable name."""
        return collect_mnemonics(env_file=self.secrets_env_file, marker=self.mnemonic_marker)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "log_level": self.log_level,
            "secrets_env_file": self.secrets_env_file,
            "mnemonics": {name: "***" if value else "(empty)" for name, value in self.get_mnemonics().items()},
        }


def collect_mnemonics(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[str] = None,
    marker: str = DEFAULT_MNEMONIC_MARKER,
) -> dict[str, str]:
    """Collect mnemonics from a dotenv file and the process environment.

    Process environment values override dotenv values of the same name.
    Order is dotenv file order, then environment order for names only
    present in the environment. Empty values are kept.

    Args:
        environ: Environment mapping (defaults to os.environ)
        env_file: Optional path to a dotenv file
        marker: Substring a variable name must contain

    Returns:
        Mapping of variable name to mnemonic
    """
    if environ is None:
        environ = os.environ

    values: dict[str, str] = {}
    if env_file and Path(env_file).is_file():
        for name, value in dotenv_values(env_file).items():
            values[name] = value or ""
    values.update(environ)

    return {name: value for name, value in values.items() if marker in name}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
