"""Runtime configuration — env-driven settings for the slotwright tooling.

Centralized config using pydantic-settings for environment variable
support. Reads from a .env file and SLOTWRIGHT_* environment variables.

Settings are constructed by the caller (the CLI) and passed down to the
resolver and deployment builder; core code never reads a global instance.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class SlotwrightSettings(BaseSettings):
    """Tooling configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export SLOTWRIGHT_LOG_LEVEL=DEBUG
        export SLOTWRIGHT_CREDENTIAL_VAR=DEPLOYER_KEY

    Or via .env file::

        SLOTWRIGHT_API_KEY_SENTINEL=not-needed
        SLOTWRIGHT_OPTIMIZER_RUNS=1000
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SLOTWRIGHT_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = LogLevel.INFO

    # Secret binding
    credential_var: str = "PRIVATE_KEY"  # name of the signing-credential variable
    api_key_sentinel: str = "not-needed"

    # Deployment driver document
    default_network: str = "hardhat"
    solidity_version: str = "0.8.20"
    evm_version: str = "london"
    optimizer_enabled: bool = True
    optimizer_runs: int = Field(default=200, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v
