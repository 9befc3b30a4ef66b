"""
MARK - Settings
===============
Where the task files live and how loud logging is, read from MARK_*
environment variables. Command-line flags override these.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, field_validator

logger = logging.getLogger("mark.config")

ENV_PREFIX = "MARK"

PENDING_FILE = "task.txt"
COMPLETED_FILE = "completed.txt"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(suffix: str, default: str) -> str:
    value = os.getenv(f"{ENV_PREFIX}_{suffix}")
    if value is None or value.strip() == "":
        return default
    return value


def _env_level(suffix: str, default: str) -> str:
    """Log level from the environment; unknown names fall back to the default"""
    value = _env(suffix, default).strip().upper()
    if value not in LOG_LEVELS:
        logger.warning(f"Ignoring {ENV_PREFIX}_{suffix}={value!r}, using {default}")
        return default
    return value


class Settings(BaseModel):
    tasks_dir: Path = Path(".")
    pending_file: str = PENDING_FILE
    completed_file: str = COMPLETED_FILE
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return value


def get_settings() -> Settings:
    """Build Settings from the environment"""
    return Settings(
        tasks_dir=Path(_env("DIR", ".")).expanduser(),
        pending_file=_env("PENDING_FILE", PENDING_FILE),
        completed_file=_env("COMPLETED_FILE", COMPLETED_FILE),
        log_level=_env_level("LOG_LEVEL", "WARNING"),
    )
