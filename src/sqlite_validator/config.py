"""Configuration management for sqlite-validator"""

import os
from pathlib import Path
from typing import Literal, Optional, get_args

from dotenv import load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "SQLITE_VALIDATOR_"

_TRUE_VALUES = {"1", "true", "yes", "on"}

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = get_args(LogLevel)


class ValidatorConfig(BaseModel):
    """Settings for the command-line checker."""

    log_level: LogLevel = Field(default="WARNING", description="Console log level")
    log_file: Optional[Path] = Field(default=None, description="Optional debug log file")
    warnings_as_errors: bool = Field(
        default=False, description="Exit non-zero when only warnings were reported"
    )

    model_config = {"extra": "forbid"}


def load_config(env_path: Optional[Path] = None) -> ValidatorConfig:
    """Load configuration from ``.env`` and the environment.

    Args:
        env_path: Explicit ``.env`` file. If None, ``.env`` in the current
                  working directory is used when present.

    Returns:
        ValidatorConfig with values from ``SQLITE_VALIDATOR_*`` variables.

    Raises:
        pydantic.ValidationError: a variable holds an unusable value, such as
                                  an unknown log level.
    """
    env_path = env_path or Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path, encoding="utf-8-sig")

    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    return ValidatorConfig(
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").upper(),
        log_file=Path(log_file) if log_file else None,
        warnings_as_errors=os.getenv(f"{ENV_PREFIX}WARNINGS_AS_ERRORS", "").lower()
        in _TRUE_VALUES,
    )
