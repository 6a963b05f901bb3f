"""Register configuration from environment variables."""

import os
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .errors import errmsg
from .logs import LOG_FORMATS, LOG_LEVELS

ENV_CATALOG = "REGISTER_CATALOG"
ENV_LOG_LEVEL = "REGISTER_LOG_LEVEL"
ENV_LOG_FORMAT = "REGISTER_LOG_FORMAT"
ENV_TODAY = "REGISTER_TODAY"

DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_FORMAT = "json"


@dataclass
class RegisterConfig:
    catalog_path: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT
    today: Optional[date] = None

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "RegisterConfig":
        """Read settings from the environment.

        Raises:
            ValueError: a setting holds a value the register does not accept.
        """
        env = os.environ if environ is None else environ

        log_level = env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).lower()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"{errmsg.INVALID_SETTING}: {ENV_LOG_LEVEL}={log_level!r}")

        log_format = env.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT).lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"{errmsg.INVALID_SETTING}: {ENV_LOG_FORMAT}={log_format!r}")

        today = env.get(ENV_TODAY)
        try:
            today = date.fromisoformat(today) if today else None
        except ValueError:
            raise ValueError(f"{errmsg.INVALID_SETTING}: {ENV_TODAY}={today!r}") from None

        return cls(
            catalog_path=env.get(ENV_CATALOG) or None,
            log_level=log_level,
            log_format=log_format,
            today=today,
        )
