from dataclasses import dataclass
import os
from dotenv import dotenv_values, find_dotenv

VERSION = "0.1.0"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    log_level: str


def get_settings() -> Settings:
    # Only BKMK_* keys are read from .env; os.environ is never modified.
    file_values = dotenv_values(find_dotenv(usecwd=True))
    level = os.getenv("BKMK_LOG_LEVEL") or file_values.get("BKMK_LOG_LEVEL") or "WARNING"
    level = level.strip().upper()
    if level not in _LEVELS:
        level = "WARNING"

    return Settings(log_level=level)
