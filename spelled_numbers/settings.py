"""
Runtime settings for the CLI and the HTTP service.

Read from the environment (and a ``.env`` file when present). The library
functions never read settings; callers pass scale mode and locale
explicitly on every call.

    SPELLED_NUMBERS_SHORT_SCALE   true/false (default false)
    SPELLED_NUMBERS_LOCALE        locale code (default "pt")
    SPELLED_NUMBERS_LOG_LEVEL     logging level name (default "INFO")
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel

from .locales import DEFAULT_LOCALE

_ENV_PREFIX = "SPELLED_NUMBERS_"


class Settings(BaseModel):
    short_scale: bool = False
    locale: str = DEFAULT_LOCALE
    log_level: str = "INFO"


def load_settings(env_file: str | None = None) -> Settings:
    """Build Settings from the environment after loading ``.env``.

    Values already present in the environment win over the file.
    """
    load_dotenv(env_file)

    values: dict[str, str] = {}
    for field_name in Settings.model_fields:
        raw = os.environ.get(f"{_ENV_PREFIX}{field_name.upper()}")
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()
    return Settings(**values)
