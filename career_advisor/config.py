# career_advisor/config.py
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL

from career_advisor.errors import ConfigError
from career_advisor.models.user import DEFAULT_HASH_METHOD

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

DB_PARTS = ("DB_HOST", "DB_USER", "DB_PASS", "DB_NAME")


@dataclass
class Settings:
    """
    Process configuration, read once at startup.

    The database is given either as a full `DATABASE_URL` or as the
    `DB_HOST` / `DB_USER` / `DB_PASS` / `DB_NAME` parts, which are composed
    into a MySQL (PyMySQL) URL. `GEMINI_API_KEY` is always required.
    """

    database_url: str
    gemini_api_key: str
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_base_url: str = DEFAULT_GEMINI_BASE_URL
    gemini_timeout: Optional[float] = None
    password_hash_method: str = DEFAULT_HASH_METHOD
    port: int = 5000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, dotenv: bool = True):
        if environ is None:
            if dotenv:
                load_dotenv()
            environ = os.environ

        missing = []
        database_url = environ.get("DATABASE_URL")
        if not database_url:
            missing.extend(k for k in DB_PARTS if not environ.get(k))
            if not missing:
                database_url = URL.create(
                    "mysql+pymysql",
                    username=environ["DB_USER"],
                    password=environ["DB_PASS"],
                    host=environ["DB_HOST"],
                    database=environ["DB_NAME"],
                ).render_as_string(hide_password=False)
        api_key = environ.get("GEMINI_API_KEY")
        if not api_key:
            missing.append("GEMINI_API_KEY")
        if missing:
            raise ConfigError("Missing required environment variables: " + ", ".join(missing))

        log_level = (environ.get("LOG_LEVEL") or "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Invalid configuration value: unknown LOG_LEVEL {log_level!r}")

        timeout = environ.get("GEMINI_TIMEOUT")
        try:
            return cls(
                database_url=database_url,
                gemini_api_key=api_key,
                gemini_model=environ.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
                gemini_base_url=(environ.get("GEMINI_BASE_URL") or DEFAULT_GEMINI_BASE_URL).rstrip("/"),
                gemini_timeout=float(timeout) if timeout else None,
                password_hash_method=environ.get("PASSWORD_HASH_METHOD") or DEFAULT_HASH_METHOD,
                port=int(environ.get("PORT") or 5000),
                log_level=log_level,
            )
        except ValueError as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e
