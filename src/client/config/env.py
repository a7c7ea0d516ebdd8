"""
Client environment.

Values are read from the process environment after loading ``.env``; every
one has a default that points at a local API on port 3000.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes', 'on')


def get_env_int(key: str, default: int) -> int:
    # Malformed numbers fall back to the default
    try:
        return int(os.environ[key])
    except (KeyError, ValueError):
        return default


@dataclass
class EnvironmentConfig:
    api_url: str
    environment: str
    debug: bool
    log_level: str
    # Seconds; scraping waits on a headless browser server-side
    request_timeout: int
    upload_timeout: int
    scrape_timeout: int

    @classmethod
    def from_environ(cls) -> "EnvironmentConfig":
        return cls(
            api_url=get_env("API_URL", "http://localhost:3000"),
            environment=get_env("ENVIRONMENT", "development"),
            debug=get_env_bool("DEBUG"),
            log_level=get_env("LOG_LEVEL", "INFO"),
            request_timeout=get_env_int("REQUEST_TIMEOUT", 30),
            upload_timeout=get_env_int("UPLOAD_TIMEOUT", 300),
            scrape_timeout=get_env_int("SCRAPE_TIMEOUT", 120),
        )


env = EnvironmentConfig.from_environ()
