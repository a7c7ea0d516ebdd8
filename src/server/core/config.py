"""
Settings for the task manager API.

Every value comes from the environment (or a ``.env`` file) and is read once
through :func:`get_settings`.
"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache
import logging

logger = logging.getLogger('CORE_CONFIG')


class Settings(BaseSettings):
    """
    Environment-backed settings.

    The database is either given whole as ``DATABASE_URL`` or assembled from
    the ``DB_*`` parts. A ``sqlite://`` URL is accepted for local runs and tests.

    Authentication:
        jwt_secret / jwt_algorithm: HMAC key and algorithm for access tokens
        jwt_expires_minutes: Token lifetime; there is no refresh
        bcrypt_rounds: Password hashing cost

    Profile images (Cloudinary):
        cloudinary_cloud_name / cloudinary_api_key / cloudinary_api_secret:
            Credentials; uploads fail with a 409 while any is missing
        cloudinary_folder: Destination folder for uploads

    LinkedIn scraper:
        scraper_headless: Launch Chromium without a window
        scraper_timeout_ms: Page load and selector wait limit
    """

    app_name: str = "Task Manager API"
    environment: str = "development"

    # Database
    database_url: Optional[str] = None
    db_username: str = "postgres"
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_port: str = "5432"
    db_name: Optional[str] = None
    postgres_db: str = "taskmanager"

    # Pool (ignored for SQLite)
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_timeout: int = 10
    db_pool_recycle: int = 3600
    db_pool_pre_ping: bool = True
    db_echo: bool = False

    # Authentication
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60
    bcrypt_rounds: int = 12

    # Image host
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None
    cloudinary_folder: str = "profile_images"
    cloudinary_timeout: int = 60

    # LinkedIn scraper
    scraper_headless: bool = True
    scraper_timeout_ms: int = 30000

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "allow"

    def get_database_url(self) -> str:
        """
        The SQLAlchemy URL to connect to.

        Raises:
            ValueError: Neither DATABASE_URL nor the DB_* parts needed for PostgreSQL are set
        """
        if self.database_url:
            return self.database_url

        missing = [
            name for name, value in (
                ("DB_USERNAME", self.db_username),
                ("DB_PASSWORD", self.db_password),
                ("DB_HOST", self.db_host),
            )
            if not value
        ]
        if missing:
            raise ValueError(f"Database configuration incomplete. Missing: {', '.join(missing)}")

        database = self.db_name or self.postgres_db
        return f"postgresql://{self.db_username}:{self.db_password}@{self.db_host}:{self.db_port}/{database}"

    def is_sqlite(self) -> bool:
        return self.get_database_url().startswith("sqlite")

    def image_host_configured(self) -> bool:
        return bool(self.cloudinary_cloud_name and self.cloudinary_api_key and self.cloudinary_api_secret)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
