"""
Client settings: the API base URL, every endpoint URL derived from it, and
request timeouts. Endpoint URLs are built here and nowhere else.
"""
from dataclasses import dataclass
from typing import Optional
from .env import env, EnvironmentConfig


@dataclass
class APIEndpoints:
    base: str
    auth_register: str
    auth_login: str
    user_profile: str
    user_profile_upload: str
    user_linkedin_scrape: str
    tasks: str
    task_stats: str
    categories: str
    health: str

    @classmethod
    def for_base(cls, base: str) -> "APIEndpoints":
        return cls(
            base=base,
            auth_register=f"{base}/auth/register",
            auth_login=f"{base}/auth/login",
            user_profile=f"{base}/users/profile",
            user_profile_upload=f"{base}/users/profile/upload",
            user_linkedin_scrape=f"{base}/users/linkedin/scrape",
            tasks=f"{base}/tasks",
            task_stats=f"{base}/tasks/stats",
            categories=f"{base}/categories",
            health=f"{base}/health",
        )

    def get_url(self, endpoint_key: str) -> str:
        return getattr(self, endpoint_key, self.base)


class AppConfig:
    """
    Resolved client configuration.

    ``api_url`` overrides the environment, which is how tests and scripts
    point the client at another server.
    """

    def __init__(self, environment: Optional[EnvironmentConfig] = None, api_url: Optional[str] = None):
        self.env = environment or env
        self.api_url = (api_url or self.env.api_url).rstrip('/')
        self.endpoints = APIEndpoints.for_base(self.api_url)

        self.request_timeout = self.env.request_timeout
        self.upload_timeout = self.env.upload_timeout
        self.scrape_timeout = self.env.scrape_timeout


config = AppConfig()
