"""
Authentication state: the signed-in user and the session token.

The token lives on the shared APIClient, so once ``login`` succeeds the
task and category slices are authorized too.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, BinaryIO

from app_lib.api.client import APIError
from app_lib.api.endpoints import AuthAPI
from app_lib.store.resource import user_facing_error

logger = logging.getLogger(__name__)


@dataclass
class AuthState:
    user: Optional[Dict[str, Any]] = None
    is_authenticated: bool = False
    loading: bool = False
    error: Optional[str] = None


class AuthSlice:

    def __init__(self, api: AuthAPI):
        self.api = api
        self.state = AuthState()

    def _run(self, call, fallback_error: str) -> Optional[Any]:
        self.state.loading = True
        self.state.error = None
        try:
            return call()
        except APIError as e:
            logger.error(f"{fallback_error}: {e.message}")
            self.state.error = user_facing_error(e, fallback_error)
            return None
        finally:
            self.state.loading = False

    def login(self, email: str, password: str) -> bool:
        response = self._run(lambda: self.api.login(email, password), "Login failed")
        if response is None:
            return False
        self.state.user = response["user"]
        self.state.is_authenticated = True
        return True

    def register(self, email: str, username: str, password: str) -> bool:
        """Create the account. The caller still has to log in to get a token."""
        response = self._run(lambda: self.api.register(email, username, password), "Registration failed")
        if response is None:
            return False
        self.state.user = response
        return True

    def get_profile(self) -> bool:
        if not self.api.client.token:
            self.state.error = "No token found"
            self.state.is_authenticated = False
            return False

        response = self._run(self.api.get_profile, "Failed to fetch profile")
        if response is None:
            self.state.is_authenticated = False
            return False
        self.state.user = response
        self.state.is_authenticated = True
        return True

    def update_profile(self, username: Optional[str] = None, email: Optional[str] = None) -> bool:
        response = self._run(lambda: self.api.update_profile(username=username, email=email), "Failed to update profile")
        if response is None:
            return False
        self.state.user = response["user"]
        return True

    def upload_profile_image(self, filename: str, content: BinaryIO, content_type: str = "image/jpeg") -> bool:
        response = self._run(
            lambda: self.api.upload_profile_image(filename, content, content_type),
            "Failed to update profile image",
        )
        if response is None:
            return False
        if self.state.user is not None:
            self.state.user = {**self.state.user, "profileImage": response["profileImage"]}
        return True

    def scrape_linkedin(self, linkedin_url: str) -> bool:
        """Enrich the signed-in user's profile. An auth wall still counts as success."""
        if self.state.user is None:
            self.state.error = "Not signed in"
            return False

        user_id = self.state.user["id"]
        response = self._run(lambda: self.api.scrape_linkedin(user_id, linkedin_url), "Failed to scrape LinkedIn profile")
        if response is None:
            return False
        self.state.user = response["user"]
        return True

    def logout(self):
        self.api.logout()
        self.state = AuthState()
