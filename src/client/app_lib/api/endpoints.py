"""
Typed request functions for each resource.

Thin wrappers: build the URL, send, return the decoded JSON. Errors surface
as APIError from the underlying client.
"""

from typing import Any, Dict, Optional, BinaryIO

from app_lib.api.client import APIClient


class AuthAPI:
    def __init__(self, client: APIClient):
        self.client = client
        self.endpoints = client.config.endpoints

    def register(self, email: str, username: str, password: str) -> Dict[str, Any]:
        return self.client.post(self.endpoints.auth_register, data={
            "email": email,
            "username": username,
            "password": password,
        })

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in and attach the returned access token to every later request."""
        response = self.client.post(self.endpoints.auth_login, data={"email": email, "password": password})
        token = response.get("access_token")
        if token:
            self.client.set_token(token)
        return response

    def get_profile(self) -> Dict[str, Any]:
        return self.client.get(self.endpoints.user_profile)

    def update_profile(self, username: Optional[str] = None, email: Optional[str] = None) -> Dict[str, Any]:
        data = {key: value for key, value in {"username": username, "email": email}.items() if value is not None}
        return self.client.patch(self.endpoints.user_profile, data)

    def upload_profile_image(self, filename: str, content: BinaryIO, content_type: str = "image/jpeg") -> Dict[str, Any]:
        return self.client.upload(
            self.endpoints.user_profile_upload,
            files={"file": (filename, content, content_type)},
        )

    def scrape_linkedin(self, user_id: str, linkedin_url: str) -> Dict[str, Any]:
        return self.client.post(
            f"{self.endpoints.user_linkedin_scrape}/{user_id}",
            data={"linkedInUrl": linkedin_url},
            timeout=self.client.config.scrape_timeout,
        )

    def logout(self):
        self.client.clear_token()


class ResourceAPI:
    """CRUD against one collection endpoint (``/tasks`` or ``/categories``)."""

    endpoint_key: str = ""

    def __init__(self, client: APIClient):
        self.client = client
        self.base = client.config.endpoints.get_url(self.endpoint_key)

    def get_all(self) -> Dict[str, Any]:
        """``{"data": [...], "message": str | None}``"""
        return self.client.get(self.base)

    def get(self, id: str) -> Dict[str, Any]:
        return self.client.get(f"{self.base}/{id}")

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.post(self.base, data=data)

    def update(self, id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.patch(f"{self.base}/{id}", data)

    def delete(self, id: str) -> Dict[str, Any]:
        return self.client.delete(f"{self.base}/{id}")


class TasksAPI(ResourceAPI):
    endpoint_key = "tasks"

    def stats(self) -> Dict[str, int]:
        return self.client.get(self.client.config.endpoints.task_stats)


class CategoriesAPI(ResourceAPI):
    endpoint_key = "categories"


def build_apis(client: Optional[APIClient] = None) -> Dict[str, Any]:
    """One client shared by the three wrappers, so a login authorizes all of them."""
    client = client or APIClient()
    return {
        "auth": AuthAPI(client),
        "tasks": TasksAPI(client),
        "categories": CategoriesAPI(client),
    }
