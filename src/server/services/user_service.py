"""
User Service

Profile read/update, profile image upload and LinkedIn enrichment.
"""

from typing import Dict, Any, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundException, DuplicateException
from integrations.image_host import CloudinaryImageHost
from integrations.linkedin_scraper import LinkedInScraper, AuthWallEncountered
from models.user import User
from repositories.user_repository import UserRepository
from services.base_service import BaseService

AUTH_REQUIRED_NAME = "Authentication required"


class UserService(BaseService):

    def __init__(
        self,
        db: Session,
        image_host: Optional[CloudinaryImageHost] = None,
        scraper: Optional[LinkedInScraper] = None,
    ):
        super().__init__(db)
        self.users = UserRepository(db)
        self.image_host = image_host
        self.scraper = scraper

    def get_profile(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundException("User", user_id, "User not found")
        return user

    def update_profile(self, user_id: str, updates: Dict[str, Any]) -> User:
        """
        Change username and/or email.

        Raises:
            NotFoundException: No such user
            DuplicateException: The new email/username belongs to another user
        """
        email = updates.get("email")
        if email:
            other = self.users.get_by_email(email)
            if other is not None and other.id != user_id:
                raise DuplicateException("User", "email", email, "Email is already registered")
        username = updates.get("username")
        if username:
            other = self.users.get_by_username(username)
            if other is not None and other.id != user_id:
                raise DuplicateException("User", "username", username, "Username is already taken")

        user = self.users.update_by_id(user_id, updates)
        if user is None:
            raise NotFoundException("User", user_id, "User not found")
        self.logger.info(f"Updated profile of user {user_id} fields={sorted(updates)}")
        return user

    def upload_profile_image(
        self,
        user_id: str,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> User:
        # Fail before spending an upload on a user that is gone
        self.get_profile(user_id)
        image_url = self.image_host.upload_image(content, filename, content_type)
        user = self.users.update_by_id(user_id, {"profile_image": image_url})
        if user is None:
            raise NotFoundException("User", user_id, "Failed to update profile image")
        return user

    def scrape_linkedin(self, user_id: str, linkedin_url: str) -> User:
        """
        Fill the LinkedIn fields of ``user_id`` from ``linkedin_url``.

        An auth wall is not an error: the user is stored with a placeholder
        name and the requested URL, and returned normally.

        Raises:
            NotFoundException: No such user
            ScraperException: Any other scraping failure
        """
        self.get_profile(user_id)
        result = self.scraper.scrape(linkedin_url)

        if isinstance(result, AuthWallEncountered):
            self.logger.warning(f"LinkedIn auth wall for user {user_id}")
            fields = {
                "linkedin_name": AUTH_REQUIRED_NAME,
                "linkedin_profile_url": linkedin_url,
                "linkedin_profile_image": "",
            }
        else:
            fields = {
                "linkedin_name": result.name,
                "linkedin_profile_url": result.canonical_url,
                "linkedin_profile_image": result.profile_image_url,
            }
        fields["linkedin_url"] = linkedin_url

        user = self.users.update_by_id(user_id, fields)
        if user is None:
            raise NotFoundException("User", user_id, "User not found")
        return user
