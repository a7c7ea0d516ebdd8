"""
User Pydantic Schemas

LinkedIn fields keep the capital I on the wire (``linkedInUrl``), which the
camelCase generator alone would not produce.
"""

from pydantic import Field, ConfigDict, EmailStr
from typing import Optional
from datetime import datetime

from schemas.common import CamelModel


class UpdateProfileRequest(CamelModel):
    """Request schema for updating the caller's profile."""

    username: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None


class UserProfileResponse(CamelModel):
    """Response schema for the caller's profile."""

    id: str
    email: str
    username: str
    profile_image: str = ""
    linkedin_url: str = Field("", alias="linkedInUrl")
    linkedin_name: str = Field("", alias="linkedInName")
    linkedin_profile_url: str = Field("", alias="linkedInProfileUrl")
    linkedin_profile_image: str = Field("", alias="linkedInProfileImage")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UpdateProfileResponse(CamelModel):
    message: str
    user: UserProfileResponse


class ProfileImageResponse(CamelModel):
    message: str
    profile_image: str


class LinkedInScrapeRequest(CamelModel):
    """Request schema for LinkedIn enrichment."""

    linkedin_url: str = Field(..., alias="linkedInUrl", min_length=1, max_length=2048)
