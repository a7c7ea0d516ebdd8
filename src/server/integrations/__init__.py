"""
External service integrations package.

This package contains client wrappers for third-party collaborators:
- Image host: profile picture uploads (Cloudinary)
- LinkedIn scraper: headless-browser profile extraction (Playwright)

Each integration is obtained through a cached factory and injected with
FastAPI dependencies, so tests can swap in fakes.

Usage:
    from integrations import get_image_host, get_profile_scraper

    url = get_image_host().upload_image(content, "me.png", "image/png")
    result = get_profile_scraper().scrape("https://www.linkedin.com/in/someone")
"""

from functools import lru_cache

from integrations.image_host import CloudinaryImageHost
from integrations.linkedin_scraper import (
    LinkedInScraper,
    ScrapedProfile,
    AuthWallEncountered,
    AUTH_WALL,
)


@lru_cache()
def get_image_host() -> CloudinaryImageHost:
    return CloudinaryImageHost()


@lru_cache()
def get_profile_scraper() -> LinkedInScraper:
    return LinkedInScraper()


__all__ = [
    "CloudinaryImageHost",
    "LinkedInScraper",
    "ScrapedProfile",
    "AuthWallEncountered",
    "AUTH_WALL",
    "get_image_host",
    "get_profile_scraper",
]
