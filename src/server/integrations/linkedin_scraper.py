"""
LinkedIn profile scraper.

Drives headless Chromium through Playwright: open the profile URL, detect the
sign-in wall, then read the name, the top-card picture and the canonical URL.
The call blocks until the page settles or the configured timeout elapses.
"""

from dataclasses import dataclass
from typing import Optional, Union
import logging

from playwright.sync_api import sync_playwright

from core.config import get_settings, Settings
from core.exceptions import ScraperException
from services.error_handling import handle_upstream_errors

logger = logging.getLogger(__name__)

PROFILE_IMAGE_SELECTOR = "img.pv-top-card-profile-picture__image"


@dataclass
class ScrapedProfile:
    name: str
    profile_image_url: str
    canonical_url: str


class AuthWallEncountered:
    """Returned instead of a profile when LinkedIn redirects to its sign-in wall."""

    def __repr__(self) -> str:
        return "AUTH_WALL"


AUTH_WALL = AuthWallEncountered()

ScrapeResult = Union[ScrapedProfile, AuthWallEncountered]


def is_auth_wall(url: str) -> bool:
    return "authwall" in url


class LinkedInScraper:
    """Headless-browser scraper for public LinkedIn profiles."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @handle_upstream_errors("LinkedIn scraper", ScraperException)
    def scrape(self, url: str) -> ScrapeResult:
        """
        Scrape one profile.

        Returns:
            ScrapedProfile, or AUTH_WALL when the page requires sign-in

        Raises:
            ScraperException: Navigation, selector timeout or browser failure
        """
        timeout = self.settings.scraper_timeout_ms
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=self.settings.scraper_headless)
            try:
                page = browser.new_page()
                page.goto(url, wait_until="load", timeout=timeout)

                if is_auth_wall(page.url):
                    logger.info(f"Auth wall hit for {url}")
                    return AUTH_WALL

                page.wait_for_selector("h1", timeout=timeout)
                name = (page.inner_text("h1") or "").strip() or "N/A"

                image = page.query_selector(PROFILE_IMAGE_SELECTOR)
                profile_image_url = (image.get_attribute("src") if image else None) or ""

                return ScrapedProfile(
                    name=name,
                    profile_image_url=profile_image_url,
                    canonical_url=page.url,
                )
            finally:
                browser.close()
