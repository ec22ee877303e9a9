from typing import Optional
import logging

import httpx

from .constants import FETCH_TIMEOUT, USER_AGENT
from .exceptions import FetchError
from .extractor import extract, validate_source_url
from .models import RecipeDraft

logger = logging.getLogger(__name__)


class PageFetcher:
    """Retrieves the raw markup of recipe pages."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = FETCH_TIMEOUT):
        """
        Initialize the page fetcher.

        Args:
            client: Optional httpx client to use instead of a default one
            timeout: Request timeout in seconds for the default client
        """
        self.headers = {
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
        self.client = client or httpx.AsyncClient(
            headers=self.headers,
            follow_redirects=True,
            timeout=timeout
        )

    async def fetch(self, url: str) -> str:
        """
        Fetch a page and decode it to text.

        Args:
            url: The URL to fetch

        Returns:
            The decoded page content

        Raises:
            FetchError: If the URL cannot be fetched
        """
        logger.debug(f"Fetching {url}")
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise FetchError(f"Network error: {e}") from e

        logger.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.text

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        """Support for async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up resources."""
        await self.aclose()


class RecipeParser:
    """Fetches a recipe page and extracts a draft from it."""

    def __init__(self, fetcher: Optional[PageFetcher] = None):
        self.fetcher = fetcher or PageFetcher()

    async def parse_url(self, url: str) -> RecipeDraft:
        """
        Fetch url and extract its recipe.

        Raises:
            InvalidInputError: If url is not well-formed
            FetchError: If the page cannot be retrieved
            NoRecipeFoundError: If the page holds no recognizable recipe
        """
        validate_source_url(url)
        html = await self.fetcher.fetch(url)
        return extract(html, url)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.fetcher.aclose()
