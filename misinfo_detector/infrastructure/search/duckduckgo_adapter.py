"""DuckDuckGo HTML search implementation of the search provider interface.

DuckDuckGo offers no keyless JSON API for web results, so this adapter
scrapes the HTML results page. The markup selector is configurable; when
the provider changes its page layout only this module needs to follow.
"""

import logging
from typing import List, Optional

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class DuckDuckGoConfig(BaseModel):
    """Configuration for the DuckDuckGo adapter."""

    base_url: str = Field(
        default="https://html.duckduckgo.com/html/",
        description="HTML search endpoint",
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        description="Browser-like user agent sent with every lookup",
    )
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    result_selector: str = Field(
        default=".result__url",
        description="CSS selector of the elements holding result URLs",
    )


class DuckDuckGoSearchAdapter:
    """Keyword search over DuckDuckGo's HTML results page."""

    def __init__(self, config: Optional[DuckDuckGoConfig] = None):
        self._config = config or DuckDuckGoConfig()
        self._client: Optional[httpx.AsyncClient] = None

    async def initialize(self) -> None:
        """Create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                headers={"User-Agent": self._config.user_agent},
                follow_redirects=True,
            )

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def search(self, query: str, max_results: int = 3) -> List[str]:
        """Search and return up to ``max_results`` distinct result URLs.

        No retries; every failure is logged and yields an empty list.
        """
        if max_results <= 0 or not query.strip():
            return []
        if self._client is None:
            await self.initialize()

        try:
            response = await self._client.get(self._config.base_url, params={"q": query})
            response.raise_for_status()
        except httpx.TimeoutException:
            logger.warning(f"⚠️ Web search timed out after {self._config.timeout}s")
            return []
        except httpx.HTTPError as e:
            logger.warning(f"⚠️ Web search error: {type(e).__name__}: {e}")
            return []

        try:
            return self.extract_results(response.text, max_results)
        except Exception as e:
            logger.warning(f"⚠️ Could not parse search results: {e}")
            return []

    def extract_results(self, html: str, max_results: int) -> List[str]:
        """Pull distinct result URLs out of a results page, in page order."""
        soup = BeautifulSoup(html, "html.parser")
        sources: List[str] = []
        for element in soup.select(self._config.result_selector):
            url = element.get_text(strip=True)
            if url and url not in sources:
                sources.append(url)
            if len(sources) >= max_results:
                break
        return sources

    @property
    def provider_name(self) -> str:
        """Get the name of the search provider."""
        return "DuckDuckGo"
