"""Test configuration and common fixtures."""

from unittest.mock import AsyncMock

import pytest

EIFFEL_TEXT = "The Eiffel Tower was built in 1889 and is located in Paris."

REAL_NEWS_RESPONSE = (
    "VERDICT: REAL NEWS\n"
    "CONFIDENCE: 95%\n"
    "EXPLANATION: Verifiable historical fact.\n"
    "KEY ANALYSIS POINTS:\n"
    "• Well documented\n"
    "• No red flags"
)


@pytest.fixture
def ai_provider() -> AsyncMock:
    """Provide a language model double that always answers with a REAL NEWS analysis."""
    provider = AsyncMock()
    provider.complete.return_value = REAL_NEWS_RESPONSE
    provider.provider_name = "TestAI"
    return provider


@pytest.fixture
def search_provider() -> AsyncMock:
    """Provide a search double returning two sources."""
    provider = AsyncMock()
    provider.search.return_value = ["en.wikipedia.org/wiki/Eiffel_Tower", "www.toureiffel.paris"]
    provider.provider_name = "TestSearch"
    return provider


@pytest.fixture
def eiffel_text() -> str:
    """Provide a short, factual input text."""
    return EIFFEL_TEXT


@pytest.fixture
def real_news_response() -> str:
    """Provide the canned REAL NEWS analysis."""
    return REAL_NEWS_RESPONSE
