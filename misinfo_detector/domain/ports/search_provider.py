"""Protocol for web search providers."""

from typing import List, Protocol


class SearchProvider(Protocol):
    """Protocol for keyword search against the web."""

    async def initialize(self) -> None:
        """Initialize the provider."""
        ...

    async def shutdown(self) -> None:
        """Clean up resources."""
        ...

    async def search(self, query: str, max_results: int = 3) -> List[str]:
        """Search the web for the query.

        Implementations return at most ``max_results`` distinct source
        identifiers (URLs or bare domains) in provider order, and an empty
        list on any failure.
        """
        ...

    @property
    def provider_name(self) -> str:
        """Get the name of the search provider."""
        ...
