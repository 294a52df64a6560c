"""Protocol for AI providers."""

from typing import Dict, List, Optional, Protocol


class AIProvider(Protocol):
    """Protocol defining the interface for language model providers."""

    async def initialize(self) -> None:
        """Initialize the AI provider."""
        ...

    async def shutdown(self) -> None:
        """Clean up resources."""
        ...

    async def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
    ) -> str:
        """Run a single-turn chat completion and return the text content.

        Args:
            messages: Role-tagged messages, e.g. ``[{"role": "user", "content": "..."}]``
            model: Model variant to use instead of the provider default

        Returns:
            The model's free-text answer
        """
        ...

    @property
    def provider_name(self) -> str:
        """Get the name of the AI provider."""
        ...
