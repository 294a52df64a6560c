"""Factory for creating and managing AI providers."""

from typing import Any, Callable, Dict, Optional

from ...domain.ports.ai_provider import AIProvider
from .chatgpt_provider import ChatGPTConfig, ChatGPTProvider


def _create_chatgpt(**kwargs: Any) -> ChatGPTProvider:
    return ChatGPTProvider(config=ChatGPTConfig(**kwargs))


class AIProviderFactory:
    """Factory for creating and managing AI providers."""

    def __init__(self):
        """Initialize the factory."""
        self._providers: Dict[str, Callable[..., AIProvider]] = {}
        self._instances: Dict[str, AIProvider] = {}

        # Register default providers
        self.register_provider("chatgpt", _create_chatgpt)

    def register_provider(self, name: str, builder: Callable[..., AIProvider]) -> None:
        """Register a new AI provider.

        Args:
            name: Provider name
            builder: Callable returning an uninitialized provider
        """
        self._providers[name] = builder

    async def create_provider(self, name: str, **kwargs: Any) -> AIProvider:
        """Create and initialize a provider instance.

        Args:
            name: Provider name
            **kwargs: Provider-specific configuration

        Returns:
            Initialized provider instance

        Raises:
            ValueError: If provider not found
        """
        if name not in self._providers:
            raise ValueError(f"Provider '{name}' not found")

        if name not in self._instances:
            provider = self._providers[name](**kwargs)
            await provider.initialize()
            self._instances[name] = provider

        return self._instances[name]

    def get_provider(self, name: str) -> Optional[AIProvider]:
        """Get an existing provider instance, or None."""
        return self._instances.get(name)

    @property
    def available_providers(self) -> Dict[str, bool]:
        """Get dictionary of registered providers and whether they are active."""
        return {
            name: name in self._instances
            for name in self._providers
        }

    async def shutdown(self) -> None:
        """Shutdown all provider instances."""
        for provider in self._instances.values():
            await provider.shutdown()
        self._instances.clear()
