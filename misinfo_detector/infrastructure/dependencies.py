"""Dependency injection configuration for hexagonal architecture."""

import logging
from functools import lru_cache
from typing import Dict, Optional

from ..domain.errors import ConfigurationError
from ..domain.services.fact_checking_service import FactCheckingService
from .ai.factory import AIProviderFactory
from .config import AppConfig
from .search.duckduckgo_adapter import DuckDuckGoConfig, DuckDuckGoSearchAdapter

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "OpenAI API key not found in environment variables"


class ServiceContainer:
    """Service container owning the long-lived providers."""

    def __init__(self, config: Optional[AppConfig] = None):
        """Initialize service container."""
        self.config = config or AppConfig.from_env()
        self.ai_factory = AIProviderFactory()
        self.search_provider = DuckDuckGoSearchAdapter(
            DuckDuckGoConfig(timeout=self.config.search_timeout)
        )
        logger.info("✅ Service container setup completed")

    async def get_fact_checking_service(self, model: Optional[str] = None) -> FactCheckingService:
        """Build a pipeline around the shared providers.

        Args:
            model: Model variant for this run; the configured default if None

        Raises:
            ConfigurationError: If the model provider credential is missing
        """
        if not self.config.openai_api_key:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)

        ai_provider = self.ai_factory.get_provider("chatgpt")
        if ai_provider is None:
            logger.info("🔨 Creating new AI provider...")
            ai_provider = await self.ai_factory.create_provider(
                "chatgpt",
                api_key=self.config.openai_api_key,
                model=self.config.openai_model,
                timeout=self.config.openai_timeout,
            )
        await self.search_provider.initialize()

        return FactCheckingService(
            ai_provider,
            self.search_provider,
            model=model or self.config.openai_model,
            verification_concurrency=self.config.verification_concurrency,
        )

    @property
    def provider_status(self) -> Dict[str, bool]:
        """Registered AI providers and whether each has been created."""
        return self.ai_factory.available_providers

    async def shutdown(self) -> None:
        """Shut down every provider."""
        await self.ai_factory.shutdown()
        await self.search_provider.shutdown()


# Global service container instance
@lru_cache()
def get_service_container() -> ServiceContainer:
    """Get global service container instance."""
    return ServiceContainer()
