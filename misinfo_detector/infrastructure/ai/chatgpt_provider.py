"""ChatGPT implementation of the AI provider interface."""

import logging
from typing import Dict, List, Optional

from openai import AsyncOpenAI
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ChatGPTConfig(BaseModel):
    """Configuration for the ChatGPT provider."""

    api_key: str = Field(..., description="OpenAI API key")
    model: str = Field(default="gpt-4o-mini", description="Default model")
    temperature: float = Field(default=0.1, description="Temperature for responses")
    timeout: float = Field(default=30.0, description="API timeout in seconds")


class ChatGPTProvider:
    """ChatGPT implementation of the AI provider interface."""

    def __init__(self, config: ChatGPTConfig):
        """Initialize the provider."""
        self._config = config
        self._client: Optional[AsyncOpenAI] = None
        self._initialized = False

    async def initialize(self) -> None:
        """Create the OpenAI client."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                timeout=self._config.timeout,
            )
        self._initialized = True

    async def shutdown(self) -> None:
        """Clean up resources."""
        if self._client:
            await self._client.close()
            self._client = None
        self._initialized = False

    async def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
    ) -> str:
        """Run a single chat completion and return its text content."""
        if not self._client:
            raise RuntimeError("Provider not initialized")

        response = await self._client.chat.completions.create(
            model=model or self._config.model,
            messages=messages,
            temperature=self._config.temperature,
        )
        return response.choices[0].message.content or ""

    @property
    def provider_name(self) -> str:
        """Get the name of the AI provider."""
        return "ChatGPT"

    @property
    def is_available(self) -> bool:
        """Check if the provider is available and ready."""
        return self._initialized and self._client is not None
