"""Environment-driven configuration for the detector service."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from ..domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """Configuration for the detector service."""

    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API key")
    openai_model: str = Field(default="gpt-4o-mini", description="Default chat model")
    openai_timeout: float = Field(default=30.0, description="Model request timeout in seconds")
    search_timeout: float = Field(default=10.0, description="Search request timeout in seconds")
    verification_concurrency: int = Field(default=1, ge=1, description="Claims verified at once")
    log_level: str = Field(default="INFO", description="Root log level")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create configuration from environment variables (and a .env file).

        Raises:
            ConfigurationError: If a numeric variable is malformed or out of range
        """
        load_dotenv()

        api_key = os.getenv("OPENAI_API_KEY") or None
        if not api_key:
            logger.warning("⚠️ OPENAI_API_KEY not found in environment variables")

        try:
            return cls(
                openai_api_key=api_key,
                openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
                openai_timeout=float(os.getenv("OPENAI_TIMEOUT", "30")),
                search_timeout=float(os.getenv("SEARCH_TIMEOUT", "10")),
                verification_concurrency=int(os.getenv("VERIFICATION_CONCURRENCY", "1")),
                log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            )
        except (ValueError, ValidationError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the API and the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
