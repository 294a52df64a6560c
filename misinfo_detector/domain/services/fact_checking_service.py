"""Service coordinating claim extraction, verification and document analysis."""

import logging
from typing import Optional

from ..errors import AnalysisFailedError, InputValidationError
from ..models.analysis import AnalysisResult
from ..ports.ai_provider import AIProvider
from ..ports.search_provider import SearchProvider
from .claim_extractor import ClaimExtractor
from .claim_verifier import ClaimVerifier
from .document_analyzer import DocumentAnalyzer
from .source_lookup import lookup_sources

logger = logging.getLogger(__name__)

RELATED_SOURCES_PREFIX = "fact check "
RELATED_SOURCES_TEXT_LENGTH = 100
RELATED_SOURCES_RESULTS = 3

GENERIC_FAILURE_MESSAGE = "Failed to analyze text. Please try again."


def validate_text(text: Optional[str]) -> str:
    """Return the text if it has content, else raise InputValidationError."""
    if not text or not text.strip():
        raise InputValidationError("Text is required")
    return text


class FactCheckingService:
    """Pipeline entry point: extract, verify, analyze, assemble."""

    def __init__(
        self,
        ai_provider: AIProvider,
        search_provider: SearchProvider,
        model: Optional[str] = None,
        verification_concurrency: int = 1,
    ):
        """Initialize the service.

        Args:
            ai_provider: Language model provider
            search_provider: Web search provider
            model: Model variant used for every call in a run
            verification_concurrency: Claims verified at once (1 = sequential)
        """
        self.ai = ai_provider
        self.search = search_provider
        self.extractor = ClaimExtractor(ai_provider, model=model)
        self.verifier = ClaimVerifier(
            ai_provider,
            search_provider,
            model=model,
            max_concurrency=verification_concurrency,
        )
        self.analyzer = DocumentAnalyzer(ai_provider, model=model)

    async def run(self, text: str) -> AnalysisResult:
        """Produce a misinformation assessment for the text.

        Args:
            text: Free text to analyze

        Returns:
            Assembled analysis result

        Raises:
            InputValidationError: If the text is empty; nothing is called
            AnalysisFailedError: On any unexpected failure; no partial result
        """
        validate_text(text)
        logger.info(f"🔍 Starting analysis for text: {text[:100]}...")

        try:
            claims = await self.extractor.extract(text)
            fact_checks = await self.verifier.verify_all(claims)
            sources = await lookup_sources(
                self.search,
                RELATED_SOURCES_PREFIX + text[:RELATED_SOURCES_TEXT_LENGTH],
                RELATED_SOURCES_RESULTS,
            )
            result = await self.analyzer.analyze(text, fact_checks, sources=sources)
        except Exception as e:
            logger.error(f"❌ Analysis failed: {type(e).__name__}: {e}", exc_info=True)
            raise AnalysisFailedError(GENERIC_FAILURE_MESSAGE) from e

        logger.info(
            f"✅ Analysis complete: {result.verdict.value}, {len(result.fact_checks)} fact checks, "
            f"{len(result.sources)} sources"
        )
        return result
