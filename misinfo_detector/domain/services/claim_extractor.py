"""Extraction of verifiable factual claims from free text."""

import logging
from typing import List, Optional

from ..models.claim import Claim
from ..ports.ai_provider import AIProvider

logger = logging.getLogger(__name__)

CLAIM_MARKER = "CLAIM:"
MAX_CLAIMS = 3

CLAIMS_PROMPT = """
Extract the key factual claims from this text that can be verified:

Text: "{text}"

Return only the main verifiable claims, one per line, in this format:
{marker} [specific factual claim]

Focus on:
- Specific facts, numbers, dates, events
- Claims about people, companies, organizations
- Statistical information
- Concrete statements that can be fact-checked
"""


def parse_claims(response: str, limit: int = MAX_CLAIMS) -> List[Claim]:
    """Collect marker-prefixed lines from a model response.

    Args:
        response: Raw model output
        limit: Maximum number of claims to keep

    Returns:
        Up to ``limit`` claims in the order they appear; empty if no line
        carries the marker
    """
    claims: List[Claim] = []
    for line in response.splitlines():
        if CLAIM_MARKER not in line:
            continue
        text = line.replace(CLAIM_MARKER, "", 1).strip()
        if not text:
            continue
        claims.append(Claim(text=text))
        if len(claims) >= limit:
            break
    return claims


class ClaimExtractor:
    """Asks the language model to enumerate checkable claims."""

    def __init__(self, ai_provider: AIProvider, model: Optional[str] = None):
        self._ai = ai_provider
        self._model = model

    async def extract(self, text: str) -> List[Claim]:
        """Extract at most three verifiable claims from the text.

        A model failure is logged and yields no claims; the rest of the
        pipeline runs without fact checks.
        """
        prompt = CLAIMS_PROMPT.format(text=text, marker=CLAIM_MARKER)
        try:
            response = await self._ai.complete(
                [{"role": "user", "content": prompt}],
                model=self._model,
            )
        except Exception as e:
            logger.warning(f"⚠️ Claim extraction failed: {type(e).__name__}: {e}")
            return []

        claims = parse_claims(response or "")
        if not claims:
            logger.warning("⚠️ Model response contained no claim lines")
        logger.info(f"📝 Extracted {len(claims)} claims from text")
        return claims
