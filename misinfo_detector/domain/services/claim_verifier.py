"""Claim-level verification: search corroboration plus model judgment."""

import asyncio
import logging
from typing import List, Optional

from ..models.claim import Claim
from ..models.fact_check import FactCheck
from ..ports.ai_provider import AIProvider
from ..ports.search_provider import SearchProvider
from .source_lookup import lookup_sources

logger = logging.getLogger(__name__)

CLAIM_SEARCH_RESULTS = 2

VERIFICATION_PROMPT = """
Verify this specific claim based on general knowledge and logic:

CLAIM: "{claim}"

Respond with:
STATUS: [VERIFIED/DISPUTED/UNVERIFIABLE]
REASONING: [Brief explanation]
"""

FALLBACK_VERIFICATION = "STATUS: UNVERIFIABLE\nREASONING: Verification could not be completed."


class ClaimVerifier:
    """Verifies claims one by one, isolating failures per claim."""

    def __init__(
        self,
        ai_provider: AIProvider,
        search_provider: SearchProvider,
        model: Optional[str] = None,
        max_concurrency: int = 1,
    ):
        """Initialize the verifier.

        Args:
            ai_provider: Language model used for the judgment call
            search_provider: Search engine used for corroborating sources
            model: Model variant override
            max_concurrency: Number of claims verified at once; 1 means
                strictly sequential
        """
        self._ai = ai_provider
        self._search = search_provider
        self._model = model
        self._max_concurrency = max(1, max_concurrency)

    async def verify(self, claim: Claim) -> FactCheck:
        """Verify a single claim.

        A model failure degrades this claim to an UNVERIFIABLE fact check;
        it never propagates.
        """
        sources = await lookup_sources(self._search, claim.text, CLAIM_SEARCH_RESULTS)
        source = sources[0] if sources else None

        try:
            verification = await self._ai.complete(
                [{"role": "user", "content": VERIFICATION_PROMPT.format(claim=claim.text)}],
                model=self._model,
            )
        except Exception as e:
            logger.warning(f"⚠️ Error verifying claim '{claim.text}': {type(e).__name__}: {e}")
            verification = FALLBACK_VERIFICATION

        if not verification or not verification.strip():
            verification = FALLBACK_VERIFICATION

        fact_check = FactCheck(claim=claim.text, verification=verification.strip(), source=source)
        logger.info(f"🔍 Claim checked ({fact_check.status.value}): {claim.text[:80]}")
        return fact_check

    async def verify_all(self, claims: List[Claim]) -> List[FactCheck]:
        """Verify every claim, preserving the original claim order."""
        if self._max_concurrency == 1:
            results = []
            for i, claim in enumerate(claims):
                logger.info(f"🔍 Verifying claim {i+1}/{len(claims)}")
                results.append(await self.verify(claim))
            return results

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(claim: Claim) -> FactCheck:
            async with semaphore:
                return await self.verify(claim)

        return list(await asyncio.gather(*(bounded(claim) for claim in claims)))
