"""Document-level misinformation analysis."""

import logging
from typing import List, Optional, Sequence

from ..models.analysis import AnalysisResult
from ..models.fact_check import FactCheck
from ..ports.ai_provider import AIProvider
from .analysis_parser import parse_analysis

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT = """
You are an expert fact-checker and misinformation analyst. Analyze this text with EXTREME SCRUTINY and logical reasoning.

IMPORTANT: Be very conservative with confidence scores. Only give high confidence (80%+) when you have strong evidence.

Text to analyze: "{text}"

Additional context from fact-checking:
{fact_check_context}

Analyze considering:

1. LOGICAL CONSISTENCY:
   - Does this make logical sense?
   - Are there obvious contradictions?
   - Does it align with how the world actually works?

2. VERIFIABILITY:
   - Can the main claims be verified?
   - Are there specific details that can be fact-checked?
   - Does it contain vague or unverifiable statements?

3. RED FLAGS:
   - Sensationalized language
   - Emotional manipulation
   - Missing context or sources
   - Extraordinary claims without evidence
   - Biased or leading language

4. PLAUSIBILITY:
   - Is this something that could realistically happen?
   - Does it align with known facts about the entities mentioned?
   - Are the claims proportional and reasonable?

CONFIDENCE SCORING GUIDE:
- 100%: Absolutely certain, indisputable evidence
- 90-95%: Overwhelming evidence, clearly verifiable
- 80-89%: Strong evidence, highly likely
- 70-79%: Good evidence, probably correct
- 60-69%: Some evidence, leaning toward assessment
- 50-59%: Insufficient evidence, uncertain
- Below 50%: Evidence contradicts the claim

Respond in this EXACT format:

VERDICT: [REAL NEWS/FAKE NEWS/POTENTIALLY MISLEADING/INSUFFICIENT DATA]
CONFIDENCE: [number between 0-100]%

EXPLANATION:
[2-3 sentences explaining your reasoning and why you assigned this confidence level]

KEY ANALYSIS POINTS:
• [Point 1 about credibility/logic]
• [Point 2 about verifiability]
• [Point 3 about red flags or supporting evidence]
• [Point 4 about overall plausibility]

FACT CHECK SUMMARY:
{fact_check_summary}
"""


def build_analysis_prompt(text: str, fact_checks: Sequence[FactCheck]) -> str:
    """Compose the single document-level prompt."""
    return ANALYSIS_PROMPT.format(
        text=text,
        fact_check_context="\n".join(f"- {fc.claim}: {fc.verification}" for fc in fact_checks),
        fact_check_summary="\n".join(fc.summary_line() for fc in fact_checks),
    )


class DocumentAnalyzer:
    """Produces the overall verdict for a text and its fact checks."""

    def __init__(self, ai_provider: AIProvider, model: Optional[str] = None):
        self._ai = ai_provider
        self._model = model

    async def analyze(
        self,
        text: str,
        fact_checks: Sequence[FactCheck],
        sources: Optional[List[str]] = None,
    ) -> AnalysisResult:
        """Invoke the model once and parse its structured answer.

        Args:
            text: Original input text
            fact_checks: Claim-level results, in claim order
            sources: Related sources to attach to the result

        Returns:
            Analysis result; unparsable sections fall back to their defaults
        """
        prompt = build_analysis_prompt(text, fact_checks)
        raw = await self._ai.complete([{"role": "user", "content": prompt}], model=self._model)
        raw = raw or ""
        parsed = parse_analysis(raw)
        logger.info(f"📊 Verdict: {parsed.verdict.value} ({parsed.confidence}%)")

        return AnalysisResult(
            verdict=parsed.verdict,
            confidence=parsed.confidence,
            explanation=parsed.explanation,
            key_points=parsed.key_points,
            sources=list(sources or []),
            fact_checks=list(fact_checks),
            raw_analysis=raw,
        )
