"""Domain models for the document-level misinformation assessment."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from .fact_check import FactCheck


class Verdict(str, Enum):
    """Top-level classification assigned to the whole input text."""

    REAL_NEWS = "REAL NEWS"
    FAKE_NEWS = "FAKE NEWS"
    POTENTIALLY_MISLEADING = "POTENTIALLY MISLEADING"
    INSUFFICIENT_DATA = "INSUFFICIENT DATA"


DEFAULT_CONFIDENCE = 50
DEFAULT_EXPLANATION = "Analysis completed."


class AnalysisResult(BaseModel):
    """Terminal output of one pipeline run."""

    verdict: Verdict = Field(default=Verdict.INSUFFICIENT_DATA, description="Overall verdict")
    confidence: int = Field(default=DEFAULT_CONFIDENCE, ge=0, le=100, description="Confidence (0-100)")
    explanation: str = Field(default=DEFAULT_EXPLANATION, description="Reasoning behind the verdict")
    key_points: List[str] = Field(
        default_factory=list,
        alias="keyPoints",
        description="Short analysis points",
    )
    sources: List[str] = Field(default_factory=list, description="Related web sources, deduplicated")
    fact_checks: List[FactCheck] = Field(
        default_factory=list,
        alias="factChecks",
        description="Per-claim verification results, in claim order",
    )
    raw_analysis: str = Field(default="", exclude=True, description="Unparsed model output")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "verdict": "REAL NEWS",
                "confidence": 95,
                "explanation": "Verifiable historical fact.",
                "keyPoints": ["Well documented", "No red flags"],
                "sources": ["en.wikipedia.org/wiki/Eiffel_Tower"],
                "factChecks": [],
            }
        }
