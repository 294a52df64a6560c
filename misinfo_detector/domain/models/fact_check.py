"""Domain models for claim-level verification results."""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class ClaimStatus(str, Enum):
    """Possible outcomes of verifying a single claim."""

    VERIFIED = "VERIFIED"
    DISPUTED = "DISPUTED"
    UNVERIFIABLE = "UNVERIFIABLE"


_STATUS_PATTERN = re.compile(r"STATUS:\s*\[?\s*(VERIFIED|DISPUTED|UNVERIFIABLE)\b")
_DISPUTED_WORD = re.compile(r"(?<!NOT )\bDISPUTED\b")
_VERIFIED_WORD = re.compile(r"(?<!NOT )\bVERIFIED\b")


def status_from_verification(verification: str) -> ClaimStatus:
    """Derive a claim status from the model's free-text verification.

    The explicit ``STATUS:`` line wins. Otherwise the text is scanned for
    DISPUTED, then VERIFIED, as whole words not preceded by NOT; words such
    as UNVERIFIED or UNDISPUTED do not count.
    """
    match = _STATUS_PATTERN.search(verification)
    if match:
        return ClaimStatus(match.group(1))
    if _DISPUTED_WORD.search(verification):
        return ClaimStatus.DISPUTED
    if _VERIFIED_WORD.search(verification):
        return ClaimStatus.VERIFIED
    return ClaimStatus.UNVERIFIABLE


class FactCheck(BaseModel):
    """Verification outcome and optional corroborating source for one claim."""

    claim: str = Field(..., description="The claim that was checked")
    verification: str = Field(..., description="Model verification text (status and reasoning)")
    source: Optional[str] = Field(None, description="First search hit for the claim, if any")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model
        json_schema_extra = {
            "example": {
                "claim": "The Eiffel Tower was completed in 1889.",
                "verification": "STATUS: VERIFIED\nREASONING: Widely documented construction date.",
                "source": "en.wikipedia.org/wiki/Eiffel_Tower",
            }
        }

    @computed_field
    @property
    def status(self) -> ClaimStatus:
        """Status parsed from the verification text."""
        return status_from_verification(self.verification)

    def summary_line(self) -> str:
        """Render a one-line status summary used in the analysis prompt."""
        label = {
            ClaimStatus.VERIFIED: "✓ Verified",
            ClaimStatus.DISPUTED: "✗ Disputed",
            ClaimStatus.UNVERIFIABLE: "? Unverifiable",
        }[self.status]
        return f"• {self.claim[:100]}... - {label}"
