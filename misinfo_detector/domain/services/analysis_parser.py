"""Parser for the model's free-text document analysis.

The model's answer is untrusted text that loosely follows a template with
fixed section headers. Each field is extracted by its own rule with its own
fallback, so a missing, reordered or malformed section only degrades that
one field.
"""

import re
from typing import List, NamedTuple

from ..models.analysis import DEFAULT_CONFIDENCE, DEFAULT_EXPLANATION, Verdict

VERDICT_HEADER = "VERDICT:"
CONFIDENCE_HEADER = "CONFIDENCE:"
EXPLANATION_HEADER = "EXPLANATION:"
KEY_POINTS_HEADER = "KEY ANALYSIS POINTS:"
SUMMARY_HEADER = "FACT CHECK SUMMARY:"

KNOWN_HEADERS = (
    VERDICT_HEADER,
    CONFIDENCE_HEADER,
    EXPLANATION_HEADER,
    KEY_POINTS_HEADER,
    SUMMARY_HEADER,
)

BULLET = "•"

_VERDICT_RE = re.compile(r"VERDICT:\s*(.+)")
_CONFIDENCE_RE = re.compile(r"CONFIDENCE:\s*(\d+)%")
_NEXT_HEADER = "|".join(re.escape(header) for header in KNOWN_HEADERS)


class ParsedAnalysis(NamedTuple):
    """Fields recovered from one model response."""

    verdict: Verdict
    confidence: int
    explanation: str
    key_points: List[str]


def _section(text: str, header: str) -> str:
    """Return the block after ``header`` up to the next line-leading header, or ''."""
    pattern = re.compile(
        re.escape(header) + r"\s*(.*?)(?=^[ \t]*(?:" + _NEXT_HEADER + r")|\Z)",
        re.DOTALL | re.MULTILINE,
    )
    match = pattern.search(text)
    return match.group(1).strip() if match else ""


def parse_verdict(text: str) -> Verdict:
    match = _VERDICT_RE.search(text)
    if not match:
        return Verdict.INSUFFICIENT_DATA
    token = match.group(1).strip().strip("[]*").strip().upper()
    try:
        return Verdict(token)
    except ValueError:
        return Verdict.INSUFFICIENT_DATA


def parse_confidence(text: str) -> int:
    match = _CONFIDENCE_RE.search(text)
    if not match:
        return DEFAULT_CONFIDENCE
    return max(0, min(100, int(match.group(1))))


def parse_explanation(text: str) -> str:
    return _section(text, EXPLANATION_HEADER) or DEFAULT_EXPLANATION


def parse_key_points(text: str) -> List[str]:
    """Split the key points block on bullets.

    Models occasionally use ``-`` or ``*`` list markers instead of the
    requested bullet; those blocks are split per line.
    """
    block = _section(text, KEY_POINTS_HEADER)
    if not block:
        return []
    if BULLET in block:
        segments = block.split(BULLET)
    else:
        segments = [line.strip().lstrip("-*").strip() for line in block.splitlines()]
    return [segment.strip() for segment in segments if segment.strip()]


def parse_analysis(text: str) -> ParsedAnalysis:
    """Parse every field of a document analysis response independently."""
    text = text or ""
    return ParsedAnalysis(
        verdict=parse_verdict(text),
        confidence=parse_confidence(text),
        explanation=parse_explanation(text),
        key_points=parse_key_points(text),
    )
