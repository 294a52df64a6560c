"""Tests for the command-line output."""

from misinfo_detector.domain.models.analysis import AnalysisResult, Verdict
from misinfo_detector.domain.models.fact_check import FactCheck
from misinfo_detector.main import format_result


def test_format_result():
    """Test rendering of a complete result."""
    result = AnalysisResult(
        verdict=Verdict.FAKE_NEWS,
        confidence=82,
        explanation="The quoted statistic does not exist.",
        key_points=["Fabricated number", "No source"],
        sources=["www.snopes.com"],
        fact_checks=[
            FactCheck(claim="90% of doctors agree", verification="STATUS: DISPUTED", source="who.int"),
            FactCheck(claim="Published in 2020", verification="STATUS: UNVERIFIABLE"),
        ],
    )

    output = format_result(result)

    assert "Verdict: FAKE NEWS" in output
    assert "Confidence: 82%" in output
    assert "• Fabricated number" in output
    assert "1. [DISPUTED] 90% of doctors agree (who.int)" in output
    assert "2. [UNVERIFIABLE] Published in 2020" in output
    assert "- www.snopes.com" in output


def test_format_minimal_result():
    """Test rendering when every list is empty."""
    output = format_result(AnalysisResult())

    assert output.startswith("Verdict: INSUFFICIENT DATA\nConfidence: 50%")
    assert "Key points" not in output
    assert "Sources" not in output
