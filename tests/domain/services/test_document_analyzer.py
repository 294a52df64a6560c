"""Tests for document-level analysis."""

import pytest

from misinfo_detector.domain.models.analysis import Verdict
from misinfo_detector.domain.models.fact_check import FactCheck
from misinfo_detector.domain.services.document_analyzer import DocumentAnalyzer, build_analysis_prompt


def test_build_analysis_prompt(eiffel_text):
    """Test that the prompt embeds text, fact checks, rubric and template."""
    fact_checks = [
        FactCheck(claim="Built in 1889", verification="STATUS: VERIFIED\nREASONING: Records."),
        FactCheck(claim="Located in Lyon", verification="STATUS: DISPUTED\nREASONING: It is in Paris."),
    ]
    prompt = build_analysis_prompt(eiffel_text, fact_checks)

    assert f'Text to analyze: "{eiffel_text}"' in prompt
    assert "- Built in 1889: STATUS: VERIFIED" in prompt
    assert "• Located in Lyon... - ✗ Disputed" in prompt
    for header in ("LOGICAL CONSISTENCY", "VERIFIABILITY", "RED FLAGS", "PLAUSIBILITY"):
        assert header in prompt
    assert "CONFIDENCE SCORING GUIDE" in prompt
    for header in ("VERDICT:", "CONFIDENCE:", "EXPLANATION:", "KEY ANALYSIS POINTS:"):
        assert header in prompt


@pytest.mark.asyncio
async def test_analyze(ai_provider, eiffel_text, real_news_response):
    """Test that one model call produces a parsed result."""
    analyzer = DocumentAnalyzer(ai_provider)
    fact_checks = [FactCheck(claim="Built in 1889", verification="STATUS: VERIFIED")]

    result = await analyzer.analyze(eiffel_text, fact_checks, sources=["a.com"])

    ai_provider.complete.assert_awaited_once()
    assert result.verdict == Verdict.REAL_NEWS
    assert result.confidence == 95
    assert result.explanation == "Verifiable historical fact."
    assert result.key_points == ["Well documented", "No red flags"]
    assert result.sources == ["a.com"]
    assert result.fact_checks == fact_checks
    assert result.raw_analysis == real_news_response


@pytest.mark.asyncio
async def test_analyze_empty_response(ai_provider, eiffel_text):
    """Test that an empty model answer degrades to defaults."""
    ai_provider.complete.return_value = ""
    result = await DocumentAnalyzer(ai_provider).analyze(eiffel_text, [])

    assert result.verdict == Verdict.INSUFFICIENT_DATA
    assert result.confidence == 50
    assert result.explanation == "Analysis completed."
    assert result.key_points == []
