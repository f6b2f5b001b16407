"""
Tests for the composite auditor and the single-pass brand compliance validator.
"""

from __future__ import annotations

import pytest

from liberty_content.analyzers import (
    ComplianceStatus,
    ContentAuditor,
    RedesignPriority,
    audit_content,
    validate_brand_compliance,
)
from liberty_content.analyzers.content_auditor import SECTION_WEIGHTS

from conftest import AGGRESSIVE_COPY, EDUCATIONAL_COPY

SAMPLES = [
    "",
    "   ",
    AGGRESSIVE_COPY,
    EDUCATIONAL_COPY,
    "yo bro this is lit " * 20,
    "derivative contango backwardation basis points. " * 40,
    "# Heading\n\n- one\n- two\n\nFirst, remember the key point.",
    "risk-free!!! " * 100,
]


def test_weights_sum_to_one():
    assert abs(sum(SECTION_WEIGHTS.values()) - 1.0) < 1e-9


@pytest.mark.parametrize("text", SAMPLES)
def test_all_scores_are_bounded(text):
    result = audit_content(text)
    assert 0 <= result.overall_score <= 100
    for score in result.section_scores().values():
        assert 0 <= score <= 100
    for dim in result.dimension_scores.values():
        assert 0 <= dim.value <= 100


@pytest.mark.parametrize("text", SAMPLES)
def test_audit_is_deterministic(text):
    assert audit_content(text, "blog").to_dict() == audit_content(text, "blog").to_dict()


def test_overall_is_weighted_sum_of_sections():
    result = audit_content(EDUCATIONAL_COPY)
    sections = result.section_scores()
    expected = sum(sections[name] * weight for name, weight in SECTION_WEIGHTS.items())
    assert abs(result.overall_score - expected) <= 0.5


def test_empty_audit_returns_issues_and_false_flags():
    result = audit_content("")
    data = result.to_dict()
    assert isinstance(data["issues"], list)
    assert data["issues"]
    compliance = data["detailed_analysis"]["compliance_requirements"]
    assert compliance["disclaimers_present"] is False
    assert compliance["risk_disclosures"] is False
    assert compliance["educational_framing"] is False


def test_non_string_input_is_treated_as_empty():
    assert audit_content(None).to_dict() == audit_content("").to_dict()


def test_aggressive_copy_gets_immediate_fixes():
    result = audit_content(AGGRESSIVE_COPY)
    fixes = result.recommendations.immediate_fixes
    assert "Remove pressure tactics and urgency language" in fixes
    assert "Replace aggressive return claims with balanced, evidence-based language" in fixes
    assert "Increase educational content relative to sales messaging" in fixes
    assert "Add required financial disclaimers" in result.recommendations.compliance_additions
    assert result.compliance_status is ComplianceStatus.FAILED


def test_educational_copy_beats_aggressive_copy():
    assert audit_content(EDUCATIONAL_COPY).overall_score > audit_content(AGGRESSIVE_COPY).overall_score


def test_to_dict_shape():
    data = ContentAuditor().audit(EDUCATIONAL_COPY, "email").to_dict()
    assert data["content_type"] == "email"
    assert set(data["detailed_analysis"]) == {
        "brand_voice", "audience_alignment", "content_structure",
        "compliance_requirements", "sales_tactics",
    }
    assert set(data["recommendations"]) == {
        "immediate_fixes", "structural_changes", "voice_adjustments", "compliance_additions",
    }
    assert data["redesign_priority"] in {p.value for p in RedesignPriority}
    assert "knowledgeable_authoritative" in data["dimension_scores"]


@pytest.mark.parametrize(
    "score, expected",
    [(100, "PASSED"), (80, "PASSED"), (79, "NEEDS_IMPROVEMENT"), (60, "NEEDS_IMPROVEMENT"), (59, "FAILED"), (0, "FAILED")],
)
def test_status_thresholds(score, expected):
    assert ComplianceStatus.from_score(score).value == expected


@pytest.mark.parametrize(
    "score, disclaimers, expected",
    [
        (39, True, "CRITICAL"),
        (40, True, "HIGH"),
        (59, False, "HIGH"),
        (60, True, "MEDIUM"),
        (74, True, "MEDIUM"),
        (90, False, "MEDIUM"),
        (75, True, "LOW"),
    ],
)
def test_priority_thresholds(score, disclaimers, expected):
    assert RedesignPriority.from_audit(score, disclaimers).value == expected


# Brand compliance validator
def test_validator_deducts_per_aggressive_phrase():
    result = validate_brand_compliance(AGGRESSIVE_COPY)
    # act now, don't miss out, guaranteed returns; too little educational language
    assert result.score == 100 - 3 * 15 - 10
    assert not result.passed
    assert result.to_dict()["compliance_status"] == "NEEDS_IMPROVEMENT"


def test_validator_passes_educational_copy():
    result = validate_brand_compliance(EDUCATIONAL_COPY)
    assert result.score == 100
    assert result.disclaimers_included
    assert result.to_dict()["compliance_status"] == "PASSED"


def test_validator_disclaimer_check_for_long_text():
    text = "Learn, understand and consider the history of coins. " * 12
    assert "Missing required financial disclaimers" in validate_brand_compliance(text).issues
    assert validate_brand_compliance(text, check_disclaimers=False).score == 100


def test_validator_slang_uses_whole_words():
    assert validate_brand_compliance("your literature, learn understand consider").score == 100
    assert validate_brand_compliance("yo, learn understand consider").score == 85
