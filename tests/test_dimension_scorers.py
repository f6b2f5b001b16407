"""
Tests for the per-dimension scorers (brand voice, audience, structure,
compliance, sales tactics).
"""

from __future__ import annotations

import pytest

from liberty_content.analyzers.audience_analyzer import (
    analyze_audience_alignment,
    score_age_appropriateness,
    score_complexity_fit,
    score_tone_match,
)
from liberty_content.analyzers.brand_voice_analyzer import (
    analyze_brand_voice,
    score_authoritativeness,
    score_professionalism,
    score_protectiveness,
    score_trustworthiness,
)
from liberty_content.analyzers.compliance_analyzer import analyze_compliance
from liberty_content.analyzers.sales_tactics_analyzer import analyze_sales_tactics, trust_vs_push_ratio
from liberty_content.analyzers.structure_analyzer import (
    analyze_content_structure,
    score_educational_flow,
    score_information_hierarchy,
    score_readability,
)

from conftest import AGGRESSIVE_COPY, EDUCATIONAL_COPY


# Brand voice
def test_authoritativeness_rewards_evidence():
    plain = score_authoritativeness("Gold is shiny")
    cited = score_authoritativeness("According to treasury data, gold rose 12% in 2008")
    assert plain.value == 50
    # +8 (according to) +8 (treasury) +10 citation +5 year +10 percent
    assert cited.value == 91


def test_authoritativeness_penalizes_unsubstantiated_claims():
    result = score_authoritativeness("Everyone knows gold obviously always works")
    assert result.value == 5
    assert result.matched_markers == ["everyone knows", "obviously", "always works"]


def test_trustworthiness_penalizes_secretive_language():
    result = score_trustworthiness("The secret banks don't want you to know")
    assert result.value == 10
    assert "secret" in result.matched_markers


def test_professionalism_drops_for_casual_words():
    result = score_professionalism("This is awesome and amazing")
    # 70 - 30, one sentence of 27 chars gets no length bonus
    assert result.value == 40
    assert result.matched_markers == ["awesome", "amazing"]


def test_protectiveness_prefers_education_over_sales():
    educational = score_protectiveness("Learn to protect and preserve wealth; consider and evaluate")
    salesy = score_protectiveness("Buy now! Special offer, discount, call today")
    assert educational.value > 70
    assert salesy.value < 50
    assert "buy now" in salesy.matched_markers


def test_brand_voice_section_is_mean_of_dimensions():
    section = analyze_brand_voice(EDUCATIONAL_COPY)
    values = [d.value for d in section.dimensions.values()]
    assert set(section.dimensions) == {
        "knowledgeable_authoritative",
        "trustworthy_transparent",
        "professional_established",
        "protective_strategic",
    }
    assert abs(section.score - sum(values) / 4) <= 0.5


# Audience
@pytest.mark.parametrize(
    "text, expected",
    [
        ("A plain sentence", 70),
        ("Yo, this works", 45),
        ("yo bro this is lit", 0),
        ("Your retirement and pension", 86),
    ],
)
def test_age_appropriateness(text, expected):
    assert score_age_appropriateness(text).value == expected


def test_slang_is_matched_on_word_boundaries():
    """'yo' must not match inside 'your'; 'lit' not inside 'literature'."""
    result = score_age_appropriateness("your literature")
    assert result.value == 70
    assert result.matched_markers == []


def test_tone_match_rewards_conservative_language():
    assert score_tone_match("Nothing relevant").value == 60
    assert score_tone_match("stability and security with prudent due diligence").value == 96


def test_complexity_fit_penalizes_short_sentences_and_jargon():
    assert score_complexity_fit("Buy. Now. Go.").value == 35
    jargon = "derivative contango backwardation basis points quantitative easing"
    result = score_complexity_fit(jargon)
    assert len(result.matched_markers) > 3
    assert result.value < 50


def test_audience_section_issues():
    section = analyze_audience_alignment("yo bro this is lit")
    assert "Language not appropriate for 45-75 demographic" in section.issues


# Structure
def test_information_hierarchy_rewards_headings_and_lists():
    flat = score_information_hierarchy("one line")
    structured = score_information_hierarchy(
        "# Title\n\nAn opening paragraph that explains what the reader will learn today.\n\n- point\n\nEnd"
    )
    assert flat.value == 50
    assert structured.value == 85


def test_readability_handles_empty_text():
    assert score_readability("").value == 60


def test_educational_flow_counts_progression_and_reinforcement():
    assert score_educational_flow("").value == 50
    # +8 per progression term (2), +10 per reinforcement term (3)
    assert score_educational_flow("First, remember the key point. Finally, in summary").value == 96


def test_structure_section_issue_strings():
    section = analyze_content_structure("short")
    assert "Doesn't follow educational progression" in section.issues


# Compliance
def test_compliance_flags_for_educational_copy():
    result = analyze_compliance(EDUCATIONAL_COPY)
    assert result.disclaimers_present
    assert result.risk_disclosures
    assert result.educational_framing
    assert result.score == 100
    assert result.issues == []


def test_risk_issue_only_for_long_text():
    short = analyze_compliance("Gold coins")
    long = analyze_compliance("Gold coins. " * 60)
    assert "Needs risk disclosure statements" not in short.issues
    assert "Needs risk disclosure statements" in long.issues


def test_empty_text_compliance():
    result = analyze_compliance("")
    assert result.score == 50
    assert result.disclaimers_present is False
    assert result.risk_disclosures is False
    assert result.educational_framing is False


# Sales tactics
def test_aggressive_copy_scenario():
    result = analyze_sales_tactics(AGGRESSIVE_COPY)
    assert "guaranteed returns" in result.aggressive_terms
    assert "act now" in result.pressure_tactics
    assert "don't miss out" in result.pressure_tactics
    assert result.score < 50


def test_ratio_without_push_words_is_trust_count():
    text = "We want you to understand, learn and evaluate"
    assert trust_vs_push_ratio(text) == 3.0
    assert trust_vs_push_ratio("") == 0.0


def test_sales_score_floors_at_zero():
    text = (
        "Act now, don't wait, last chance, only today, expires soon! Hurry, urgent, immediately. "
        "Guaranteed returns, risk-free, get rich, explosive growth. Buy, order, grab."
    )
    result = analyze_sales_tactics(text)
    assert result.score == 0


def test_push_issue_needs_push_words():
    assert "Sales push outweighs trust-building language" not in analyze_sales_tactics("").issues
    assert "Sales push outweighs trust-building language" in analyze_sales_tactics("buy gold").issues


@pytest.mark.parametrize(
    "scorer, base",
    [
        (score_authoritativeness, 50),
        (score_trustworthiness, 50),
        (score_professionalism, 70),
        (score_protectiveness, 50),
        (score_age_appropriateness, 70),
        (score_tone_match, 60),
        (score_complexity_fit, 50),
        (score_information_hierarchy, 50),
        (score_readability, 60),
        (score_educational_flow, 50),
    ],
)
def test_empty_text_scores_base_value(scorer, base):
    result = scorer("")
    assert (result.value, result.matched_markers) == (base, [])
