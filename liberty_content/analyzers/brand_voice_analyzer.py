"""
Brand voice scoring.

Four dimensions of the Liberty Gold Silver voice, each scored from a base
constant with per-marker adjustments and clamped once at the end:
- knowledgeable & authoritative
- trustworthy & transparent
- professional & established
- protective & strategic ("we don't push, we protect")
"""

from __future__ import annotations

import re

from ..config.lexicon import BrandLexicon, DEFAULT_LEXICON
from ..utils.helpers import (
    clamp_score, count_markers, find_markers, mean, round_half_up, split_sentences,
)
from .models import DimensionScore, SectionAnalysis

VOICE_THRESHOLD = 70


def score_authoritativeness(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    text = text or ""
    lowered = text.lower()
    score = 50

    score += count_markers(text, lexicon.authoritative_terms) * 8

    # Citations, years and percentages read as evidence
    if "source:" in lowered or "according to" in lowered:
        score += 10
    if re.search(r"\d{4}", text):
        score += 5
    if re.search(r"\d+%", text):
        score += 10

    unsubstantiated = find_markers(text, lexicon.unsubstantiated_claims)
    score -= len(unsubstantiated) * 15

    return DimensionScore(clamp_score(score), unsubstantiated)


def score_trustworthiness(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    text = text or ""
    lowered = text.lower()
    score = 50

    score += count_markers(text, lexicon.transparency_terms) * 12

    # Honesty about limitations
    if "not investment advice" in lowered:
        score += 15
    if "consult" in lowered and "professional" in lowered:
        score += 10

    score += count_markers(text, lexicon.trust_building_terms) * 8

    secretive = find_markers(text, lexicon.secretive_terms)
    score -= len(secretive) * 20

    return DimensionScore(clamp_score(score), secretive)


def score_professionalism(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    text = text or ""
    score = 70

    score += count_markers(text, lexicon.professional_terms) * 5

    casual = find_markers(text, lexicon.casual_terms)
    score -= len(casual) * 15

    avg_len = mean([len(s) for s in split_sentences(text)])
    if avg_len is not None:
        if 30 < avg_len < 80:
            score += 10
        if avg_len > 100:
            score -= 10

    return DimensionScore(clamp_score(score), casual)


def score_protectiveness(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    text = text or ""
    score = 50

    score += count_markers(text, lexicon.protective_terms) * 10

    edu_count = count_markers(text, lexicon.protective_educational_terms)
    sales = find_markers(text, lexicon.protective_sales_terms)

    if edu_count > len(sales) * 2:
        score += 15
    if len(sales) > edu_count:
        score -= 20

    return DimensionScore(clamp_score(score), sales)


def analyze_brand_voice(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> SectionAnalysis:
    dimensions = {
        "knowledgeable_authoritative": score_authoritativeness(text, lexicon),
        "trustworthy_transparent": score_trustworthiness(text, lexicon),
        "professional_established": score_professionalism(text, lexicon),
        "protective_strategic": score_protectiveness(text, lexicon),
    }

    issues = []
    if dimensions["knowledgeable_authoritative"].value < VOICE_THRESHOLD:
        issues.append("Lacks authoritative evidence and data")
    if dimensions["trustworthy_transparent"].value < VOICE_THRESHOLD:
        issues.append("Needs more transparency about risks and processes")
    if dimensions["professional_established"].value < VOICE_THRESHOLD:
        issues.append("Language too casual or trendy for target demographic")
    if dimensions["protective_strategic"].value < VOICE_THRESHOLD:
        issues.append("Too sales-focused, not protective enough")

    score = round_half_up(sum(d.value for d in dimensions.values()) / len(dimensions))
    return SectionAnalysis(score=score, dimensions=dimensions, issues=issues)
