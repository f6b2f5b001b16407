"""
Audience alignment scoring for the 45-75 conservative-investor demographic.
"""

from __future__ import annotations

from ..config.lexicon import BrandLexicon, DEFAULT_LEXICON
from ..utils.helpers import (
    clamp_score, count_markers, find_markers, find_whole_words, round_half_up,
    split_sentences, split_words,
)
from .models import DimensionScore, SectionAnalysis

AUDIENCE_THRESHOLD = 70


def score_age_appropriateness(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    # Slang is matched on word boundaries: "yo" must not hit "your".
    slang = find_whole_words(text, lexicon.age_inappropriate_terms)
    score = 70
    score -= len(slang) * 25
    score += count_markers(text, lexicon.age_appropriate_refs) * 8
    return DimensionScore(clamp_score(score), slang)


def score_tone_match(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    score = 60
    score += count_markers(text, lexicon.conservative_terms) * 10
    score += count_markers(text, lexicon.risk_averse_terms) * 8
    return DimensionScore(clamp_score(score))


def score_complexity_fit(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    score = 50

    sentences = split_sentences(text)
    if sentences:
        words_per_sentence = len(split_words(text)) / len(sentences)
        if 15 <= words_per_sentence <= 25:
            score += 20
        elif words_per_sentence < 10:
            score -= 15
        elif words_per_sentence > 30:
            score -= 20

    jargon = find_markers(text, lexicon.jargon_terms)
    if len(jargon) > 3:
        score -= 15

    return DimensionScore(clamp_score(score), jargon)


def analyze_audience_alignment(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> SectionAnalysis:
    dimensions = {
        "age_appropriate": score_age_appropriateness(text, lexicon),
        "tone_match": score_tone_match(text, lexicon),
        "complexity_level": score_complexity_fit(text, lexicon),
    }

    issues = []
    if dimensions["age_appropriate"].value < AUDIENCE_THRESHOLD:
        issues.append("Language not appropriate for 45-75 demographic")
    if dimensions["tone_match"].value < AUDIENCE_THRESHOLD:
        issues.append("Tone doesn't match conservative investor preferences")
    if dimensions["complexity_level"].value < AUDIENCE_THRESHOLD:
        issues.append("Content complexity not optimal for audience")

    score = round_half_up(sum(d.value for d in dimensions.values()) / len(dimensions))
    return SectionAnalysis(score=score, dimensions=dimensions, issues=issues)
