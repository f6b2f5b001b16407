"""
Content structure scoring: information hierarchy, readability and
educational flow.
"""

from __future__ import annotations

from ..config.lexicon import BrandLexicon, DEFAULT_LEXICON
from ..utils.helpers import (
    clamp_score, count_markers, mean, round_half_up, split_paragraphs, split_sentences,
)
from .models import DimensionScore, SectionAnalysis

STRUCTURE_THRESHOLD = 70
LIST_MARKERS = ("•", "-", "*")


def score_information_hierarchy(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    text = text or ""
    score = 50

    if "#" in text:
        score += 15
    if any(marker in text for marker in LIST_MARKERS):
        score += 10

    paragraphs = split_paragraphs(text)
    if len(paragraphs) >= 3:
        score += 10

    # Opening statement
    first_paragraph = paragraphs[0] if paragraphs else ""
    if 50 < len(first_paragraph) < 200:
        score += 10

    return DimensionScore(clamp_score(score))


def score_readability(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    text = text or ""
    score = 60

    avg_sentence = mean([len(s) for s in split_sentences(text)])
    if avg_sentence is not None and 50 < avg_sentence < 120:
        score += 15

    # Short paragraphs suit older readers
    avg_paragraph = mean([len(p) for p in split_paragraphs(text)])
    if avg_paragraph is not None and avg_paragraph < 500:
        score += 10

    if text:
        whitespace_ratio = sum(1 for ch in text if ch.isspace()) / len(text)
        if 0.15 < whitespace_ratio < 0.25:
            score += 10

    return DimensionScore(clamp_score(score))


def score_educational_flow(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> DimensionScore:
    score = 50
    score += count_markers(text, lexicon.progression_terms) * 8
    score += count_markers(text, lexicon.reinforcement_terms) * 10
    return DimensionScore(clamp_score(score))


def analyze_content_structure(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> SectionAnalysis:
    dimensions = {
        "information_hierarchy": score_information_hierarchy(text, lexicon),
        "readability": score_readability(text, lexicon),
        "educational_flow": score_educational_flow(text, lexicon),
    }

    issues = []
    if dimensions["information_hierarchy"].value < STRUCTURE_THRESHOLD:
        issues.append("Poor information hierarchy - needs better structure")
    if dimensions["readability"].value < STRUCTURE_THRESHOLD:
        issues.append("Readability issues - too dense or poorly formatted")
    if dimensions["educational_flow"].value < STRUCTURE_THRESHOLD:
        issues.append("Doesn't follow educational progression")

    score = round_half_up(sum(d.value for d in dimensions.values()) / len(dimensions))
    return SectionAnalysis(score=score, dimensions=dimensions, issues=issues)
