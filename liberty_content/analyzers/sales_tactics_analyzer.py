"""
Sales-pressure detection.

Starts at 80 and deducts for pressure tactics, urgency language and
aggressive claims, plus a flat penalty when push language outweighs trust
language.
"""

from __future__ import annotations

from typing import List

from ..config.lexicon import BrandLexicon, DEFAULT_LEXICON
from ..utils.helpers import count_markers, find_markers
from .models import SalesTacticsAnalysis


def find_pressure_tactics(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> List[str]:
    return find_markers(text, lexicon.pressure_terms)


def find_urgency_language(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> List[str]:
    return find_markers(text, lexicon.urgency_terms)


def find_aggressive_terms(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> List[str]:
    return find_markers(text, lexicon.aggressive_terms)


def trust_vs_push_ratio(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> float:
    """
    Trust markers divided by push markers. With no push markers the ratio is
    the trust count itself.
    """
    trust = count_markers(text, lexicon.trust_terms)
    push = count_markers(text, lexicon.push_terms)
    if push == 0:
        return float(trust)
    return trust / push


def analyze_sales_tactics(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> SalesTacticsAnalysis:
    pressure = find_pressure_tactics(text, lexicon)
    urgency = find_urgency_language(text, lexicon)
    aggressive = find_aggressive_terms(text, lexicon)
    ratio = trust_vs_push_ratio(text, lexicon)

    score = 80
    score -= len(pressure) * 15
    score -= len(urgency) * 10
    score -= len(aggressive) * 12
    if ratio < 1:
        score -= 20

    issues = []
    if pressure:
        issues.append(f"Uses pressure tactics: {', '.join(pressure)}")
    if urgency:
        issues.append(f"Uses urgency language: {', '.join(urgency)}")
    if aggressive:
        issues.append(f"Makes aggressive claims: {', '.join(aggressive)}")
    if ratio < 1 and count_markers(text, lexicon.push_terms):
        issues.append("Sales push outweighs trust-building language")

    return SalesTacticsAnalysis(
        score=max(0, score),
        pressure_tactics=pressure,
        urgency_language=urgency,
        aggressive_terms=aggressive,
        trust_vs_push_ratio=ratio,
        issues=issues,
    )
