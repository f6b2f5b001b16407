"""
Financial-content compliance checks: disclaimers, risk disclosures and
educational framing.
"""

from __future__ import annotations

from ..config.lexicon import BrandLexicon, DEFAULT_LEXICON
from ..utils.helpers import contains_any, count_markers
from .models import ComplianceAnalysis

RISK_DISCLOSURE_MIN_MATCHES = 2
EDUCATIONAL_FRAMING_MIN_MATCHES = 3
# Shorter texts are not expected to carry a risk statement.
RISK_DISCLOSURE_MIN_LENGTH = 500


def has_disclaimers(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> bool:
    return contains_any(text, lexicon.disclaimer_terms)


def has_risk_disclosures(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> bool:
    return count_markers(text, lexicon.risk_terms) >= RISK_DISCLOSURE_MIN_MATCHES


def has_educational_framing(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> bool:
    return count_markers(text, lexicon.educational_framing_terms) >= EDUCATIONAL_FRAMING_MIN_MATCHES


def analyze_compliance(text: str, lexicon: BrandLexicon = DEFAULT_LEXICON) -> ComplianceAnalysis:
    text = text or ""
    score = 50
    issues = []

    disclaimers = has_disclaimers(text, lexicon)
    if disclaimers:
        score += 25
    else:
        issues.append("Missing required financial disclaimers")

    risk = has_risk_disclosures(text, lexicon)
    if risk:
        score += 20
    elif len(text) > RISK_DISCLOSURE_MIN_LENGTH:
        issues.append("Needs risk disclosure statements")

    framing = has_educational_framing(text, lexicon)
    if framing:
        score += 25
    else:
        issues.append("Content not properly framed as educational")

    return ComplianceAnalysis(
        score=min(100, score),
        disclaimers_present=disclaimers,
        risk_disclosures=risk,
        educational_framing=framing,
        issues=issues,
    )
