"""
Single-pass brand compliance validation.

A reduced variant of the full audit used on generated copy and by the
``validate_brand_compliance`` tool: start at 100 and deduct for aggressive
sales language, thin educational language, missing disclaimers on long
copy, and slang.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..config.lexicon import BrandLexicon, DEFAULT_LEXICON
from ..utils.helpers import contains_any, count_markers, find_markers, find_whole_words

PASSING_SCORE = 80
MIN_EDUCATIONAL_TERMS = 3
DISCLAIMER_REQUIRED_LENGTH = 500
SLANG_MARKERS = ("yo", "bro", "lit")


@dataclass
class BrandComplianceResult:
    score: int
    disclaimers_included: bool
    issues: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.score >= PASSING_SCORE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brand_voice_score": self.score,
            "disclaimers_included": self.disclaimers_included,
            "issues": list(self.issues),
            "compliance_status": "PASSED" if self.passed else "NEEDS_IMPROVEMENT",
        }


def validate_brand_compliance(
    content: str,
    lexicon: BrandLexicon = DEFAULT_LEXICON,
    check_disclaimers: bool = True,
) -> BrandComplianceResult:
    text = content if isinstance(content, str) else ""
    issues: List[str] = []
    score = 100

    for term in find_markers(text, lexicon.aggressive_sales_language):
        issues.append(f'Contains aggressive sales language: "{term}"')
        score -= 15

    if count_markers(text, lexicon.validator_educational_terms) < MIN_EDUCATIONAL_TERMS:
        issues.append("Insufficient educational language - needs more informative tone")
        score -= 10

    disclaimers = contains_any(text, lexicon.validator_disclaimer_terms)
    if check_disclaimers and not disclaimers and len(text) > DISCLAIMER_REQUIRED_LENGTH:
        issues.append("Missing required financial disclaimers")
        score -= 20

    if find_whole_words(text, SLANG_MARKERS):
        issues.append("Language not appropriate for target demographic (45-75)")
        score -= 15

    return BrandComplianceResult(score=max(0, score), disclaimers_included=disclaimers, issues=issues)
