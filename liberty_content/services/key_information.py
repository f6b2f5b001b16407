"""
Key-information extraction used when a redesign must preserve facts.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..config.lexicon import (
    COMPANY_INDICATORS,
    DEFAULT_TITLE_LABEL,
    DEFAULT_TOPIC_LABEL,
    FACTUAL_INDICATORS,
    KEY_CONCEPTS,
    TITLE_LABELS,
    TOPIC_LABELS,
)
from ..utils.helpers import find_markers

MAX_FACTS = 10
MAX_STATISTICS = 8
MAX_COMPANY_SPECIFIC = 5

STATISTIC_PATTERN = re.compile(r"\d+%|\$\d+|\d{4}|\d+\.\d+")


@dataclass
class KeyInformation:
    facts: List[str] = field(default_factory=list)
    statistics: List[str] = field(default_factory=list)
    key_concepts: List[str] = field(default_factory=list)
    company_specific: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.facts or self.statistics or self.key_concepts or self.company_specific)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "facts": list(self.facts),
            "statistics": list(self.statistics),
            "key_concepts": list(self.key_concepts),
            "company_specific": list(self.company_specific),
        }


def _sentences(content: str) -> List[str]:
    return [s.strip() for s in (content or "").split(".") if s.strip()]


def extract_facts(content: str) -> List[str]:
    facts = [s for s in _sentences(content) if find_markers(s, FACTUAL_INDICATORS)]
    return facts[:MAX_FACTS]


def extract_statistics(content: str) -> List[str]:
    stats = [s for s in _sentences(content) if STATISTIC_PATTERN.search(s)]
    return stats[:MAX_STATISTICS]


def extract_key_concepts(content: str) -> List[str]:
    return find_markers(content, KEY_CONCEPTS)


def extract_company_specific(content: str) -> List[str]:
    company = [s for s in _sentences(content) if find_markers(s, COMPANY_INDICATORS)]
    return company[:MAX_COMPANY_SPECIFIC]


def extract_key_information(content: str) -> KeyInformation:
    return KeyInformation(
        facts=extract_facts(content),
        statistics=extract_statistics(content),
        key_concepts=extract_key_concepts(content),
        company_specific=extract_company_specific(content),
    )


def _first_label(content: str, labels, default: str) -> str:
    lowered = (content or "").lower()
    for keyword, label in labels:
        if keyword in lowered:
            return label
    return default


def derive_topic(content: str) -> str:
    """Coarse topic label for regenerating ``content``; first keyword hit wins."""
    return _first_label(content, TOPIC_LABELS, DEFAULT_TOPIC_LABEL)


def derive_title(content: str) -> str:
    return _first_label(content, TITLE_LABELS, DEFAULT_TITLE_LABEL)
