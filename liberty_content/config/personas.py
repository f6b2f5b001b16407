"""
Audience persona catalog.

Four fixed personas with messaging guidance, plus the language rules the
redesigner applies when rewriting for a persona. Lookups never fail: an
unknown persona key resolves to ``security_seekers``.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..utils.rules import RewriteRule

DEFAULT_PERSONA = "security_seekers"

# Accepted by the generator; means "no persona-specific guidance".
AUTO_DETECT = "auto_detect"


@dataclass(frozen=True)
class PersonaGuidance:
    persona_id: str
    persona: str
    messaging_focus: str
    pain_points: Tuple[str, ...]
    value_propositions: Tuple[str, ...]
    tone_note: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "persona_id": self.persona_id,
            "persona": self.persona,
            "messaging_focus": self.messaging_focus,
            "pain_points": list(self.pain_points),
            "value_propositions": list(self.value_propositions),
            "tone_note": self.tone_note,
        }


PERSONAS: Mapping[str, PersonaGuidance] = MappingProxyType({
    "security_seekers": PersonaGuidance(
        persona_id="security_seekers",
        persona="Security Seekers",
        messaging_focus="Stability, wealth preservation, protection from economic uncertainty",
        pain_points=(
            "Fear of market volatility",
            "Concern about currency devaluation",
            "Distrust of traditional financial institutions",
            "Worry about retirement security",
        ),
        value_propositions=(
            "Hedge against inflation",
            "Store of value with historical track record",
            "Portfolio diversification away from paper assets",
            "Tangible wealth you can hold",
        ),
        tone_note="Emphasize stability, safety, and historical precedent. Use data and evidence to build confidence.",
    ),
    "growth_hunters": PersonaGuidance(
        persona_id="growth_hunters",
        persona="Growth Hunters",
        messaging_focus="Portfolio enhancement, diversification opportunities, strategic wealth building",
        pain_points=(
            "Over-concentration in traditional investments",
            "Limited diversification options",
            "Concern about market correlations",
            "Seeking uncorrelated assets",
        ),
        value_propositions=(
            "Portfolio diversification benefits",
            "Potential for appreciation during economic stress",
            "Uncorrelated to traditional markets",
            "Strategic allocation for balanced portfolio",
        ),
        tone_note="Focus on strategic benefits and portfolio optimization. Emphasize smart allocation principles.",
    ),
    "legacy_builders": PersonaGuidance(
        persona_id="legacy_builders",
        persona="Legacy Builders",
        messaging_focus="Generational wealth, estate planning, long-term preservation",
        pain_points=(
            "Wealth transfer concerns",
            "Estate tax implications",
            "Long-term value preservation",
            "Intergenerational planning challenges",
        ),
        value_propositions=(
            "Generational wealth preservation",
            "Tangible assets for inheritance",
            "Estate planning benefits",
            "Long-term store of value",
        ),
        tone_note="Emphasize legacy, permanence, and multi-generational thinking. Use historical examples.",
    ),
    "crisis_reactors": PersonaGuidance(
        persona_id="crisis_reactors",
        persona="Crisis Reactors",
        messaging_focus="Economic protection, immediate security, crisis hedging",
        pain_points=(
            "Economic uncertainty and instability",
            "Inflation concerns",
            "Geopolitical risks",
            "Currency devaluation fears",
        ),
        value_propositions=(
            "Crisis hedge and safe haven",
            "Protection against economic turmoil",
            "Maintains value during uncertainty",
            "Independent of government and banking systems",
        ),
        tone_note="Address immediate concerns while maintaining educational approach. Focus on practical protection benefits.",
    ),
})

PERSONA_LANGUAGE_RULES: Mapping[str, Tuple[RewriteRule, ...]] = MappingProxyType({
    "security_seekers": (
        RewriteRule(r"\bgrowth\b", "stability and growth", preserve_case=True),
        RewriteRule(r"\bopportunity\b", "secure opportunity", preserve_case=True),
    ),
    "growth_hunters": (
        RewriteRule(r"\bspeculation\b", "strategic allocation", preserve_case=True),
        RewriteRule(r"\bbet\b", "position", preserve_case=True),
    ),
    "legacy_builders": (
        RewriteRule(r"\bshort-term\b", "long-term", preserve_case=True),
        RewriteRule(r"\bquick profits?\b", "lasting value", preserve_case=True),
    ),
    "crisis_reactors": (
        RewriteRule(r"\bpanic\b", "prepare", preserve_case=True),
        RewriteRule(r"\bcollapse\b", "disruption", preserve_case=True),
    ),
})


def resolve_persona_key(persona: Optional[str]) -> str:
    key = (persona or "").strip().lower()
    return key if key in PERSONAS else DEFAULT_PERSONA


def get_persona_guidance(persona: Optional[str]) -> PersonaGuidance:
    """Return guidance for ``persona``; unknown or empty keys fall back to security_seekers."""
    return PERSONAS[resolve_persona_key(persona)]


def get_persona_language_rules(persona: Optional[str]) -> Tuple[RewriteRule, ...]:
    return PERSONA_LANGUAGE_RULES[resolve_persona_key(persona)]
