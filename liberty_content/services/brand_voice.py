"""
Brand-voice rewrite tables.

Every transformation here is an ordered list of RewriteRule entries so each
table can be applied (and tested) on its own. ``apply_brand_voice_transformation``
is meant for free-text requests and topics; the redesigner only uses the
rule table.
"""
from __future__ import annotations

import re
from typing import Mapping, Tuple
from types import MappingProxyType

from ..utils.rules import RewriteRule, apply_rules, literal_rule

BRAND_VOICE_RULES: Tuple[RewriteRule, ...] = (
    RewriteRule(r"urgent|hurry|act now|limited time", "consider the importance of"),
    RewriteRule(r"buy now|purchase immediately", "explore the benefits of"),
    RewriteRule(r"guaranteed returns|risk-free", "historically demonstrated potential for"),
    RewriteRule(r"get rich|explosive growth", "wealth preservation and potential appreciation"),
    RewriteRule(r"don't miss out|last chance", "understanding the opportunity of"),
)

AUTHORITATIVE_RULES: Tuple[RewriteRule, ...] = (
    RewriteRule(r"\bI think\b", "Research indicates"),
    RewriteRule(r"\bIt seems\b", "Analysis shows"),
    RewriteRule(r"\bMaybe\b", "Evidence suggests"),
)

PROTECTIVE_RULES: Tuple[RewriteRule, ...] = (
    RewriteRule(r"buy now", "consider the benefits of"),
    RewriteRule(r"\bpurchase\b", "explore"),
    RewriteRule(r"get yours", "understand the value of"),
)

# Formal words simplified for a 45-75 readership.
PLAIN_LANGUAGE_RULES: Tuple[RewriteRule, ...] = (
    literal_rule("utilize", "use", whole_word=True, preserve_case=True),
    literal_rule("facilitate", "help", whole_word=True, preserve_case=True),
    literal_rule("subsequently", "then", whole_word=True, preserve_case=True),
)

SLANG_TERMS: Tuple[str, ...] = ("yo", "bro", "lit", "fire", "sick")
SLANG_RULES: Tuple[RewriteRule, ...] = tuple(
    literal_rule(term, "", whole_word=True) for term in SLANG_TERMS
)

# Pass-2 "conversational" substitutions for generated copy.
ENGAGEMENT_RULES: Tuple[RewriteRule, ...] = (
    RewriteRule(r"Throughout history,", "Think of it this way: throughout history,", flags=0),
    RewriteRule(r"Consider this:", "Here's something worth considering:", flags=0),
    RewriteRule(r"It's important to", "What's particularly important is to", flags=0),
)

AGGRESSIVE_TERM_REPLACEMENTS: Mapping[str, str] = MappingProxyType({
    "guaranteed returns": "potential for appreciation",
    "risk-free": "traditionally stable",
    "get rich": "build wealth",
    "explosive growth": "potential appreciation",
    "fortune": "financial security",
})
DEFAULT_AGGRESSIVE_REPLACEMENT = "potential benefits"

REFRAME_TRIGGERS = re.compile(r"sell|convince")
REFRAME_PREFIX = "Create educational content about precious metals that helps readers understand "


def aggressive_term_replacement(term: str) -> str:
    return AGGRESSIVE_TERM_REPLACEMENTS.get((term or "").lower(), DEFAULT_AGGRESSIVE_REPLACEMENT)


def apply_brand_voice_rules(text: str) -> str:
    return apply_rules(text, BRAND_VOICE_RULES)


def apply_brand_voice_transformation(request: str) -> str:
    """
    Align a free-text request with the "Trust Through Education" voice.

    Applies the rule table, then reframes the whole request as an
    educational brief when it still asks to sell or convince.
    """
    transformed = apply_brand_voice_rules(request or "")
    lowered = transformed.lower()
    if REFRAME_TRIGGERS.search(lowered):
        transformed = REFRAME_PREFIX + REFRAME_TRIGGERS.sub("the benefits of", lowered)
    return transformed
