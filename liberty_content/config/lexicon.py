"""
Liberty Gold Silver brand lexicon.

Every category is an ordered tuple of marker phrases. Markers are matched
case-insensitively by substring containment unless the scorer says otherwise
(slang markers are matched as whole words). The lexicon is built once at
import time and handed to the scorers by reference.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Markers = Tuple[str, ...]


@dataclass(frozen=True)
class BrandLexicon:
    """Marker tables for every audit dimension."""

    # Brand voice: knowledgeable & authoritative
    authoritative_terms: Markers
    unsubstantiated_claims: Markers
    # Brand voice: trustworthy & transparent
    transparency_terms: Markers
    trust_building_terms: Markers
    secretive_terms: Markers
    # Brand voice: professional & established
    professional_terms: Markers
    casual_terms: Markers
    # Brand voice: protective & strategic
    protective_terms: Markers
    protective_educational_terms: Markers
    protective_sales_terms: Markers

    # Audience alignment (45-75 conservative investors)
    age_inappropriate_terms: Markers
    age_appropriate_refs: Markers
    conservative_terms: Markers
    risk_averse_terms: Markers
    jargon_terms: Markers

    # Content structure
    progression_terms: Markers
    reinforcement_terms: Markers

    # Compliance
    disclaimer_terms: Markers
    risk_terms: Markers
    educational_framing_terms: Markers

    # Sales tactics
    pressure_terms: Markers
    urgency_terms: Markers
    aggressive_terms: Markers
    trust_terms: Markers
    push_terms: Markers

    # Brand compliance validator
    aggressive_sales_language: Markers
    validator_educational_terms: Markers
    validator_disclaimer_terms: Markers


DEFAULT_LEXICON = BrandLexicon(
    authoritative_terms=(
        "data shows", "research indicates", "historical", "evidence", "studies show",
        "according to", "analysis reveals", "experts", "decades of", "proven",
        "statistics", "federal reserve", "treasury", "economic data", "market data",
    ),
    unsubstantiated_claims=(
        "everyone knows", "obviously", "clearly", "without a doubt",
        "definitely will", "guaranteed to", "always works",
    ),
    transparency_terms=(
        "risk", "consider", "factors", "important to understand",
        "no guarantee", "past performance", "potential downsides",
        "consult", "evaluate", "assess your situation",
    ),
    trust_building_terms=(
        "our process", "we believe", "our approach", "transparency",
        "honest", "straightforward", "clear about",
    ),
    secretive_terms=(
        "secret", "exclusive insider", "hidden opportunity",
        "banks don't want you to know", "wall street hates this",
    ),
    professional_terms=(
        "portfolio", "allocation", "diversification", "investment strategy",
        "wealth preservation", "financial planning", "asset class",
        "market conditions", "economic factors",
    ),
    casual_terms=(
        "awesome", "amazing", "incredible", "unbelievable", "crazy",
        "insane", "wild", "epic", "mind-blowing", "game-changer",
    ),
    protective_terms=(
        "protect", "preserve", "safeguard", "hedge against",
        "shield from", "defense against", "security", "stability",
        "wealth preservation", "protection from inflation",
    ),
    protective_educational_terms=(
        "understand", "learn", "consider", "evaluate", "analyze",
        "factors", "important to know", "key points", "things to consider",
    ),
    protective_sales_terms=(
        "buy now", "purchase", "order", "call today", "don't wait",
        "limited time", "act fast", "special offer", "discount",
    ),
    age_inappropriate_terms=(
        "yo", "bro", "dude", "lit", "fire", "sick", "bet", "cap",
        "no cap", "fr", "periodt", "slaps", "hits different",
    ),
    age_appropriate_refs=(
        "retirement", "estate planning", "legacy", "grandchildren",
        "fixed income", "social security", "pension", "401k", "ira",
    ),
    conservative_terms=(
        "stability", "security", "preservation", "steady", "reliable",
        "time-tested", "established", "proven track record", "conservative approach",
    ),
    risk_averse_terms=(
        "careful consideration", "prudent", "cautious", "measured approach",
        "due diligence", "thoroughly evaluate",
    ),
    jargon_terms=(
        "derivative", "quantitative easing", "basis points", "contango",
        "backwardation", "volatility surface", "correlation coefficient",
    ),
    progression_terms=(
        "first", "second", "next", "then", "finally", "to begin",
        "let's start", "to understand", "consider this", "for example",
    ),
    reinforcement_terms=(
        "remember", "key point", "important", "takeaway",
        "in summary", "to recap", "this means",
    ),
    disclaimer_terms=(
        "not investment advice", "not financial advice", "consult",
        "educational purposes", "past performance", "no guarantee",
    ),
    risk_terms=(
        "risk", "may lose", "no guarantee", "past performance",
        "market volatility", "fluctuate", "consider your situation",
    ),
    educational_framing_terms=(
        "understand", "learn", "education", "knowledge", "inform",
        "consider", "evaluate", "factors", "important to know",
    ),
    pressure_terms=(
        "act now", "don't wait", "last chance", "limited spots",
        "only today", "expires soon", "while supplies last",
        "don't miss out", "you must", "you should",
    ),
    urgency_terms=(
        "urgent", "immediately", "right now", "today only",
        "hurry", "fast", "quick", "instant", "emergency",
    ),
    aggressive_terms=(
        "guaranteed returns", "risk-free", "can't lose", "sure thing",
        "explosive growth", "get rich", "fortune", "wealth beyond",
    ),
    trust_terms=(
        "trust", "reliable", "honest", "transparent", "education",
        "understand", "learn", "consider", "evaluate",
    ),
    push_terms=(
        "buy", "purchase", "order", "call now", "get", "grab",
        "don't miss", "act now", "limited time",
    ),
    aggressive_sales_language=(
        "act now", "limited time", "urgent", "must buy", "don't miss out",
        "guaranteed returns", "risk-free", "get rich", "explosive growth",
    ),
    validator_educational_terms=(
        "understand", "learn", "historical", "data shows", "research indicates",
        "consider", "evaluate", "analyze", "factors to consider",
    ),
    validator_disclaimer_terms=(
        "not investment advice", "past performance", "consult", "specialist",
    ),
)

# Concepts, indicators and topic labels used by key-information extraction
# and complete regeneration.
FACTUAL_INDICATORS: Markers = (
    "according to", "data shows", "research indicates", "studies show",
    "history shows", "since 1971", "federal reserve", "treasury",
    "was established", "has been", "is regulated by",
)

KEY_CONCEPTS: Markers = (
    "gold ira", "precious metals", "portfolio diversification", "inflation hedge",
    "wealth preservation", "economic uncertainty", "store of value",
    "physical possession", "tax advantages", "retirement planning",
)

COMPANY_INDICATORS: Markers = (
    "our process", "we provide", "our team", "our approach",
    "we believe", "our mission", "liberty gold silver",
)

# Ordered keyword -> topic label; first hit wins.
TOPIC_LABELS: Tuple[Tuple[str, str], ...] = (
    ("gold ira", "Gold IRA benefits and considerations"),
    ("silver investing", "Silver investment fundamentals"),
    ("inflation", "Precious metals as inflation hedge"),
    ("retirement", "Precious metals in retirement planning"),
)
DEFAULT_TOPIC_LABEL = "Precious metals investment education"

# Ordered keyword -> generated heading title; first hit wins.
TITLE_LABELS: Tuple[Tuple[str, str], ...] = (
    ("gold ira", "Understanding Gold IRAs: A Guide for Informed Investors"),
    ("silver", "Silver Investing: Educational Insights for Portfolio Diversification"),
    ("precious metals", "Precious Metals Education: Building Knowledge for Informed Decisions"),
)
DEFAULT_TITLE_LABEL = "Educational Guide: Understanding Precious Metals Investing"

SEO_KEYWORDS: Markers = (
    "gold ira", "precious metals", "silver investing", "wealth preservation",
    "portfolio diversification", "economic uncertainty", "inflation hedge",
)
