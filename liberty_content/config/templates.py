"""
Static copy used by the generator and the redesigner: content-type templates,
structure notes, disclaimer blocks and educational calls to action.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class ContentType(Enum):
    EMAIL = "email"
    WEBPAGE = "webpage"
    LANDING_PAGE = "landing_page"
    BLOG = "blog"
    MARKET_UPDATE = "market_update"

    @classmethod
    def parse(cls, value: Optional[str], default: "ContentType" = None) -> "ContentType":
        """Lenient lookup; unknown values fall back to ``default`` (blog)."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return default or cls.BLOG


class LengthTarget(Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @classmethod
    def parse(cls, value: Optional[str]) -> "LengthTarget":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.MEDIUM


SEO_CONTENT_TYPES = frozenset({ContentType.WEBPAGE, ContentType.LANDING_PAGE, ContentType.BLOG})

CONTENT_STRUCTURES: Mapping[ContentType, str] = MappingProxyType({
    ContentType.EMAIL: "Inverted pyramid - critical information first",
    ContentType.WEBPAGE: "Thesis-antithesis-synthesis structure",
    ContentType.LANDING_PAGE: "Problem-solution with trust signals",
    ContentType.BLOG: "Narrative design with historical context",
    ContentType.MARKET_UPDATE: "Data-driven analysis with educational context",
})

TEMPLATES: Mapping[ContentType, str] = MappingProxyType({
    ContentType.BLOG: """# Understanding {topic}: A Guide for Informed Investors

The world of precious metals investing can seem complex, but understanding {topic} is essential for anyone considering portfolio diversification. Let's explore this topic through the lens of historical context and practical application.

## Historical Perspective

Throughout history, precious metals have served as a store of value during economic uncertainty.

## Current Market Analysis

Today's market conditions present unique considerations for investors evaluating {topic}.

## Educational Takeaways

For investors seeking to understand {topic}, several key factors deserve consideration:

- Historical performance data
- Market fundamentals
- Economic factors
- Portfolio allocation principles

## Next Steps

Understanding {topic} is just the beginning of your educational journey in precious metals investing.""",

    ContentType.EMAIL: """Subject: Understanding {topic} - Educational Insights for Investors

Dear Valued Investor,

As economic conditions continue to evolve, many investors are seeking to understand {topic} and its role in a diversified portfolio.

Today, I'd like to share some educational insights that can help you make more informed decisions.

Key considerations include:
- Historical context and performance
- Current market dynamics
- Portfolio allocation principles

If you'd like to learn more about {topic}, I invite you to download our free educational guide.

Best regards,
The {brand} Team""",

    ContentType.LANDING_PAGE: """# {topic}: Your Guide to Informed Precious Metals Investing

Are you seeking to understand {topic} and its potential role in your investment portfolio? You've come to the right place for unbiased, educational information.

## Why Understanding {topic} Matters

In today's economic climate, informed investors are exploring all options for portfolio diversification and wealth preservation.

## What You'll Learn

Our comprehensive educational approach covers:
- Historical analysis and precedent
- Current market considerations
- Portfolio integration strategies
- Risk assessment frameworks

## Get Your Free Educational Guide

Download our comprehensive guide to understanding {topic} and precious metals investing.""",

    ContentType.MARKET_UPDATE: """# Market Update: {topic} Analysis

## Current Market Conditions

Recent market data shows interesting developments regarding {topic}. Let's examine these trends through an educational lens.

## Key Data Points

- Current pricing trends
- Volume analysis
- Historical comparison
- Economic factors

## Educational Analysis

For investors seeking to understand these market movements, several factors warrant consideration.

## Takeaway for Investors

Understanding {topic} in the current market context requires careful analysis of multiple factors.""",

    ContentType.WEBPAGE: """# {topic}: Educational Resource for Precious Metals Investors

Welcome to our comprehensive educational resource on {topic}. Our mission is simple: provide you with the knowledge needed to make informed decisions about precious metals investing.

## Understanding the Fundamentals

{topic} represents an important concept in precious metals investing. To truly understand its implications, we need to examine both historical context and current market realities.

## Historical Analysis

Throughout economic history, precious metals have played a crucial role in wealth preservation.

## Current Market Perspective

Today's investment landscape presents unique considerations for those evaluating {topic}.

## Educational Resources

We believe in empowering investors through education. That's why we provide comprehensive resources to help you understand {topic} and its place in modern portfolio management.""",
})

INVESTMENT_DISCLAIMER = (
    "**Important Disclosure**: This information is for educational purposes only and is not "
    "intended as investment advice. Past performance does not guarantee future results. Please "
    "consult with a precious metals specialist to discuss your specific situation and investment "
    "objectives."
)

GENERAL_DISCLAIMER = (
    "**Educational Disclaimer**: The information provided is for educational purposes only. "
    "{brand} specializes in precious metals, not general financial advice. Please consult "
    "appropriate professionals for personalized guidance."
)

# Presence of any of these selects the investment disclaimer.
INVESTMENT_KEYWORDS = ("invest", "portfolio", "return")

RISK_STATEMENT = (
    "Please remember that all investments involve risk and past performance does not "
    "guarantee future results."
)

TRUST_STATEMENT = (
    "It's important to understand that all investments carry risk and require careful "
    "consideration."
)

EDUCATIONAL_PREFIX = "Understanding the fundamentals is crucial for informed decision-making."

EDUCATIONAL_CTAS = ("Get Your Free Guide", "Schedule A Consultation", "Learn More")


def get_template(content_type: Optional[str]) -> str:
    """Template for ``content_type``; unknown types use the blog template."""
    return TEMPLATES[ContentType.parse(content_type)]


def get_disclaimer(text: str, brand: str) -> str:
    """Pick the investment or the general disclaimer block for ``text``."""
    lowered = (text or "").lower()
    if any(k in lowered for k in INVESTMENT_KEYWORDS):
        return INVESTMENT_DISCLAIMER
    return GENERAL_DISCLAIMER.format(brand=brand)
