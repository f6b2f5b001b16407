"""
SEO metadata for generated and redesigned copy.

Title and h1 come from the first markdown heading, the meta description from
the first substantial sentence, and the keyword list from a fixed set of
category keywords plus words from the topic.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..config.lexicon import SEO_KEYWORDS
from ..config.settings import settings
from ..utils.helpers import dedupe_preserve_order

TITLE_MAX_CHARS = 60
DESCRIPTION_MAX_CHARS = 155
DESCRIPTION_MIN_SENTENCE_CHARS = 50
MAX_H2_SUGGESTIONS = 5
MAX_KEYWORDS = 10
ARTICLE_SECTION = "Precious Metals Education"


@dataclass
class SeoMetadata:
    title: str
    meta_description: str
    h1: str
    h2_suggestions: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    schema_markup: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "meta_description": self.meta_description,
            "h1": self.h1,
            "h2_suggestions": list(self.h2_suggestions),
            "keywords": list(self.keywords),
            "schema_markup": dict(self.schema_markup),
        }


def extract_heading(content: str) -> Optional[str]:
    for line in (content or "").split("\n"):
        if line.startswith("#"):
            heading = line.lstrip("#").strip()
            if heading:
                return heading
    return None


def extract_meta_description(content: str) -> str:
    body = "\n".join(line for line in (content or "").split("\n") if not line.startswith("#"))
    sentences = [s for s in body.split(".") if len(s) > DESCRIPTION_MIN_SENTENCE_CHARS]
    if not sentences:
        return ""
    description = " ".join(sentences[0].split())
    if len(description) > DESCRIPTION_MAX_CHARS:
        description = description[:DESCRIPTION_MAX_CHARS - 3] + "..."
    return description


def extract_h2_suggestions(content: str) -> List[str]:
    headings = [
        line[2:].lstrip("#").strip()
        for line in (content or "").split("\n")
        if line.startswith("##")
    ]
    return [h for h in headings if h][:MAX_H2_SUGGESTIONS]


def extract_keywords(topic: Optional[str] = None, primary_keyword: Optional[str] = None) -> List[str]:
    candidates = list(SEO_KEYWORDS)
    if primary_keyword:
        candidates.append(primary_keyword.strip().lower())
    if topic:
        candidates.extend(topic.lower().split())
    return dedupe_preserve_order(candidates)[:MAX_KEYWORDS]


def schema_markup(title: str, description: str, brand: str, published_at: Optional[datetime] = None) -> Dict[str, Any]:
    published_at = published_at or datetime.now(timezone.utc)
    return {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": title,
        "description": description,
        "author": {"@type": "Organization", "name": brand},
        "publisher": {"@type": "Organization", "name": brand},
        "datePublished": published_at.isoformat(),
        "articleSection": ARTICLE_SECTION,
    }


def build_seo_metadata(
    content: str,
    topic: Optional[str] = None,
    primary_keyword: Optional[str] = None,
    brand: Optional[str] = None,
    published_at: Optional[datetime] = None,
) -> SeoMetadata:
    """
    Build SEO metadata for ``content``.

    Args:
        content: Markdown-ish copy
        topic: Used for the fallback title and topic keywords
        primary_keyword: Added to keywords ahead of topic words
        brand: Organization name for the fallback title and schema markup
        published_at: Timestamp for ``datePublished`` (defaults to now, UTC)
    """
    brand = brand or settings.brand_name
    heading = extract_heading(content)
    h1 = heading or f"{topic or primary_keyword or 'Precious Metals'} - {brand} Educational Guide"
    description = extract_meta_description(content)
    return SeoMetadata(
        title=h1[:TITLE_MAX_CHARS],
        meta_description=description,
        h1=h1,
        h2_suggestions=extract_h2_suggestions(content),
        keywords=extract_keywords(topic, primary_keyword),
        schema_markup=schema_markup(h1, description, brand, published_at),
    )
