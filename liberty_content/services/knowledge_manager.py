"""
Knowledge base of reference web pages.

Sources live in a flat JSON file. A missing file is seeded with the APMEX
educational pages. Page text is fetched when a source is added, or lazily the
first time a search returns it. A failed fetch stores the error message in
place of the content instead of failing the call.
"""
from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

import requests

from ..config.initial_sources import INITIAL_APMEX_SOURCES
from ..config.settings import settings
from .web_extract import fetch_page_text

logger = logging.getLogger(__name__)

SOURCE_TYPES = ("educational", "market_data", "competitor", "news")
ALL_TYPES = "all"

RELEVANCE_DESCRIPTION = 10
RELEVANCE_TAG = 8
RELEVANCE_URL = 5
RELEVANCE_CONTENT = 3
FUZZY_MIN_WORD_LEN = 4

FETCH_ERROR_PREFIX = "Error fetching content: "

Fetcher = Callable[[str], str]


class KnowledgeBaseError(RuntimeError):
    """Base class for knowledge base failures."""


class KnowledgeSourceExistsError(KnowledgeBaseError):
    def __init__(self, url: str):
        super().__init__(f"Knowledge source already exists: {url}")
        self.url = url


class KnowledgeSourceNotFoundError(KnowledgeBaseError):
    def __init__(self, source_id: str):
        super().__init__(f"Knowledge source not found: {source_id}")
        self.source_id = source_id


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class KnowledgeSource:
    id: str
    url: str
    source_type: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    last_updated: str = field(default_factory=_now)
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnowledgeSource":
        return cls(
            id=str(data.get("id", "")),
            url=str(data.get("url", "")),
            source_type=str(data.get("source_type", "educational")),
            description=data.get("description") or "",
            tags=list(data.get("tags") or []),
            last_updated=data.get("last_updated") or _now(),
            content=data.get("content"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> Dict[str, Any]:
        """Listing view: everything except the page text."""
        return {
            "id": self.id,
            "url": self.url,
            "source_type": self.source_type,
            "description": self.description,
            "tags": list(self.tags),
            "last_updated": self.last_updated,
            "has_content": bool(self.content),
        }


def fuzzy_match(query: str, text: str) -> bool:
    return any(len(word) >= FUZZY_MIN_WORD_LEN and word in text for word in query.split(" "))


def relevance(source: KnowledgeSource, query: str) -> int:
    score = 0
    if query in source.description.lower():
        score += RELEVANCE_DESCRIPTION
    if any(query in tag.lower() for tag in source.tags):
        score += RELEVANCE_TAG
    if query in (source.content or "").lower():
        score += RELEVANCE_CONTENT
    if query in source.url.lower():
        score += RELEVANCE_URL
    return score


class KnowledgeManager:
    """
    JSON-file backed list of knowledge sources.

    Args:
        path: JSON file location (defaults to KNOWLEDGE_BASE_PATH)
        fetcher: url -> page text; defaults to an HTTP fetch
    """

    def __init__(self, path: Optional[str] = None, fetcher: Optional[Fetcher] = None):
        self.path = Path(path or settings.knowledge_base_path)
        self.fetcher: Fetcher = fetcher or fetch_page_text
        self.sources: List[KnowledgeSource] = []
        self._load()

    # Persistence
    def _load(self) -> None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            self.sources = [KnowledgeSource.from_dict(item) for item in data]
            logger.info("Loaded %d knowledge sources from %s", len(self.sources), self.path)
        except (OSError, ValueError) as e:
            logger.info("Initializing knowledge base with APMEX sources (%s)", e)
            self.sources = self._seed_sources()
            self.save()

    @staticmethod
    def _seed_sources() -> List[KnowledgeSource]:
        return [
            KnowledgeSource(
                id=f"apmex_{i}",
                url=url,
                source_type="educational",
                description=f"APMEX educational content: {category}",
                tags=[category, "educational"],
            )
            for i, (url, category) in enumerate(INITIAL_APMEX_SOURCES)
        ]

    def save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps([s.to_dict() for s in self.sources], indent=2)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save knowledge base to %s: %s", self.path, e)

    # Fetching
    def _fetch(self, source: KnowledgeSource) -> None:
        try:
            source.content = self.fetcher(source.url)
        except requests.RequestException as e:
            logger.warning("Failed to fetch content for %s: %s", source.url, e)
            source.content = f"{FETCH_ERROR_PREFIX}{e}"
        source.last_updated = _now()

    # Operations
    def add_source(
        self,
        url: str,
        source_type: str,
        description: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
    ) -> KnowledgeSource:
        if any(s.url == url for s in self.sources):
            raise KnowledgeSourceExistsError(url)

        source = KnowledgeSource(
            id=f"user_{int(time.time() * 1000)}",
            url=url,
            source_type=source_type,
            description=description or f"User-added {source_type} source",
            tags=list(tags or []),
        )
        self._fetch(source)
        self.sources.append(source)
        self.save()
        logger.info("Added knowledge source %s (%s)", source.id, url)
        return source

    def list_sources(self, filter_by_type: Optional[str] = None, search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        sources = self.sources
        if filter_by_type:
            sources = [s for s in sources if s.source_type == filter_by_type]
        if search_term:
            term = search_term.lower()
            sources = [
                s for s in sources
                if term in s.description.lower()
                or term in s.url.lower()
                or any(term in tag.lower() for tag in s.tags)
            ]
        return [s.summary() for s in sources]

    def search(self, query: str, source_types: Optional[List[str]] = None, max_results: int = 10) -> List[KnowledgeSource]:
        sources = self.sources
        if source_types and ALL_TYPES not in source_types:
            sources = [s for s in sources if s.source_type in source_types]

        q = (query or "").lower()

        def matches(source: KnowledgeSource) -> bool:
            text = " ".join([source.description, *source.tags, source.url, source.content or ""]).lower()
            return q in text or any(q in tag for tag in source.tags) or fuzzy_match(q, text)

        matched = sorted((s for s in sources if matches(s)), key=lambda s: relevance(s, q), reverse=True)
        results = matched[:max(0, max_results)]

        fetched = False
        for source in results:
            if not source.content:
                self._fetch(source)
                fetched = True
        if fetched:
            self.save()

        logger.debug("Knowledge search %r: %d matched, %d returned", query, len(matched), len(results))
        return results

    def remove_source(self, source_id: str) -> bool:
        for i, source in enumerate(self.sources):
            if source.id == source_id:
                del self.sources[i]
                self.save()
                return True
        raise KnowledgeSourceNotFoundError(source_id)

    def stats(self) -> Dict[str, Any]:
        by_type: Dict[str, int] = {}
        for s in self.sources:
            by_type[s.source_type] = by_type.get(s.source_type, 0) + 1
        return {
            "total_sources": len(self.sources),
            "by_type": by_type,
            "with_content": sum(1 for s in self.sources if s.content),
            "last_updated": max((s.last_updated for s in self.sources), default=None),
        }
