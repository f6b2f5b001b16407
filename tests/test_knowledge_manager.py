"""
Tests for the JSON-backed knowledge base and page-text extraction.
"""

from __future__ import annotations

import json

import pytest
import requests

from liberty_content.config.initial_sources import INITIAL_APMEX_SOURCES
from liberty_content.services import web_extract
from liberty_content.services.knowledge_manager import (
    FETCH_ERROR_PREFIX,
    KnowledgeManager,
    KnowledgeSource,
    KnowledgeSourceExistsError,
    KnowledgeSourceNotFoundError,
    fuzzy_match,
    relevance,
)
from liberty_content.services.web_extract import extract_main_text, fetch_page_text

from conftest import FakeFetcher


# Loading and seeding
def test_missing_file_is_seeded_and_saved(knowledge, knowledge_path):
    assert len(knowledge.sources) == len(INITIAL_APMEX_SOURCES)
    assert knowledge.sources[0].id == "apmex_0"
    assert knowledge.sources[0].tags == ["gold_ira", "educational"]
    assert knowledge_path.exists()
    saved = json.loads(knowledge_path.read_text(encoding="utf-8"))
    assert len(saved) == len(INITIAL_APMEX_SOURCES)


def test_corrupt_file_is_reseeded(knowledge_path, fake_fetcher):
    knowledge_path.parent.mkdir(parents=True)
    knowledge_path.write_text("{not json", encoding="utf-8")
    manager = KnowledgeManager(path=str(knowledge_path), fetcher=fake_fetcher)
    assert len(manager.sources) == len(INITIAL_APMEX_SOURCES)


def test_existing_file_is_loaded(knowledge_path, fake_fetcher):
    knowledge_path.parent.mkdir(parents=True)
    knowledge_path.write_text(json.dumps([
        {"id": "x1", "url": "https://example.com/a", "source_type": "news", "tags": ["gold"]},
    ]), encoding="utf-8")
    manager = KnowledgeManager(path=str(knowledge_path), fetcher=fake_fetcher)
    assert [s.id for s in manager.sources] == ["x1"]
    assert manager.sources[0].description == ""
    assert manager.sources[0].content is None


# Adding and removing
def test_add_source_fetches_and_persists(knowledge, knowledge_path, fake_fetcher):
    source = knowledge.add_source("https://example.com/gold", "news", tags=["gold"])
    assert source.id.startswith("user_")
    assert source.description == "User-added news source"
    assert source.content == "Page text for https://example.com/gold about gold and silver history"
    assert fake_fetcher.calls == ["https://example.com/gold"]

    reloaded = KnowledgeManager(path=str(knowledge_path), fetcher=fake_fetcher)
    assert any(s.url == "https://example.com/gold" for s in reloaded.sources)


def test_duplicate_url_is_rejected(knowledge):
    url = INITIAL_APMEX_SOURCES[0][0]
    with pytest.raises(KnowledgeSourceExistsError):
        knowledge.add_source(url, "educational")


def test_failed_fetch_stores_error_text(knowledge_path):
    manager = KnowledgeManager(path=str(knowledge_path), fetcher=FakeFetcher(fail=True))
    source = manager.add_source("https://example.com/down", "market_data")
    assert source.content.startswith(FETCH_ERROR_PREFIX)
    assert "connection refused" in source.content


def test_remove_source(knowledge):
    assert knowledge.remove_source("apmex_0") is True
    assert all(s.id != "apmex_0" for s in knowledge.sources)
    with pytest.raises(KnowledgeSourceNotFoundError):
        knowledge.remove_source("apmex_0")


# Searching
def test_search_matches_and_fetches_lazily(knowledge, knowledge_path, fake_fetcher):
    results = knowledge.search("palladium")
    assert len(results) == 2
    assert all("palladium" in s.tags for s in results)
    assert len(fake_fetcher.calls) == 2
    assert all(s.content for s in results)

    saved = json.loads(knowledge_path.read_text(encoding="utf-8"))
    assert sum(1 for item in saved if item["content"]) == 2


def test_search_does_not_refetch(knowledge, fake_fetcher):
    knowledge.search("palladium")
    knowledge.search("palladium")
    assert len(fake_fetcher.calls) == 2


def test_search_respects_type_filter_and_limit(knowledge):
    assert knowledge.search("history", ["news"]) == []
    assert len(knowledge.search("history", ["all"], max_results=3)) == 3
    assert knowledge.search("history", max_results=0) == []


def test_search_orders_by_relevance(knowledge):
    knowledge.add_source("https://example.com/misc", "news", description="Storage notes")
    results = knowledge.search("storage")
    # description + tag + url beats description only
    assert results[0].url == "https://www.apmex.com/storage/gold-and-silver-storage"


def test_fuzzy_match_ignores_short_words():
    assert fuzzy_match("gold price", "history of gold")
    assert not fuzzy_match("of an", "history of an era")


def test_relevance_weights():
    source = KnowledgeSource(
        id="s", url="https://x.com/silver", source_type="news",
        description="silver guide", tags=["silver"], content="silver",
    )
    assert relevance(source, "silver") == 10 + 8 + 5 + 3
    assert relevance(source, "platinum") == 0


# Listing and stats
def test_list_sources_filters(knowledge):
    assert knowledge.list_sources(filter_by_type="news") == []
    storage = knowledge.list_sources(search_term="STORAGE")
    assert [s["url"] for s in storage] == ["https://www.apmex.com/storage/gold-and-silver-storage"]
    assert storage[0]["has_content"] is False
    assert "content" not in storage[0]


def test_stats(knowledge):
    knowledge.add_source("https://example.com/n", "news")
    stats = knowledge.stats()
    assert stats["total_sources"] == len(INITIAL_APMEX_SOURCES) + 1
    assert stats["by_type"] == {"educational": len(INITIAL_APMEX_SOURCES), "news": 1}
    assert stats["with_content"] == 1
    assert stats["last_updated"]


# Page text extraction
PAGE = """
<html><head><style>.x{}</style><script>var a = 1;</script></head>
<body>
  <nav>Menu Home Shop</nav>
  <div class="ad">Buy now</div>
  <article>
    <h1>Gold   History</h1>
    <p>Gold has been money for
       thousands of years.</p>
  </article>
  <footer>Copyright</footer>
</body></html>
"""


def test_extract_main_text_prefers_content_container():
    text = extract_main_text(PAGE)
    assert text == "Gold History Gold has been money for thousands of years."


def test_extract_main_text_falls_back_to_body():
    text = extract_main_text("<html><body><nav>Menu</nav><p>Plain page</p></body></html>")
    assert text == "Plain page"


def test_extract_main_text_truncates():
    assert extract_main_text("<main>" + "a" * 50 + "</main>", max_chars=10) == "a" * 10


class _Response:
    def __init__(self, text: str, status: int = 200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_page_text_sends_user_agent(monkeypatch):
    seen = {}

    def fake_get(url, headers=None, timeout=None, allow_redirects=True):
        seen.update(url=url, headers=headers, timeout=timeout)
        return _Response("<main>Silver facts</main>")

    monkeypatch.setattr(web_extract.requests, "get", fake_get)
    assert fetch_page_text("https://example.com", timeout=3) == "Silver facts"
    assert seen["timeout"] == 3
    assert "User-Agent" in seen["headers"]


def test_fetch_page_text_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(web_extract.requests, "get", lambda *a, **kw: _Response("", 500))
    with pytest.raises(requests.HTTPError):
        fetch_page_text("https://example.com")
