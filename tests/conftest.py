"""
Pytest fixtures for the content server tests. The knowledge base uses a
temporary JSON file and a fake fetcher, so nothing touches the network.
"""

from __future__ import annotations

import pytest
import requests

from liberty_content.services.knowledge_manager import KnowledgeManager
from liberty_content.tools import ToolRouter

AGGRESSIVE_COPY = "Guaranteed returns! Act now, don't miss out, buy now!"

EDUCATIONAL_COPY = (
    "Understanding precious metals starts with historical context. "
    "According to Federal Reserve data, gold has been used as a store of value for decades. "
    "Research indicates that a measured approach and careful consideration matter for retirement savers. "
    "Please consider your situation and consult a specialist.\n\n"
    "Remember that past performance does not guarantee future results and all investments carry risk. "
    "This is not investment advice; it is provided for educational purposes."
)


class FakeFetcher:
    """Records fetched URLs and returns canned page text."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def __call__(self, url: str) -> str:
        self.calls.append(url)
        if self.fail:
            raise requests.ConnectionError("connection refused")
        return f"Page text for {url} about gold and silver history"


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def knowledge_path(tmp_path):
    return tmp_path / "data" / "knowledge-base.json"


@pytest.fixture
def knowledge(knowledge_path, fake_fetcher):
    """Fresh knowledge base seeded with the APMEX sources."""
    return KnowledgeManager(path=str(knowledge_path), fetcher=fake_fetcher)


@pytest.fixture
def router(knowledge):
    return ToolRouter(knowledge=knowledge)
