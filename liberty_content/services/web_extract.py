"""
Fetch a web page and reduce it to its main readable text.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

import requests
from bs4 import BeautifulSoup

from ..config.settings import settings

logger = logging.getLogger(__name__)

STRIP_SELECTORS = "script, style, nav, footer, .advertisement, .ad"
CONTENT_SELECTORS = (
    "main",
    ".content",
    ".post-content",
    ".article-content",
    ".entry-content",
    "article",
    ".main-content",
)


def extract_main_text(html: str, max_chars: Optional[int] = None) -> str:
    """Visible text of the first main-content container (falls back to <body>)."""
    max_chars = max_chars or settings.fetch_max_chars
    soup = BeautifulSoup(html or "", "html.parser")
    for tag in soup.select(STRIP_SELECTORS):
        tag.decompose()

    text = ""
    for selector in CONTENT_SELECTORS:
        element = soup.select_one(selector)
        if element is not None:
            text = element.get_text(separator=" ", strip=True)
            break

    if not text:
        body = soup.body or soup
        text = body.get_text(separator=" ", strip=True)

    text = re.sub(r"\s+", " ", text).strip()
    return text[:max_chars]


def fetch_page_text(url: str, timeout: Optional[int] = None, max_chars: Optional[int] = None) -> str:
    """
    Download ``url`` and return its main text.

    Raises:
        requests.RequestException: on connection errors, timeouts and HTTP errors
    """
    headers = {"User-Agent": settings.fetch_user_agent}
    resp = requests.get(url, headers=headers, timeout=timeout or settings.fetch_timeout_secs, allow_redirects=True)
    resp.raise_for_status()
    text = extract_main_text(resp.text, max_chars)
    logger.debug("Fetched %s (%d chars of text)", url, len(text))
    return text
