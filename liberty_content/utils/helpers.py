# liberty_content/utils/helpers.py
from __future__ import annotations
import math
import re
import logging
from typing import Iterable, List, Optional, Sequence, Set

logger = logging.getLogger(__name__)


# Generic text helpers
def normalize_whitespace(s: str) -> str:
    """Collapse consecutive whitespace and strip ends."""
    return re.sub(r"\s+", " ", s or "").strip()


def dedupe_preserve_order(items: Iterable[str]) -> List[str]:
    """De-duplicate strings case-insensitively while preserving order."""
    seen: Set[str] = set()
    out: List[str] = []
    for x in items:
        k = normalize_whitespace(x).lower()
        if k and k not in seen:
            seen.add(k)
            out.append(normalize_whitespace(x))
    return out


def split_sentences(text: str) -> List[str]:
    """Split on periods and drop blank fragments (fragments keep their spacing)."""
    return [s for s in (text or "").split(".") if s.strip()]


def split_paragraphs(text: str) -> List[str]:
    """Paragraphs are separated by a blank line."""
    return [p for p in (text or "").split("\n\n") if p.strip()]


def split_words(text: str) -> List[str]:
    return [w for w in re.split(r"\s+", text or "") if w]


def mean(values: Sequence[float]) -> Optional[float]:
    """Arithmetic mean, or None for an empty sequence."""
    if not values:
        return None
    return sum(values) / len(values)


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    return int(min(high, max(low, value)))


# Marker matching
def find_markers(text: str, markers: Iterable[str]) -> List[str]:
    """Markers contained in ``text`` (case-insensitive substring), in marker order."""
    lowered = (text or "").lower()
    return [m for m in markers if m in lowered]


def count_markers(text: str, markers: Iterable[str]) -> int:
    return len(find_markers(text, markers))


def find_whole_words(text: str, markers: Iterable[str]) -> List[str]:
    """Markers present as whole words/phrases (case-insensitive), in marker order."""
    lowered = (text or "").lower()
    return [m for m in markers if re.search(rf"\b{re.escape(m)}\b", lowered)]


def contains_any(text: str, markers: Iterable[str]) -> bool:
    lowered = (text or "").lower()
    return any(m in lowered for m in markers)


def round_half_up(value: float) -> int:
    """Nearest integer with .5 rounded up (``round`` would round to even)."""
    return int(math.floor(value + 0.5))
