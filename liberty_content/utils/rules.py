"""
Ordered, data-driven text rewrite rules.

A rule is a (pattern, replacement) pair; a rule list is applied top to bottom,
each rule seeing the output of the previous one. Replacements are literal text
(no backreferences).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Pattern


@lru_cache(maxsize=512)
def _compile(pattern: str, flags: int) -> Pattern[str]:
    return re.compile(pattern, flags)


def match_case(matched: str, replacement: str) -> str:
    """Capitalise the replacement when the matched text starts upper-case."""
    if replacement and matched[:1].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


@dataclass(frozen=True)
class RewriteRule:
    pattern: str
    replacement: str
    flags: int = re.IGNORECASE
    preserve_case: bool = False

    @property
    def regex(self) -> Pattern[str]:
        return _compile(self.pattern, self.flags)

    def apply(self, text: str) -> str:
        if not text:
            return text or ""
        if self.preserve_case:
            return self.regex.sub(lambda m: match_case(m.group(0), self.replacement), text)
        return self.regex.sub(lambda m: self.replacement, text)


def literal_rule(phrase: str, replacement: str, *, whole_word: bool = False,
                 preserve_case: bool = False) -> RewriteRule:
    """Build a case-insensitive rule for a plain phrase."""
    pattern = re.escape(phrase)
    if whole_word:
        pattern = rf"\b{pattern}\b"
    return RewriteRule(pattern, replacement, preserve_case=preserve_case)


def apply_rules(text: str, rules: Iterable[RewriteRule]) -> str:
    result = text or ""
    for rule in rules:
        result = rule.apply(result)
    return result
