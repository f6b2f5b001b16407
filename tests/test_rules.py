"""
Tests for the rewrite-rule engine and the brand-voice rule tables.
"""

from __future__ import annotations

import pytest

from liberty_content.services.brand_voice import (
    AUTHORITATIVE_RULES,
    BRAND_VOICE_RULES,
    ENGAGEMENT_RULES,
    PLAIN_LANGUAGE_RULES,
    PROTECTIVE_RULES,
    SLANG_RULES,
    aggressive_term_replacement,
    apply_brand_voice_rules,
    apply_brand_voice_transformation,
)
from liberty_content.utils.rules import RewriteRule, apply_rules, literal_rule, match_case


@pytest.mark.parametrize(
    "matched, replacement, expected",
    [
        ("Utilize", "use", "Use"),
        ("utilize", "use", "use"),
        ("UTILIZE", "use", "Use"),
        ("x", "", ""),
    ],
)
def test_match_case(matched, replacement, expected):
    assert match_case(matched, replacement) == expected


def test_rules_apply_in_order():
    """Each rule sees the previous rule's output."""
    rules = [RewriteRule("alpha", "beta"), RewriteRule("beta", "gamma")]
    assert apply_rules("alpha", rules) == "gamma"


def test_replacement_is_literal():
    """Backslashes in a replacement are not treated as group references."""
    rule = RewriteRule("x", r"\1")
    assert rule.apply("axb") == r"a\1b"


def test_literal_rule_escapes_and_respects_word_boundaries():
    rule = literal_rule("yo", "", whole_word=True)
    assert rule.apply("yo, your call") == ", your call"
    assert literal_rule("risk-free", "stable").apply("A Risk-Free plan") == "A stable plan"


def test_empty_text_is_safe():
    assert apply_rules("", BRAND_VOICE_RULES) == ""
    assert apply_rules(None, BRAND_VOICE_RULES) == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hurry, this is urgent", "consider the importance of, this is consider the importance of"),
        ("Buy now while you can", "explore the benefits of while you can"),
        ("guaranteed returns every year", "historically demonstrated potential for every year"),
        ("Get rich with silver", "wealth preservation and potential appreciation with silver"),
        ("Last chance to act", "understanding the opportunity of to act"),
        ("Calm, factual copy.", "Calm, factual copy."),
    ],
)
def test_brand_voice_rules(text, expected):
    assert apply_brand_voice_rules(text) == expected


@pytest.mark.parametrize(
    "rules, text, expected",
    [
        (AUTHORITATIVE_RULES, "I think gold is steady", "Research indicates gold is steady"),
        (AUTHORITATIVE_RULES, "It seems prices rose", "Analysis shows prices rose"),
        (PROTECTIVE_RULES, "Purchase coins or get yours today", "explore coins or understand the value of today"),
        (PLAIN_LANGUAGE_RULES, "Utilize bullion to facilitate planning", "Use bullion to help planning"),
        (PLAIN_LANGUAGE_RULES, "Subsequently we review", "Then we review"),
        (ENGAGEMENT_RULES, "Throughout history, gold mattered.",
         "Think of it this way: throughout history, gold mattered."),
        (ENGAGEMENT_RULES, "Consider this: silver is volatile.",
         "Here's something worth considering: silver is volatile."),
    ],
)
def test_rule_tables(rules, text, expected):
    assert apply_rules(text, rules) == expected


def test_slang_rules_strip_whole_words_only():
    cleaned = apply_rules("yo bro, your sickle is lit", SLANG_RULES)
    assert "your" in cleaned
    assert "sickle" in cleaned
    assert "bro" not in cleaned
    assert "lit" not in cleaned.split()


@pytest.mark.parametrize(
    "term, expected",
    [
        ("guaranteed returns", "potential for appreciation"),
        ("Risk-Free", "traditionally stable"),
        ("fortune", "financial security"),
        ("sure thing", "potential benefits"),
        ("", "potential benefits"),
    ],
)
def test_aggressive_term_replacement(term, expected):
    assert aggressive_term_replacement(term) == expected


def test_transformation_reframes_sales_requests():
    out = apply_brand_voice_transformation("Convince readers to buy gold")
    assert out.startswith("Create educational content about precious metals that helps readers understand ")
    assert "the benefits of readers to buy gold" in out


def test_transformation_leaves_neutral_topics_alone():
    assert apply_brand_voice_transformation("Gold IRA basics") == "Gold IRA basics"
