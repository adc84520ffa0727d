"""
Tests for IntentMatcher keyword matching.
"""

import pytest

from legalmind.conversation.intent import IntentMatcher
from legalmind.conversation.knowledge import KnowledgeBase


class TestIntentMatcher:
    """First-match keyword scan over the bundled corpus."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Tell me about GST", "taxation"),
            ("What are fundamental rights?", "constitution"),
            ("How does anticipatory bail work", "bail"),
            ("Explain the Companies Act", "corporate"),
            ("What changed with Article 370?", "article_370"),
            ("Is SECTION 377 still in force", "section_377"),
        ],
    )
    def test_matches_topic(self, matcher, text, expected):
        assert matcher.match(text) == expected

    def test_nonsense_returns_none(self, matcher):
        assert matcher.match("asdkjasdkj nonsense") is None

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_returns_none(self, matcher, text):
        assert matcher.match(text) is None

    def test_case_insensitive(self, matcher):
        assert matcher.match("gst") == matcher.match("GST") == "taxation"

    def test_earlier_topic_wins_overlap(self, matcher):
        """"civil law" triggers both civil and comparative; civil is declared first."""
        assert matcher.match("Explain civil law") == "civil"
        assert matcher.match_all("Explain civil law") == ["civil", "comparative"]

    def test_substring_matching_is_not_word_bounded(self, matcher):
        # "hi" occurs inside "this"
        assert matcher.match("this") == "greeting"

    def test_match_all_blank(self, matcher):
        assert matcher.match_all("") == []

    def test_custom_order_defines_priority(self):
        kb = KnowledgeBase(
            [("broad", ("law",), ("broad",)), ("narrow", ("tax law",), ("narrow",))],
            ["fallback"],
        )
        assert IntentMatcher(kb).match("tax law question") == "broad"

    def test_normalize_only_lowercases(self):
        assert IntentMatcher.normalize("  Tax LAW ") == "  tax law "
