"""
Tests for KnowledgeBase construction and lookup.
"""

import pytest

from legalmind.conversation.corpus import FALLBACK_RESPONSES, LEGAL_TOPICS
from legalmind.conversation.knowledge import (
    ConfigurationError,
    KnowledgeBase,
    TopicNotFound,
)


class TestDefaultKnowledgeBase:
    """The bundled corpus must satisfy every invariant."""

    def test_loads_all_topics(self, knowledge_base):
        assert len(knowledge_base) == len(LEGAL_TOPICS)
        assert knowledge_base.fallback_responses == tuple(FALLBACK_RESPONSES)

    def test_topic_order_is_declaration_order(self, knowledge_base):
        keys = [t.key for t in knowledge_base.topics()]
        assert keys == [key for key, _, _ in LEGAL_TOPICS]
        assert keys[0] == "constitution"
        assert keys[-1] == "thanks"

    def test_every_topic_has_lowercase_triggers_and_responses(self, knowledge_base):
        for topic in knowledge_base.topics():
            assert topic.triggers
            assert all(t == t.lower() for t in topic.triggers)
            assert topic.responses
            assert all(r.strip() for r in topic.responses)

    def test_lookup(self, knowledge_base):
        topic = knowledge_base.lookup("taxation")
        assert "gst" in topic.triggers
        assert topic.responses[0].startswith("Goods and Services Tax (GST)")

    def test_lookup_unknown_raises(self, knowledge_base):
        with pytest.raises(TopicNotFound):
            knowledge_base.lookup("astrology")

    def test_get_and_contains(self, knowledge_base):
        assert "bail" in knowledge_base
        assert "astrology" not in knowledge_base
        assert knowledge_base.get("astrology") is None

    def test_greeting(self, knowledge_base):
        assert knowledge_base.greeting.startswith("Hello! I'm LegalMind AI")


class TestKnowledgeBaseValidation:
    """Construction rejects malformed topic tables."""

    def test_duplicate_key(self):
        topics = [("tax", ("gst",), ("a",)), ("tax", ("vat",), ("b",))]
        with pytest.raises(ConfigurationError, match="Duplicate"):
            KnowledgeBase(topics, ["fallback"])

    def test_empty_triggers(self):
        with pytest.raises(ConfigurationError, match="no triggers"):
            KnowledgeBase([("tax", (), ("a",))], ["fallback"])

    def test_uppercase_trigger(self):
        with pytest.raises(ConfigurationError, match="lowercase"):
            KnowledgeBase([("tax", ("GST",), ("a",))], ["fallback"])

    def test_empty_responses(self):
        with pytest.raises(ConfigurationError, match="no responses"):
            KnowledgeBase([("tax", ("gst",), ())], ["fallback"])

    def test_blank_response(self):
        with pytest.raises(ConfigurationError, match="empty response"):
            KnowledgeBase([("tax", ("gst",), ("  ",))], ["fallback"])

    def test_empty_fallbacks(self):
        with pytest.raises(ConfigurationError):
            KnowledgeBase([("tax", ("gst",), ("a",))], [])

    def test_empty_key(self):
        with pytest.raises(ConfigurationError):
            KnowledgeBase([("", ("gst",), ("a",))], ["fallback"])

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            KnowledgeBase([], [], greeting="")
