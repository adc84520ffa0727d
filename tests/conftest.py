"""
Shared fixtures for LegalMind tests.

Sessions are built with a zero thinking delay and seeded random sources
so every test is fast and deterministic.
"""

import random

import pytest

from legalmind.analysis.document import DocumentAnalyzer
from legalmind.analysis.extractor import PatternExtractor
from legalmind.config.settings import Settings
from legalmind.container import LegalMindContainer
from legalmind.conversation.chatbot import ConversationSession
from legalmind.conversation.intent import IntentMatcher
from legalmind.conversation.knowledge import KnowledgeBase
from legalmind.conversation.selector import ResponseSelector


# =============================================================================
# Conversation Fixtures
# =============================================================================

@pytest.fixture
def knowledge_base():
    """Bundled legal knowledge base."""
    return KnowledgeBase.default()


@pytest.fixture
def matcher(knowledge_base):
    return IntentMatcher(knowledge_base)


@pytest.fixture
def selector(knowledge_base):
    return ResponseSelector(knowledge_base, rng=random.Random(42))


@pytest.fixture
def make_session(matcher, knowledge_base):
    """Factory for sessions; zero delay unless a window is given."""

    def _make(thinking_delay=(0.0, 0.0), event_sink=None, seed=42):
        return ConversationSession(
            matcher=matcher,
            selector=ResponseSelector(knowledge_base, rng=random.Random(seed)),
            greeting=knowledge_base.greeting,
            thinking_delay=thinking_delay,
            rng=random.Random(seed),
            event_sink=event_sink,
        )

    return _make


@pytest.fixture
def session(make_session):
    return make_session()


# =============================================================================
# Analysis Fixtures
# =============================================================================

@pytest.fixture
def extractor():
    return PatternExtractor()


@pytest.fixture
def analyzer(extractor):
    return DocumentAnalyzer(extractor, rng=random.Random(0))


# =============================================================================
# Container Fixtures
# =============================================================================

@pytest.fixture
def fast_settings():
    """Settings with no thinking delay and a small rate limit."""
    return Settings(
        thinking_delay_min=0.0,
        thinking_delay_max=0.0,
        rate_limit_max_requests=5,
        rate_limit_window_seconds=60.0,
    )


@pytest.fixture
def container(fast_settings):
    return LegalMindContainer(settings=fast_settings, seed=7)
