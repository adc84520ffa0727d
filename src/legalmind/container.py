"""
Dependency Injection Container for LegalMind.

Manages the shared, read-only components (knowledge base, intent matcher,
pattern extractor) and provides factories for the per-session and
per-host components that depend on them.
"""

import random
from typing import Optional

from legalmind.analysis.document import DocumentAnalyzer
from legalmind.analysis.extractor import PatternExtractor
from legalmind.config.settings import Settings, settings as default_settings
from legalmind.conversation.chatbot import ConversationSession
from legalmind.conversation.intent import IntentMatcher
from legalmind.conversation.knowledge import KnowledgeBase
from legalmind.conversation.selector import ResponseSelector
from legalmind.protocols.collaborators import EventSink
from legalmind.safety.rate_limit import RateLimiter


class LegalMindContainer:
    """
    Dependency injection container for LegalMind.

    One KnowledgeBase, IntentMatcher and PatternExtractor are built per
    container and shared by every session it creates. Sessions share no
    mutable state with each other.

    Attributes:
        _settings: Runtime Settings
        _knowledge_base: Shared KnowledgeBase
        _matcher: Shared IntentMatcher
        _extractor: Shared PatternExtractor
        _event_sink: Optional collaborator passed to sessions and analyzers
        _seed: Optional seed making every created component deterministic

    Example:
        >>> container = LegalMindContainer(seed=42)
        >>> session = container.create_session()
        >>> analyzer = container.create_document_analyzer()
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        knowledge_base: Optional[KnowledgeBase] = None,
        event_sink: Optional[EventSink] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize container with shared dependencies.

        Args:
            settings: Settings instance (default: module-level settings)
            knowledge_base: Knowledge base (default: bundled legal corpus)
            event_sink: Optional persistence/analytics collaborator
            seed: Seed for random sources (None = nondeterministic)

        Raises:
            ConfigurationError: If the default knowledge base is invalid
        """
        self._settings = settings if settings is not None else default_settings
        self._knowledge_base = knowledge_base if knowledge_base is not None else KnowledgeBase.default()
        self._matcher = IntentMatcher(self._knowledge_base)
        self._extractor = PatternExtractor()
        self._event_sink = event_sink
        self._seed = seed
        self._created = 0

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def knowledge_base(self) -> KnowledgeBase:
        return self._knowledge_base

    @property
    def intent_matcher(self) -> IntentMatcher:
        return self._matcher

    @property
    def extractor(self) -> PatternExtractor:
        return self._extractor

    def _rng(self) -> random.Random:
        """Fresh random source; seeded per component when a seed was given."""
        self._created += 1
        if self._seed is None:
            return random.Random()
        return random.Random(self._seed + self._created)

    def create_response_selector(self) -> ResponseSelector:
        return ResponseSelector(self._knowledge_base, rng=self._rng())

    def create_session(self, thinking_delay: Optional[tuple] = None) -> ConversationSession:
        """
        Create a new conversation session.

        Args:
            thinking_delay: Optional (min, max) override of the settings window

        Returns:
            ConversationSession holding only the greeting
        """
        if thinking_delay is None:
            thinking_delay = (
                self._settings.thinking_delay_min,
                self._settings.thinking_delay_max,
            )
        return ConversationSession(
            matcher=self._matcher,
            selector=self.create_response_selector(),
            greeting=self._knowledge_base.greeting,
            thinking_delay=thinking_delay,
            rng=self._rng(),
            event_sink=self._event_sink,
        )

    def create_document_analyzer(self) -> DocumentAnalyzer:
        return DocumentAnalyzer(self._extractor, rng=self._rng(), event_sink=self._event_sink)

    def create_rate_limiter(self) -> RateLimiter:
        return RateLimiter(
            max_requests=self._settings.rate_limit_max_requests,
            window_seconds=self._settings.rate_limit_window_seconds,
            max_keys=self._settings.rate_limit_max_keys,
        )

    def __repr__(self) -> str:
        return f"LegalMindContainer({self._knowledge_base!r})"
