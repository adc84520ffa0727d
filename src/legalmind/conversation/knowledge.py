"""
Knowledge base of chatbot topics.

A topic pairs a set of lowercase trigger keywords with an ordered list of
candidate responses. The knowledge base is validated once at construction
and is read-only afterwards, so a single instance can be shared by every
conversation session in the process.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

from legalmind.conversation.corpus import FALLBACK_RESPONSES, GREETING, LEGAL_TOPICS

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when the knowledge base violates its invariants."""


class TopicNotFound(KeyError):
    """Raised when a topic key is not present in the knowledge base."""


@dataclass(frozen=True)
class Topic:
    """A chatbot intent category."""

    key: str
    triggers: frozenset
    responses: Tuple[str, ...]

    def matches(self, normalized_text: str) -> bool:
        """True if any trigger is a substring of already-lowercased text."""
        return any(trigger in normalized_text for trigger in self.triggers)

    def __repr__(self) -> str:
        return f"Topic({self.key}, triggers={len(self.triggers)}, responses={len(self.responses)})"


class KnowledgeBase:
    """
    Immutable mapping from topic key to Topic, plus fallback responses.

    Topic declaration order is preserved and defines matching priority.

    Attributes:
        _topics: Ordered mapping of key -> Topic
        _fallback_responses: Generic replies used when nothing matches
        _greeting: Canonical greeting a fresh session starts with

    Example:
        >>> kb = KnowledgeBase.default()
        >>> kb.lookup("taxation").responses[0][:30]
        'Goods and Services Tax (GST) i'
    """

    def __init__(
        self,
        topics: Iterable[Tuple[str, Iterable[str], Sequence[str]]],
        fallback_responses: Sequence[str],
        greeting: str = GREETING,
    ):
        """
        Build and validate a knowledge base.

        Args:
            topics: (key, triggers, responses) triples in priority order
            fallback_responses: Non-empty list of generic replies
            greeting: Canonical greeting message

        Raises:
            ConfigurationError: If any invariant is violated
        """
        self._topics: Dict[str, Topic] = {}
        for key, triggers, responses in topics:
            topic = self._build_topic(key, triggers, responses)
            if topic.key in self._topics:
                raise ConfigurationError(f"Duplicate topic key: {topic.key!r}")
            self._topics[topic.key] = topic

        self._fallback_responses = self._validate_responses("fallback", fallback_responses)

        if not greeting or not greeting.strip():
            raise ConfigurationError("Greeting must be a non-empty string")
        self._greeting = greeting

        logger.debug(
            f"Knowledge base loaded: {len(self._topics)} topics, "
            f"{len(self._fallback_responses)} fallbacks"
        )

    @classmethod
    def default(cls) -> "KnowledgeBase":
        """Knowledge base built from the bundled legal corpus."""
        return cls(LEGAL_TOPICS, FALLBACK_RESPONSES, GREETING)

    @staticmethod
    def _build_topic(key: str, triggers: Iterable[str], responses: Sequence[str]) -> Topic:
        if not isinstance(key, str) or not key.strip():
            raise ConfigurationError("Topic key must be a non-empty string")

        trigger_set = frozenset(triggers)
        if not trigger_set:
            raise ConfigurationError(f"Topic {key!r} has no triggers")
        for trigger in trigger_set:
            if not isinstance(trigger, str) or not trigger.strip():
                raise ConfigurationError(f"Topic {key!r} has an empty trigger")
            if trigger != trigger.lower():
                raise ConfigurationError(f"Topic {key!r} trigger {trigger!r} is not lowercase")

        return Topic(
            key=key,
            triggers=trigger_set,
            responses=KnowledgeBase._validate_responses(key, responses),
        )

    @staticmethod
    def _validate_responses(owner: str, responses: Sequence[str]) -> Tuple[str, ...]:
        if isinstance(responses, str):
            raise ConfigurationError(f"{owner!r} responses must be a sequence, not a string")
        result = tuple(responses)
        if not result:
            raise ConfigurationError(f"{owner!r} has no responses")
        for response in result:
            if not isinstance(response, str) or not response.strip():
                raise ConfigurationError(f"{owner!r} has an empty response")
        return result

    def lookup(self, topic_key: str) -> Topic:
        """
        Get a topic by key.

        Raises:
            TopicNotFound: If the key is unknown
        """
        try:
            return self._topics[topic_key]
        except KeyError:
            raise TopicNotFound(topic_key) from None

    def get(self, topic_key: str) -> Optional[Topic]:
        """Get a topic by key, or None."""
        return self._topics.get(topic_key)

    def topics(self) -> Iterator[Topic]:
        """Iterate topics in priority (declaration) order."""
        return iter(self._topics.values())

    @property
    def fallback_responses(self) -> Tuple[str, ...]:
        return self._fallback_responses

    @property
    def greeting(self) -> str:
        return self._greeting

    def __contains__(self, topic_key: object) -> bool:
        return topic_key in self._topics

    def __len__(self) -> int:
        return len(self._topics)

    def __repr__(self) -> str:
        return f"KnowledgeBase(topics={len(self._topics)}, fallbacks={len(self._fallback_responses)})"
