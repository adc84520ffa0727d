"""
Response selection.

Picks a canned reply for a matched topic, or a generic fallback when no
topic matched. The choice is uniformly random; the same input is not
guaranteed to produce the same reply.
"""

import random
from typing import Optional

from legalmind.conversation.knowledge import KnowledgeBase


class ResponseSelector:
    """
    Uniform random choice among a topic's candidate responses.

    The random source is injectable so tests can seed it. Production code
    passes nothing and gets an unseeded ``random.Random``.

    Attributes:
        _knowledge_base: Shared read-only KnowledgeBase
        _rng: Random source used for every choice

    Example:
        >>> selector = ResponseSelector(kb, rng=random.Random(7))
        >>> selector.select("taxation") in kb.lookup("taxation").responses
        True
    """

    def __init__(self, knowledge_base: KnowledgeBase, rng: Optional[random.Random] = None):
        self._knowledge_base = knowledge_base
        self._rng = rng if rng is not None else random.Random()

    def select(self, topic_key: Optional[str]) -> str:
        """
        Choose a response.

        Args:
            topic_key: Matched topic key, or None for a fallback reply

        Returns:
            A non-empty response string

        Raises:
            TopicNotFound: If topic_key is not in the knowledge base
        """
        if topic_key is None:
            candidates = self._knowledge_base.fallback_responses
        else:
            candidates = self._knowledge_base.lookup(topic_key).responses
        return self._rng.choice(candidates)

    def __repr__(self) -> str:
        return f"ResponseSelector({self._knowledge_base!r})"
