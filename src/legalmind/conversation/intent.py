"""
Intent matching by keyword scan.

Classifies user input into a knowledge-base topic by checking whether any
of the topic's trigger keywords occurs in the lowercased text. Topics are
checked in declaration order and the first hit wins.
"""

import logging
from typing import List, Optional

from legalmind.conversation.knowledge import KnowledgeBase

logger = logging.getLogger(__name__)


class IntentMatcher:
    """
    First-match keyword intent matcher.

    Cost is O(topics x triggers) substring checks per call. Overlapping
    triggers across topics resolve purely by declaration order; there is
    no ranking by number of hits or keyword length.

    Attributes:
        _knowledge_base: Shared read-only KnowledgeBase

    Example:
        >>> matcher = IntentMatcher(KnowledgeBase.default())
        >>> matcher.match("Tell me about GST")
        'taxation'
        >>> matcher.match("asdkjasdkj nonsense") is None
        True
    """

    def __init__(self, knowledge_base: KnowledgeBase):
        self._knowledge_base = knowledge_base

    @staticmethod
    def normalize(text: str) -> str:
        """Lowercase only. No stemming or tokenization."""
        return text.lower()

    def match(self, input_text: str) -> Optional[str]:
        """
        Find the topic for user input.

        Args:
            input_text: Raw user text

        Returns:
            Key of the first matching topic, or None
        """
        if not input_text or not input_text.strip():
            return None

        normalized = self.normalize(input_text)
        for topic in self._knowledge_base.topics():
            if topic.matches(normalized):
                logger.debug(f"Matched topic {topic.key!r}")
                return topic.key

        logger.debug("No topic matched")
        return None

    def match_all(self, input_text: str) -> List[str]:
        """Every matching topic key in priority order (diagnostics only)."""
        if not input_text or not input_text.strip():
            return []
        normalized = self.normalize(input_text)
        return [t.key for t in self._knowledge_base.topics() if t.matches(normalized)]

    def __repr__(self) -> str:
        return f"IntentMatcher(topics={len(self._knowledge_base)})"
