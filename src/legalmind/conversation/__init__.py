"""
Conversation package: rule-based legal chatbot.

This package implements a keyword-driven conversational system that:
- Matches user input to a legal topic by trigger keywords
- Picks a canned response for the topic, or a generic fallback
- Keeps an ordered, exportable message history per session

Components:
    - KnowledgeBase: Validated, read-only topics and fallback replies
    - IntentMatcher: First-match keyword scan over topics
    - ResponseSelector: Random response choice within a topic
    - ConversationMemory: Ordered message history
    - ConversationSession: Turn state machine with cancellable delay
"""

from legalmind.conversation.knowledge import (
    ConfigurationError,
    KnowledgeBase,
    Topic,
    TopicNotFound,
)
from legalmind.conversation.intent import IntentMatcher
from legalmind.conversation.selector import ResponseSelector
from legalmind.conversation.memory import ConversationMemory, Message, Sender
from legalmind.conversation.chatbot import (
    ConversationSession,
    SessionBusyError,
    SessionState,
)

__all__ = [
    # Knowledge
    "KnowledgeBase",
    "Topic",
    "ConfigurationError",
    "TopicNotFound",
    # Matching
    "IntentMatcher",
    # Selection
    "ResponseSelector",
    # Memory
    "ConversationMemory",
    "Message",
    "Sender",
    # Session
    "ConversationSession",
    "SessionBusyError",
    "SessionState",
]
