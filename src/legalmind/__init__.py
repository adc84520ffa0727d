"""
LegalMind: Rule-Based Legal Assistant Chatbot.

This package implements a keyword-driven legal information assistant,
answering questions about Indian and international law from a fixed
knowledge base and reviewing contract text with simple pattern rules.

The system includes:
- Conversation engine (KnowledgeBase, IntentMatcher, ResponseSelector)
- Turn-based sessions with a cancellable thinking delay
- Pattern extraction of dates, amounts and party names
- Rule-based document analysis and summarization
- Interactive CLI and FastAPI web backend
"""

__version__ = "0.1.0"

from legalmind.chat import ChatInterface
from legalmind.container import LegalMindContainer
from legalmind.config.settings import Settings

# Conversation
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

# Document analysis
from legalmind.analysis.extractor import ExtractedField, FieldKind, PatternExtractor
from legalmind.analysis.document import DocumentAnalysis, DocumentAnalyzer, DocumentSummary
from legalmind.safety.rate_limit import RateLimiter

__all__ = [
    # Core
    "LegalMindContainer",
    "Settings",
    "ChatInterface",
    # Conversation
    "KnowledgeBase",
    "Topic",
    "ConfigurationError",
    "TopicNotFound",
    "IntentMatcher",
    "ResponseSelector",
    "ConversationMemory",
    "Message",
    "Sender",
    "ConversationSession",
    "SessionBusyError",
    "SessionState",
    # Document analysis
    "PatternExtractor",
    "ExtractedField",
    "FieldKind",
    "DocumentAnalyzer",
    "DocumentAnalysis",
    "DocumentSummary",
    # Safety
    "RateLimiter",
]
