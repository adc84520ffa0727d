"""
LegalMind constants.

Default values for the chat session, rate limiting and document analysis.
Runtime overrides go through config.settings.
"""

# Conversation Session
THINKING_DELAY_MIN = 1.5
"""Lower bound (seconds) of the simulated "thinking" delay before a reply."""

THINKING_DELAY_MAX = 3.0
"""Upper bound (seconds) of the simulated "thinking" delay before a reply."""

ASSISTANT_NAME = "LegalMind AI"
"""Display label for assistant messages in transcripts."""

USER_LABEL = "You"
"""Display label for user messages in transcripts."""

SHARE_HEADING = "LegalMind AI Legal Consultation"
"""Heading placed above a shared conversation transcript."""

MAX_MESSAGE_LENGTH = 5000
"""Maximum accepted length of a single chat message at the API boundary."""

# Rate Limiting
RATE_LIMIT_MAX_REQUESTS = 10
"""Requests allowed per key within one window."""

RATE_LIMIT_WINDOW_SECONDS = 60.0
"""Length of a rate-limit window."""

RATE_LIMIT_MAX_KEYS = 10_000
"""Keys tracked before the least recently used one is evicted."""

MAX_CHAT_SESSIONS = 10_000
"""Web chat sessions kept in memory before the least recently used one is dropped."""

# Extraction
DEFAULT_CURRENCY = "USD"
"""Currency assigned to every extracted amount. No multi-currency detection."""

LICENSOR_ROLE = "Licensor / Provider"
"""Role given to the first distinct party found in a document."""

LICENSEE_ROLE = "Licensee / Customer"
"""Role given to every later distinct party found in a document."""

ENTITY_SUFFIXES = ("Inc.", "LLC", "Corp.", "Corporation", "Company")
"""Legal-entity suffixes that mark a party name."""

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Document Analysis Scores
# (low, high) bounds, inclusive, for the randomized quality scores.
CLARITY_SCORE_RANGE = (70, 89)
COMPLETENESS_SCORE_RANGE = (80, 94)
RISK_SCORE_RANGE = (60, 84)
COMPLIANCE_SCORE_RANGE = (55, 84)

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
