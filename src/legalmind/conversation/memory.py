"""
Conversation memory: ordered message history for one chat session.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from legalmind.config.constants import ASSISTANT_NAME, USER_LABEL


class Sender(Enum):
    """Who wrote a message."""

    USER = "user"
    ASSISTANT = "assistant"

    @property
    def label(self) -> str:
        return ASSISTANT_NAME if self is Sender.ASSISTANT else USER_LABEL


@dataclass(frozen=True)
class Message:
    """A single chat message. Never mutated after creation."""

    id: int
    sender: Sender
    text: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sender": self.sender.value,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
        }

    def __repr__(self) -> str:
        return f"Message({self.id}, {self.sender.value}, '{self.text[:20]}...')"


class ConversationMemory:
    """
    Ordered message history with a monotonic id counter.

    Ids start at 1 and increase by one per appended message. ``clear``
    restarts the counter.

    Attributes:
        _messages: Messages in chronological order
        _next_id: Id the next appended message receives

    Example:
        >>> memory = ConversationMemory()
        >>> memory.append(Sender.USER, "Tell me about GST").id
        1
        >>> memory.transcript()
        'You: Tell me about GST\\n\\n'
    """

    def __init__(self):
        self._messages: List[Message] = []
        self._next_id = 1

    def append(self, sender: Sender, text: str) -> Message:
        """Create and record a message."""
        message = Message(id=self._next_id, sender=sender, text=text)
        self._messages.append(message)
        self._next_id += 1
        return message

    def clear(self) -> None:
        """Drop all messages and restart ids at 1."""
        self._messages = []
        self._next_id = 1

    def snapshot(self) -> Tuple[Message, ...]:
        """Read-only copy of the history."""
        return tuple(self._messages)

    def last(self) -> Optional[Message]:
        return self._messages[-1] if self._messages else None

    def transcript(self) -> str:
        """
        Render the history as plain text.

        Each message becomes a ``"{label}: {text}"`` line followed by a
        blank line, so a history of n single-line messages renders to
        exactly 2n lines.
        """
        return "".join(f"{m.sender.label}: {m.text}\n\n" for m in self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"ConversationMemory(messages={len(self._messages)})"
