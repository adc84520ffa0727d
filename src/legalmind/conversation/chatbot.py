"""
Conversation session orchestrating intent matching and response selection.

A session owns the message history of one chat widget. Each accepted user
message is followed, after a short randomized "thinking" delay, by one
assistant message. The delay runs as an asyncio task so ``reset`` can
cancel it before a late reply lands in a fresh history.
"""

import asyncio
import logging
import random
from enum import Enum
from typing import Callable, List, Optional, Tuple

from legalmind.config.constants import SHARE_HEADING, THINKING_DELAY_MAX, THINKING_DELAY_MIN
from legalmind.conversation.intent import IntentMatcher
from legalmind.conversation.memory import ConversationMemory, Message, Sender
from legalmind.conversation.selector import ResponseSelector
from legalmind.protocols.collaborators import EventSink, emit_event

logger = logging.getLogger(__name__)

HistoryListener = Callable[[Tuple[Message, ...]], None]


class SessionState(Enum):
    """Session lifecycle states."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class SessionBusyError(RuntimeError):
    """Raised when a message is submitted while a reply is still pending."""


class ConversationSession:
    """
    One chat conversation: history, id counter and busy flag.

    Turn flow:
    - ``submit(text)`` appends the user message and enters AWAITING_RESPONSE
    - after the thinking delay the matcher and selector produce a reply
    - the assistant message is appended and the session returns to IDLE

    At most one submit is in flight. A second submit while awaiting raises
    SessionBusyError rather than queueing, so histories never interleave.

    Attributes:
        _matcher: IntentMatcher shared across sessions
        _selector: ResponseSelector producing reply text
        _greeting: Canonical greeting restored by reset()
        _delay_range: (min, max) thinking delay in seconds
        _rng: Random source for the delay
        _memory: ConversationMemory holding the messages
        _pending: Task generating the current reply, if any
        _generation: Bumped by reset() to orphan in-flight turns

    Example:
        >>> session = container.create_session()
        >>> reply = await session.submit("Tell me about GST")
        >>> print(session.export_transcript())
    """

    def __init__(
        self,
        matcher: IntentMatcher,
        selector: ResponseSelector,
        greeting: str,
        thinking_delay: Tuple[float, float] = (THINKING_DELAY_MIN, THINKING_DELAY_MAX),
        rng: Optional[random.Random] = None,
        event_sink: Optional[EventSink] = None,
    ):
        """
        Initialize a session holding only the greeting.

        Args:
            matcher: Intent matcher
            selector: Response selector
            greeting: Text of the first assistant message
            thinking_delay: (min, max) seconds to wait before replying
            rng: Optional random source for the delay (seed in tests)
            event_sink: Optional collaborator notified of submit/reset
        """
        low, high = thinking_delay
        if low < 0 or high < low:
            raise ValueError(f"Invalid thinking delay window: {thinking_delay}")

        self._matcher = matcher
        self._selector = selector
        self._greeting = greeting
        self._delay_range = (low, high)
        self._rng = rng if rng is not None else random.Random()
        self._event_sink = event_sink

        self._memory = ConversationMemory()
        self._state = SessionState.IDLE
        self._pending: Optional[asyncio.Task] = None
        self._generation = 0
        self._listeners: List[HistoryListener] = []

        self._memory.append(Sender.ASSISTANT, greeting)

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------

    async def submit(self, text: str) -> Optional[Message]:
        """
        Submit a user message and wait for the assistant reply.

        Args:
            text: User input

        Returns:
            The assistant Message, or None when the input was blank or the
            turn was cancelled by reset()

        Raises:
            SessionBusyError: If a previous reply is still pending
        """
        if not text or not text.strip():
            return None
        if self._state is SessionState.AWAITING_RESPONSE:
            raise SessionBusyError("A response is still being generated")

        user_message = self._memory.append(Sender.USER, text)
        emit_event(self._event_sink, "chat.submit", message_id=user_message.id, text=text)
        self._notify()

        generation = self._generation
        self._state = SessionState.AWAITING_RESPONSE
        self._pending = asyncio.ensure_future(self._reply_after_delay(text))
        try:
            return await self._pending
        except asyncio.CancelledError:
            if self._generation != generation:
                logger.debug("Pending reply cancelled by reset")
                return None
            raise
        finally:
            if self._generation == generation:
                self._state = SessionState.IDLE
                self._pending = None

    async def _reply_after_delay(self, text: str) -> Message:
        delay = self._rng.uniform(*self._delay_range)
        await asyncio.sleep(delay)

        reply = self._compose_reply(text)
        message = self._memory.append(Sender.ASSISTANT, reply)
        self._notify()
        return message

    def _compose_reply(self, text: str) -> str:
        """Match and select; any internal failure degrades to a fallback reply."""
        try:
            topic_key = self._matcher.match(text)
            logger.debug(f"Turn matched topic: {topic_key}")
            return self._selector.select(topic_key)
        except Exception as e:
            logger.error(f"Reply generation failed, using fallback: {e}", exc_info=True)
            return self._selector.select(None)

    def reset(self) -> None:
        """Cancel any pending reply and restore the history to the greeting."""
        self._generation += 1
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
        self._state = SessionState.IDLE

        self._memory.clear()
        self._memory.append(Sender.ASSISTANT, self._greeting)
        emit_event(self._event_sink, "chat.reset")
        self._notify()

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def get_history(self) -> Tuple[Message, ...]:
        """Read-only snapshot of the conversation."""
        return self._memory.snapshot()

    def export_transcript(self) -> str:
        """Plain-text transcript, one labelled line plus blank line per message."""
        return self._memory.transcript()

    def share_text(self) -> str:
        """Transcript prefixed with the consultation heading."""
        return f"{SHARE_HEADING}\n\n{self.export_transcript()}"

    def subscribe(self, listener: HistoryListener) -> None:
        """Register a callback invoked with the history after every change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        if not self._listeners:
            return
        history = self._memory.snapshot()
        for listener in self._listeners:
            try:
                listener(history)
            except Exception as e:
                logger.warning(f"History listener failed: {e}")

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state is SessionState.AWAITING_RESPONSE

    def __repr__(self) -> str:
        return f"ConversationSession(messages={len(self._memory)}, state={self._state.value})"
