"""
Collaborator protocols: contracts for the host-side services LegalMind uses.

The core never performs I/O itself. Document text comes from a provider
supplied by the host, and session/analysis events go to an optional sink
whose failures must never reach the caller.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class DocumentTextProvider(Protocol):
    """
    Source of raw document text (file upload + text extraction).

    Implementations live outside the core: an upload handler, a file
    reader, a PDF extractor.
    """

    def get_document_text(self) -> str:
        """
        Return the document's full plain text.

        Returns:
            Extracted text, possibly empty
        """
        ...


class EventSink(Protocol):
    """
    Persistence/analytics collaborator.

    Receives one call per ``submit``/``reset``/analysis event. Calls are
    fire-and-forget: the core logs and ignores any exception raised here.
    """

    def record(self, event: str, payload: Dict[str, Any]) -> None:
        """
        Record an event.

        Args:
            event: Event name, e.g. "chat.submit" or "chat.reset"
            payload: JSON-serializable event details
        """
        ...


class InMemoryEventSink:
    """EventSink that keeps events in a list. Used by the CLI and tests."""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def record(self, event: str, payload: Dict[str, Any]) -> None:
        self.events.append((event, dict(payload)))

    def __len__(self) -> int:
        return len(self.events)


def emit_event(sink: Optional[EventSink], event: str, **payload: Any) -> None:
    """Send an event to the sink, logging and ignoring any failure."""
    if sink is None:
        return
    try:
        sink.record(event, payload)
    except Exception as e:
        logger.warning(f"Event sink failed for {event!r}: {e}")
