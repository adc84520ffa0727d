"""
FastAPI backend for LegalMind.

Exposes the chatbot session, document analysis and pattern extraction over
HTTP. Chat sessions are kept in process memory and addressed by the
X-Session-Id header; every request is rate limited per user.
"""

import json
import logging
import re
import secrets
import time
from collections import OrderedDict
from datetime import datetime, timezone
from html import escape
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, field_validator

from legalmind import __version__
from legalmind.config.settings import settings
from legalmind.container import LegalMindContainer
from legalmind.conversation.chatbot import ConversationSession, SessionBusyError

logger = logging.getLogger(__name__)

SESSION_TTL = 28800  # 8 hours
SESSION_HEADER = "X-Session-Id"


# --- Input Validation ---

class ChatRequest(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        # Blank messages are a no-op for the session, not an error
        if len(v) > settings.max_message_length:
            raise ValueError(f"Message too long (max {settings.max_message_length} chars)")
        # Block obvious XSS attempts
        if re.search(r"<script|javascript:|on\w+=", v, re.IGNORECASE):
            raise ValueError("Invalid content")
        return v


class DocumentRequest(BaseModel):
    text: str


# --- Session Storage ---

class SessionStore:
    """
    In-process chat sessions with idle expiry.

    At most ``max_sessions`` are kept; creating one more drops the least
    recently used session.
    """

    def __init__(
        self,
        container: LegalMindContainer,
        ttl: float = SESSION_TTL,
        max_sessions: Optional[int] = None,
    ):
        self._container = container
        self._ttl = ttl
        if max_sessions is None:
            max_sessions = container.settings.max_sessions
        self._max_sessions = max_sessions
        if self._max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._sessions: "OrderedDict[str, dict]" = OrderedDict()

    def get_or_create(self, session_id: Optional[str]) -> tuple:
        """Return (session_id, ConversationSession), creating one if needed."""
        self._expire()
        entry = self._sessions.get(session_id) if session_id else None
        if entry is None:
            session_id = secrets.token_urlsafe(16)
            entry = {"session": self._container.create_session(), "touched": time.time()}
            self._sessions[session_id] = entry
            logger.info(f"Created chat session {session_id[:8]}...")
            self._evict()
        entry["touched"] = time.time()
        self._sessions.move_to_end(session_id)
        return session_id, entry["session"]

    def _expire(self) -> None:
        now = time.time()
        expired = [
            k for k, v in self._sessions.items()
            if now - v["touched"] > self._ttl and not v["session"].is_busy
        ]
        for k in expired:
            del self._sessions[k]

    def _evict(self) -> None:
        while len(self._sessions) > self._max_sessions:
            key, _ = self._sessions.popitem(last=False)
            logger.debug(f"Evicted chat session {key[:8]}...")

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


def create_app(container: Optional[LegalMindContainer] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        container: LegalMindContainer (default: a fresh one)
    """
    container = container if container is not None else LegalMindContainer()

    app = FastAPI(title="LegalMind AI", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization", SESSION_HEADER, "X-User-Id"],
        expose_headers=[SESSION_HEADER],
    )

    app.state.container = container
    app.state.sessions = SessionStore(container)
    app.state.rate_limiter = container.create_rate_limiter()
    app.state.analyzer = container.create_document_analyzer()

    # --- Dependencies ---

    async def enforce_rate_limit(
        request: Request,
        x_user_id: Optional[str] = Header(None),
    ) -> str:
        """Count the request against the caller and reject when over limit."""
        user_id = x_user_id or (request.client.host if request.client else "anonymous")
        if not app.state.rate_limiter.check(user_id):
            raise HTTPException(status_code=429, detail="Rate limit exceeded")
        return user_id

    async def get_session(
        response: Response,
        x_session_id: Optional[str] = Header(None),
    ) -> ConversationSession:
        session_id, session = app.state.sessions.get_or_create(x_session_id)
        response.headers[SESSION_HEADER] = session_id
        return session

    # --- Endpoints ---

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
        }

    @app.post("/api/chat")
    async def chat(
        chat_request: ChatRequest,
        session: ConversationSession = Depends(get_session),
        user_id: str = Depends(enforce_rate_limit),
    ):
        """Submit a message and wait for the assistant reply."""
        try:
            message = await session.submit(chat_request.message)
        except SessionBusyError:
            raise HTTPException(status_code=409, detail="A response is still being generated")
        return {"message": message.to_dict() if message else None}

    @app.post("/api/chat/stream")
    async def chat_stream(
        chat_request: ChatRequest,
        session: ConversationSession = Depends(get_session),
        user_id: str = Depends(enforce_rate_limit),
    ):
        """
        SSE streaming endpoint for a chat turn.

        Streams events:
        - {"event": "thinking", ...} - Reply is being generated
        - {"event": "response", ...} - Final reply
        - {"event": "error", ...} - Busy session or service error
        """
        message_text = chat_request.message

        async def event_generator():
            yield _format_sse("thinking", {"status": "processing"})
            try:
                message = await session.submit(message_text)
            except SessionBusyError:
                yield _format_sse("error", {"message": "A response is still being generated"})
                return
            except Exception as e:
                # Don't expose internal errors
                logger.error(f"Chat error for {user_id}: {e}", exc_info=True)
                yield _format_sse("error", {"message": "Service error"})
                return
            if message is not None:
                yield _format_sse("response", {
                    "id": message.id,
                    "content": escape(message.text),
                    "timestamp": message.timestamp.isoformat(),
                })

        return StreamingResponse(
            event_generator(),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no",
            },
        )

    @app.get("/api/chat/history")
    async def chat_history(session: ConversationSession = Depends(get_session)):
        return {"messages": [m.to_dict() for m in session.get_history()]}

    @app.post("/api/chat/reset")
    async def chat_reset(session: ConversationSession = Depends(get_session)):
        session.reset()
        return {"messages": [m.to_dict() for m in session.get_history()]}

    @app.get("/api/chat/export")
    async def chat_export(session: ConversationSession = Depends(get_session)):
        return {"transcript": session.export_transcript(), "share_text": session.share_text()}

    @app.post("/api/analyze-document")
    async def analyze_document(
        document: DocumentRequest,
        user_id: str = Depends(enforce_rate_limit),
    ):
        analysis = app.state.analyzer.analyze(document.text)
        return {"success": True, "data": analysis.to_dict()}

    @app.post("/api/summarize-document")
    async def summarize_document(
        document: DocumentRequest,
        user_id: str = Depends(enforce_rate_limit),
    ):
        if not document.text.strip():
            raise HTTPException(status_code=400, detail="No text provided")
        summary = app.state.analyzer.summarize(document.text)
        return {"success": True, "data": summary.to_dict()}

    @app.post("/api/extract")
    async def extract(
        document: DocumentRequest,
        user_id: str = Depends(enforce_rate_limit),
    ):
        found = app.state.container.extractor.extract_all(document.text)
        return {
            "success": True,
            "data": {kind: [f.to_dict() for f in fields] for kind, fields in found.items()},
        }

    return app


def _format_sse(event: str, data: dict) -> str:
    """Format Server-Sent Event."""
    return f"event: {event}\ndata: {json.dumps(data)}\n\n"


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from legalmind.config.constants import LOG_FORMAT

    logging.basicConfig(level=settings.effective_log_level, format=LOG_FORMAT)
    uvicorn.run(app, host="0.0.0.0", port=8000)
