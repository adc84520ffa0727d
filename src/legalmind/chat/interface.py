#!/usr/bin/env python3
"""
Chat interface for the LegalMind legal assistant.

Provides an interactive REPL over a ConversationSession. Plain lines are
sent to the chatbot; lines starting with "/" are commands.
"""

from dotenv import load_dotenv
load_dotenv()  # Load .env file before settings are read

import asyncio
import logging
from pathlib import Path
from typing import Optional

from legalmind.analysis.samples import SAMPLE_LICENSE_AGREEMENT
from legalmind.container import LegalMindContainer

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  /help              Show this help
  /reset             Clear the conversation
  /history           Show message history with ids
  /export            Print the conversation transcript
  /share             Print the transcript with a share heading
  /analyze [path]    Analyze a text document (sample agreement if no path)
  /summarize [path]  Summarize a text document (sample agreement if no path)
  /extract <text>    Extract dates, amounts and parties from text
  /exit              Exit"""


class ChatInterface:
    """
    Interactive chat interface for LegalMind.

    Commands:
    - /help - Show help
    - /reset - Clear the conversation back to the greeting
    - /history - Show message ids, senders and text
    - /export, /share - Print the transcript
    - /analyze [path], /summarize [path] - Document analysis
    - /extract <text> - Pattern extraction
    - /exit - Exit

    Example session:
        > Tell me about GST
        Goods and Services Tax (GST) implemented in 2017 is ...
    """

    def __init__(
        self,
        container: Optional[LegalMindContainer] = None,
        thinking_delay: Optional[tuple] = None,
    ):
        """
        Initialize chat interface.

        Args:
            container: LegalMindContainer (default: a fresh one)
            thinking_delay: Optional (min, max) delay override, e.g. (0, 0)
        """
        self.container = container if container is not None else LegalMindContainer()
        self.session = self.container.create_session(thinking_delay=thinking_delay)
        self.analyzer = self.container.create_document_analyzer()
        self.running = False

    def start(self) -> None:
        """Start interactive REPL."""
        asyncio.run(self._repl())

    async def _repl(self) -> None:
        print("=" * 60)
        print("  LegalMind AI: Legal Assistant")
        print("=" * 60)
        print()
        print(self.session.get_history()[0].text)
        print()
        print("(Type your question or use /help for commands)")
        print()

        self.running = True
        while self.running:
            try:
                user_input = (await asyncio.to_thread(input, "> ")).strip()
            except (EOFError, KeyboardInterrupt):
                print("\nGoodbye!")
                break

            if not user_input:
                continue

            if not user_input.startswith("/"):
                print("  LegalMind AI is typing...")
            output = await self.handle_line(user_input)
            if output:
                print(f"\n{output}\n")

    async def handle_line(self, line: str) -> str:
        """
        Process one input line.

        Args:
            line: Raw user input

        Returns:
            Text to display (may be empty)
        """
        line = line.strip()
        if line.startswith("/"):
            return self._handle_command(line)

        message = await self.session.submit(line)
        return message.text if message else ""

    def _handle_command(self, line: str) -> str:
        parts = line.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        if cmd == "/help":
            return HELP_TEXT
        if cmd == "/exit":
            self.running = False
            return "Goodbye!"
        if cmd == "/reset":
            self.session.reset()
            return self.session.get_history()[0].text
        if cmd == "/history":
            return "\n".join(
                f"[{m.id}] {m.sender.label} ({m.timestamp:%H:%M:%S}): {m.text}"
                for m in self.session.get_history()
            )
        if cmd == "/export":
            return self.session.export_transcript().rstrip()
        if cmd == "/share":
            return self.session.share_text().rstrip()
        if cmd == "/analyze":
            return self._analyze(arg)
        if cmd == "/summarize":
            return self._summarize(arg)
        if cmd == "/extract":
            return self._extract(arg)
        return f"Unknown command: {cmd}. Type /help for commands."

    def _read_document(self, path: str) -> Optional[str]:
        if not path:
            return SAMPLE_LICENSE_AGREEMENT
        try:
            return Path(path).expanduser().read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read document {path!r}: {e}")
            return None

    def _analyze(self, path: str) -> str:
        text = self._read_document(path)
        if text is None:
            return f"Could not read document: {path}"

        report = self.analyzer.analyze(text)
        lines = [
            f"Document Type: {report.document_type.category} "
            f"({report.document_type.subcategory}, {report.document_type.confidence}% confidence)",
            f"Jurisdiction: {report.document_type.jurisdiction}",
            "Parties:",
        ]
        lines += [f"  - {p.name} ({p.role})" for p in report.parties] or ["  (none found)"]
        lines.append("Key Dates:")
        lines += [f"  - {d.date} [{d.type}]" for d in report.key_dates] or ["  (none found)"]
        lines.append("Financial Terms:")
        lines += [f"  - {t.currency} {t.amount} [{t.type}]" for t in report.financial_terms] or [
            "  (none found)"
        ]
        lines.append("Risks:")
        lines += [f"  - [{r.type}] {r.description}" for r in report.risk_factors] or ["  (none found)"]
        lines.append("Compliance Gaps:")
        lines += [f"  - {c.requirement}: {c.details}" for c in report.compliance_items] or [
            "  (none found)"
        ]
        score = report.overall_score
        lines.append(
            f"Scores: clarity {score.clarity}%, completeness {score.completeness}%, "
            f"risk {score.risk_level}%, compliance {score.compliance}%"
        )
        return "\n".join(lines)

    def _summarize(self, path: str) -> str:
        text = self._read_document(path)
        if text is None:
            return f"Could not read document: {path}"
        summary = self.analyzer.summarize(text)
        points = "\n".join(f"{i}. {p}" for i, p in enumerate(summary.key_points, 1))
        return f"{summary.executive_summary}\n\nKey Points:\n{points}"

    def _extract(self, text: str) -> str:
        if not text:
            return "Usage: /extract <text>"
        found = self.container.extractor.extract_all(text)
        lines = []
        for label, fields in found.items():
            values = ", ".join(
                f"{f.normalized or f.raw_match}" + (f" ({f.role})" if f.role else "")
                for f in fields
            )
            lines.append(f"{label.capitalize()}: {values or '(none)'}")
        return "\n".join(lines)
