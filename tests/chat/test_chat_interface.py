"""
Tests for the interactive ChatInterface command handling.
"""

import pytest

from legalmind.chat.interface import HELP_TEXT, ChatInterface


class TestChatInterface:

    @pytest.fixture
    def interface(self, container):
        return ChatInterface(container=container, thinking_delay=(0.0, 0.0))

    @pytest.mark.asyncio
    async def test_plain_line_gets_reply(self, interface, knowledge_base):
        output = await interface.handle_line("Tell me about GST")
        assert output in knowledge_base.lookup("taxation").responses
        assert len(interface.session.get_history()) == 3

    @pytest.mark.asyncio
    async def test_help(self, interface):
        assert await interface.handle_line("/help") == HELP_TEXT

    @pytest.mark.asyncio
    async def test_exit_stops_loop(self, interface):
        interface.running = True
        assert await interface.handle_line("/exit") == "Goodbye!"
        assert interface.running is False

    @pytest.mark.asyncio
    async def test_reset(self, interface, knowledge_base):
        await interface.handle_line("Tell me about GST")
        assert await interface.handle_line("/reset") == knowledge_base.greeting
        assert len(interface.session.get_history()) == 1

    @pytest.mark.asyncio
    async def test_history_lists_ids(self, interface):
        await interface.handle_line("Tell me about GST")
        lines = (await interface.handle_line("/history")).splitlines()
        assert len(lines) == 3
        assert lines[1].startswith("[2] You (")

    @pytest.mark.asyncio
    async def test_export_and_share(self, interface):
        await interface.handle_line("Tell me about GST")
        export = await interface.handle_line("/export")
        share = await interface.handle_line("/share")
        assert "You: Tell me about GST" in export
        assert share.startswith("LegalMind AI Legal Consultation")

    @pytest.mark.asyncio
    async def test_analyze_sample(self, interface):
        output = await interface.handle_line("/analyze")
        assert "Software License Agreement" in output
        assert "CloudTech Solutions Inc. (Licensor / Provider)" in output
        assert "USD 75,000 [fee]" in output

    @pytest.mark.asyncio
    async def test_analyze_file(self, interface, tmp_path):
        path = tmp_path / "nda.txt"
        path.write_text("Mutual NDA between Acme Corp. and Beta LLC.", encoding="utf-8")
        output = await interface.handle_line(f"/analyze {path}")
        assert "Non-Disclosure Agreement" in output
        assert "Beta LLC (Licensee / Customer)" in output

    @pytest.mark.asyncio
    async def test_analyze_missing_file(self, interface, tmp_path):
        missing = tmp_path / "missing.txt"
        assert await interface.handle_line(f"/analyze {missing}") == (
            f"Could not read document: {missing}"
        )

    @pytest.mark.asyncio
    async def test_summarize(self, interface):
        output = await interface.handle_line("/summarize")
        assert "Key Points:" in output
        assert "1. Document Type: Software License Agreement" in output

    @pytest.mark.asyncio
    async def test_extract(self, interface):
        output = await interface.handle_line("/extract Pay $500 by 2024-05-01 to Acme Corp.")
        assert output.splitlines() == [
            "Dates: 2024-05-01",
            "Amounts: 500",
            "Parties: Acme Corp. (Licensor / Provider)",
        ]

    @pytest.mark.asyncio
    async def test_extract_usage(self, interface):
        assert await interface.handle_line("/extract") == "Usage: /extract <text>"

    @pytest.mark.asyncio
    async def test_unknown_command(self, interface):
        assert "Unknown command" in await interface.handle_line("/dance")
