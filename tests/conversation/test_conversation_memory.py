"""
Tests for ConversationMemory and Message.
"""

import dataclasses

import pytest

from legalmind.conversation.memory import ConversationMemory, Sender


class TestConversationMemory:

    @pytest.fixture
    def memory(self):
        return ConversationMemory()

    def test_ids_increase_from_one(self, memory):
        ids = [memory.append(Sender.USER, f"m{i}").id for i in range(4)]
        assert ids == [1, 2, 3, 4]

    def test_clear_restarts_ids(self, memory):
        memory.append(Sender.USER, "a")
        memory.append(Sender.ASSISTANT, "b")
        memory.clear()
        assert len(memory) == 0
        assert memory.append(Sender.ASSISTANT, "c").id == 1

    def test_snapshot_is_detached(self, memory):
        memory.append(Sender.USER, "a")
        snapshot = memory.snapshot()
        memory.append(Sender.USER, "b")
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_messages_are_immutable(self, memory):
        message = memory.append(Sender.USER, "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            message.text = "changed"

    def test_last(self, memory):
        assert memory.last() is None
        memory.append(Sender.USER, "a")
        assert memory.last().text == "a"

    def test_transcript_format(self, memory):
        memory.append(Sender.ASSISTANT, "Hello")
        memory.append(Sender.USER, "Tell me about GST")
        assert memory.transcript() == "LegalMind AI: Hello\n\nYou: Tell me about GST\n\n"

    def test_transcript_has_two_lines_per_message(self, memory):
        for i in range(5):
            memory.append(Sender.USER if i % 2 else Sender.ASSISTANT, f"message {i}")
        assert len(memory.transcript().splitlines()) == 10

    def test_message_to_dict(self, memory):
        data = memory.append(Sender.USER, "a").to_dict()
        assert data["id"] == 1
        assert data["sender"] == "user"
        assert data["text"] == "a"
        assert "T" in data["timestamp"]
