"""Tests for the JSON handler."""

import json

from chat_format.core.formatter import MessageFormatter
from chat_format.core.models import ChatMessage
from chat_format.formats.json_handler import JSONHandler, node_to_dict
from chat_format.formatting.ir import RuleNode
from chat_format.formatting.parser import format_reply


class TestJSONHandler:
    """Tests for the JSON output handler."""

    def test_rule(self):
        assert node_to_dict(RuleNode()) == {"type": "rule"}

    def test_render(self):
        data = json.loads(JSONHandler().render(format_reply("# **Hi**\n\n1. `a`\n\n> q")))

        assert data == [
            {"type": "heading", "level": 1, "content": [{"type": "bold", "text": "Hi"}]},
            {"type": "list", "kind": "ordered", "items": [[{"type": "code", "text": "a"}]]},
            {"type": "quote", "lines": [[{"type": "text", "text": "q"}]]},
        ]

    def test_paragraph(self):
        data = json.loads(JSONHandler().render(format_reply("é")))

        assert data == [{"type": "paragraph", "content": [{"type": "text", "text": "é"}]}]

    def test_render_messages_is_one_document(self):
        formatted = MessageFormatter().format_transcript([
            ChatMessage(id="1", role="user", content="hi"),
            ChatMessage(id="2", role="assistant", content="---"),
        ])

        data = json.loads(JSONHandler().render_messages(formatted))

        assert data == [
            {
                "id": "1",
                "role": "user",
                "createdAt": None,
                "nodes": [{"type": "paragraph", "content": [{"type": "text", "text": "hi"}]}],
                "sources": [],
            },
            {
                "id": "2",
                "role": "assistant",
                "createdAt": None,
                "nodes": [{"type": "rule"}],
                "sources": [],
            },
        ]

    def test_render_messages_carries_sources(self, sample_messages: list[dict]):
        formatter = MessageFormatter()
        formatted = formatter.format_transcript(
            formatter.parse_transcript(json.dumps(sample_messages))
        )

        data = json.loads(JSONHandler().render_messages(formatted))

        assert data[1]["createdAt"] == "2026-10-19T09:30:05+00:00"
        assert data[1]["sources"] == [
            {"text": "Forms are due Friday.", "source": "handbook.pdf", "score": 0.82}
        ]
        assert data[0]["sources"] == []

    def test_render_messages_answer_payload(self):
        formatter = MessageFormatter()
        formatted = formatter.format_transcript(formatter.parse_transcript(json.dumps(
            {"answer": "hi", "sources": [{"text": "Forms due Friday", "source": "handbook.pdf"}]}
        )))

        data = json.loads(JSONHandler().render_messages(formatted))

        assert data[0]["sources"][0]["source"] == "handbook.pdf"
        assert data[0]["sources"][0]["score"] is None
