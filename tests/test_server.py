"""Tests for MCP tool registration."""

import asyncio

from morph_explorer.server import create_server


class TestServer:
    def test_tools_registered(self, engine):
        server = create_server(engine)
        names = {tool.name for tool in asyncio.run(server.list_tools())}
        assert names == {
            "list_books",
            "describe_tag",
            "get_grammar",
            "get_overview",
            "get_breakdown",
            "get_chapter_text",
            "get_matching_words",
        }

    def test_servers_are_independent(self, engine):
        first = create_server(engine)
        second = create_server(engine)
        assert first is not second
