"""MCP tools for tag decoding and grammar tables."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from morph_explorer.engine import ExplorerEngine


def register(mcp: FastMCP, engine: ExplorerEngine) -> None:
    @mcp.tool()
    def list_books() -> list[str]:
        """List the books available in the corpus, in canonical order."""
        return engine.list_books()

    @mcp.tool()
    def describe_tag(tag: str) -> dict:
        """Decode a part-of-speech tag into its grammatical attributes.

        The first letter is the category (N noun, V verb, J/A adjective,
        R pronoun, D article, P preposition, C conjunction, B adverb,
        T particle, I interjection, X indeclinable); the rest are positional
        codes. For example "VAAI3S" is an aorist active indicative verb,
        3rd person singular, and "CLN" is a logical connective conjunction.

        Args:
            tag: Part-of-speech tag (e.g. "VAAI3S", "NGSF", "CLN")
        """
        return engine.describe_tag(tag).model_dump()

    @mcp.tool()
    def get_grammar() -> dict:
        """Get the grammar tables: categories, their attributes and code names.

        Useful for discovering which attributes and values a breakdown or
        highlight selection accepts.
        """
        return engine.grammar()
