"""MCP tools for chapter count matrices."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from morph_explorer.engine import ExplorerEngine


def register(mcp: FastMCP, engine: ExplorerEngine) -> None:
    @mcp.tool()
    def get_overview(book: str) -> dict:
        """Count words of every part-of-speech category, chapter by chapter.

        Returns a matrix with one row per category and one column per
        chapter (numeric order).

        Args:
            book: Book name (e.g. "John")
        """
        return engine.overview(book).model_dump()

    @mcp.tool()
    def get_breakdown(book: str, category: str, attribute: str | None = None) -> dict:
        """Break one category down by an attribute, chapter by chapter.

        Rows depend on the category:
        - Verb, Noun, Adjective, Pronoun, Article: one row per value of
          `attribute` (tense, voice, mood, person, number, case, gender,
          degree, type, subtype). Defaults: Verb=tense, Pronoun=type,
          others=case.
        - Conjunction: `attribute` is the type name (Logical, Adverbial,
          Substantival); one row per subtype of that type.
        - Adverb, Particle, Indeclinable: one row per type.
        - Preposition, Interjection: a single frequency row.

        Args:
            book: Book name (e.g. "John")
            category: Part-of-speech category (e.g. "Verb")
            attribute: Grouping attribute, or conjunction type name
        """
        return engine.breakdown(book, category, attribute).model_dump()
