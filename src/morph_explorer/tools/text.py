"""MCP tools for chapter text and highlighting."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from morph_explorer.engine import ExplorerEngine
from morph_explorer.models import Selection


def register(mcp: FastMCP, engine: ExplorerEngine) -> None:
    @mcp.tool()
    async def get_chapter_text(
        book: str,
        chapter: str,
        category: str | None = None,
        attribute: str | None = None,
        value: str | None = None,
        paragraph_mode: bool = False,
    ) -> dict:
        """Get a chapter's text with words highlighted for a selection.

        `value` may be a code ("A") or a display name ("Aorist"). Verb
        case/gender/number selections only highlight participles.

        Args:
            book: Book name (e.g. "John")
            chapter: Chapter number
            category: Category to highlight (omit for no highlighting)
            attribute: Attribute to narrow by (e.g. "tense")
            value: Attribute value, code or display name
            paragraph_mode: Group verses into paragraphs
        """
        text = await engine.chapter_text_async(
            book,
            chapter,
            Selection(category=category, attribute=attribute, value=value),
            paragraph_mode=paragraph_mode,
        )
        return text.model_dump()

    @mcp.tool()
    def get_matching_words(
        book: str,
        chapter: str,
        category: str,
        attribute: str | None = None,
        value: str | None = None,
    ) -> list[dict]:
        """List the words of a chapter that match a category/attribute selection.

        Args:
            book: Book name (e.g. "John")
            chapter: Chapter number
            category: Part-of-speech category (e.g. "Conjunction")
            attribute: Attribute to narrow by (e.g. "subtype")
            value: Attribute value, code or display name (e.g. "LN", "Connective")
        """
        return engine.matching_words(
            book,
            chapter,
            Selection(category=category, attribute=attribute, value=value),
        )
