"""FastAPI HTTP layer wrapping ExplorerEngine."""

from __future__ import annotations

import hmac
import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from morph_explorer.breakdown import BreakdownError
from morph_explorer.corpus import NoDataError
from morph_explorer.engine import ExplorerEngine
from morph_explorer.models import Selection

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Morphology Explorer API",
    description="Part-of-speech heatmaps and highlighting for a tagged Greek NT corpus",
    version="0.1.0",
)

API_KEY = os.getenv("API_KEY")
if not API_KEY:
    logger.warning("API_KEY not set. All requests will be allowed.")


@app.middleware("http")
async def verify_api_key(request: Request, call_next):
    if API_KEY and request.url.path != "/health":
        key = request.headers.get("x-api-key", "")
        if not hmac.compare_digest(key, API_KEY):
            return JSONResponse(status_code=401, content={"detail": "Invalid API key"})
    return await call_next(request)


@app.get("/health")
def health():
    """Unauthenticated health check."""
    return {"status": "ok"}


engine = ExplorerEngine()


def _selection(
    category: str | None, attribute: str | None, value: str | None
) -> Selection:
    return Selection(category=category, attribute=attribute, value=value)


# --- Endpoints ---


@app.get("/api/books")
def list_books():
    """List book identifiers in corpus order."""
    try:
        return engine.list_books()
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/api/books/{book}")
def get_book(book: str):
    """Load a book and return its chapter count."""
    try:
        return engine.load_book(book).model_dump()
    except NoDataError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/api/books/{book}/overview")
def get_overview(book: str):
    """Word counts per category and chapter."""
    try:
        return engine.overview(book).model_dump()
    except NoDataError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BreakdownError as e:
        logger.error("Overview error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/books/{book}/breakdown")
def get_breakdown(book: str, category: str, attribute: str | None = None):
    """Count matrix for one category.

    ``attribute`` selects the grouping attribute (e.g. tense, case) or, for
    conjunctions, the type name (Logical, Adverbial, Substantival).
    """
    try:
        return engine.breakdown(book, category, attribute).model_dump()
    except NoDataError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BreakdownError as e:
        logger.error("Breakdown error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/books/{book}/chapters/{chapter}/text")
async def get_chapter_text(
    book: str,
    chapter: str,
    category: str | None = None,
    attribute: str | None = None,
    value: str | None = None,
    paragraph_mode: bool = False,
):
    """Chapter text with words highlighted for the given selection."""
    try:
        text = await engine.chapter_text_async(
            book,
            chapter,
            _selection(category, attribute, value),
            paragraph_mode=paragraph_mode,
        )
    except NoDataError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return text.model_dump()


@app.get("/api/books/{book}/chapters/{chapter}/matches")
def get_matching_words(
    book: str,
    chapter: str,
    category: str,
    attribute: str | None = None,
    value: str | None = None,
):
    """Words of a chapter matching a selection."""
    try:
        return engine.matching_words(
            book, chapter, _selection(category, attribute, value)
        )
    except NoDataError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/api/tags/{tag}")
def describe_tag(tag: str):
    """Decode a part-of-speech tag."""
    return engine.describe_tag(tag).model_dump()


@app.get("/api/grammar")
def get_grammar():
    """Categories, attributes and code tables."""
    return engine.grammar()


def main():
    """Run the API server."""
    import uvicorn

    port = int(os.environ.get("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
