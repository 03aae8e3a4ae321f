from __future__ import annotations

import logging

from spellfix.api.main import spellcheck_service
from spellfix.common.config import settings

try:
    from fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover - runtime dependency guard
    raise RuntimeError(
        "FastMCP is required to run the MCP server. Install the project dependencies first."
    ) from exc


SERVER_TITLE = "Spellfix"
SERVER_INSTRUCTIONS = (
    "Use check_spelling to find misspelled words and their suggested corrections. "
    "Use add_word to teach the dictionary a new word and purge_cache to forget remembered suggestions."
)

mcp = FastMCP(
    name=SERVER_TITLE,
    instructions=SERVER_INSTRUCTIONS,
    version='1',
)


def _bounded(text: str) -> str:
    return text[: settings.max_text_chars]


def check_spelling(text: str) -> str:
    """Report misspelled words in the text with one suggestion each, when one exists."""
    result = spellcheck_service.check(_bounded(text))
    if not result.misspelled:
        return "No misspelled words found."

    suggestions = {c.misspelled: c.suggestion for c in result.corrections}
    lines = []
    for word in result.misspelled:
        suggestion = suggestions.get(word)
        lines.append(f"{word} -> {suggestion}" if suggestion else f"{word} (no suggestions)")
    return "\n".join(lines)


def add_word(word: str) -> str:
    """Add a word to the dictionary."""
    try:
        response = spellcheck_service.add_word(word)
    except ValueError as exc:
        return f"Rejected: {exc}"
    if response.added:
        return f"Added {response.word}."
    return f"{response.word} already exists in the dictionary."


def purge_cache() -> str:
    """Forget all remembered suggestions."""
    return f"Purged {spellcheck_service.purge().purged} cached suggestions."


mcp.tool(name="check_spelling", description="Find misspelled words and suggest corrections.")(check_spelling)
mcp.tool(name="add_word", description="Add a word to the spelling dictionary.")(add_word)
mcp.tool(name="purge_cache", description="Clear remembered spelling suggestions.")(purge_cache)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    spellcheck_service.load()
    mcp.run("http")
