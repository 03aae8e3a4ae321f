from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from spellfix.spellcheck.engine import Correction, SpellCheckerEngine
from spellfix.spellcheck.text import Token

logger = logging.getLogger(__name__)

SKIP = 0

Chooser = Callable[[int, Token, Sequence[Correction]], int]


class InvalidSelection(ValueError):
    """The chosen suggestion number is outside the offered range."""


@dataclass(frozen=True)
class CorrectionOutcome:
    text: str
    changed: bool
    applied: list[Correction] = field(default_factory=list)


def reassemble(tokens: Sequence[Token]) -> str:
    parts: list[str] = []
    for i, token in enumerate(tokens):
        if i > 0 and not token.is_punctuation:
            parts.append(" ")
        parts.append(token.raw)
    return "".join(parts)


def replace_token(tokens: Sequence[Token], index: int, replacement: str) -> list[Token]:
    if not 0 <= index < len(tokens):
        raise IndexError(f"token index {index} out of range for {len(tokens)} tokens")
    updated = list(tokens)
    updated[index] = Token(replacement)
    return updated


def resolve_choice(corrections: Sequence[Correction], choice: int) -> str | None:
    """Map a 1-based menu choice to a suggestion; 0 means skip."""
    if choice == SKIP:
        return None
    if not 1 <= choice <= len(corrections):
        raise InvalidSelection(f"choice {choice} is not between 0 and {len(corrections)}")
    return corrections[choice - 1].suggestion


def accept_first(_index: int, _token: Token, corrections: Sequence[Correction]) -> int:
    return 1 if corrections else SKIP


def correct_text(text: str, engine: SpellCheckerEngine, chooser: Chooser = accept_first) -> CorrectionOutcome:
    """Ask the chooser about every misspelled token and apply the chosen suggestions by position.

    Tokens without suggestions are still offered, with an empty list, so the
    caller can report them; any non-zero choice for them is rejected.

    Replacement is index based, so an earlier token with the same spelling is
    never touched by accident.
    """
    tokens = engine.tokenize(text)
    applied: list[Correction] = []

    for index, token in enumerate(list(tokens)):
        if not engine.is_misspelled(token):
            continue
        corrections = engine.suggest([token.normalized])
        try:
            replacement = resolve_choice(corrections, chooser(index, token, corrections))
        except InvalidSelection as exc:
            logger.warning("selection rejected token=%s index=%s error=%s", token.raw, index, exc)
            continue
        if replacement is None:
            continue

        tokens = replace_token(tokens, index, replacement)
        applied.append(Correction(token.normalized, replacement))

    if not applied:
        return CorrectionOutcome(text=text, changed=False)
    return CorrectionOutcome(text=reassemble(tokens), changed=True, applied=applied)


def replace_word(original_text: str, old_word: str, new_word: str) -> str:
    """Replace the first raw occurrence of old_word anywhere in the text."""
    if not old_word:
        return original_text
    return original_text.replace(old_word, new_word, 1)
