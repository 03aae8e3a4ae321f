from __future__ import annotations

import string
from dataclasses import dataclass

PUNCTUATION = frozenset(string.punctuation)
ASCII_LETTERS = frozenset(string.ascii_letters)


def is_punctuation(ch: str) -> bool:
    return ch in PUNCTUATION


def normalize_word(token: str) -> str:
    """Keep ASCII letters only, lowercased. May return an empty string."""
    return "".join(ch.lower() for ch in token if ch in ASCII_LETTERS)


@dataclass(frozen=True)
class Token:
    raw: str

    @property
    def normalized(self) -> str:
        return normalize_word(self.raw)

    @property
    def is_punctuation(self) -> bool:
        return bool(self.raw) and is_punctuation(self.raw[0])


def tokenize(text: str) -> list[Token]:
    """Split text on whitespace, detaching one trailing punctuation mark per chunk.

    Only the final character is inspected: "end?!" becomes "end?" and "!",
    and punctuation inside a chunk ("don't", "e.g") stays attached. A chunk that
    is a lone mark yields an empty token before it so reassembly keeps its
    leading space.
    """
    tokens: list[Token] = []
    for chunk in (text or "").split():
        if is_punctuation(chunk[-1]):
            tokens.append(Token(chunk[:-1]))
            tokens.append(Token(chunk[-1]))
        else:
            tokens.append(Token(chunk))
    return tokens
