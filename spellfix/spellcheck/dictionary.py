from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from spellfix.spellcheck.text import normalize_word

logger = logging.getLogger(__name__)


class SourceUnavailable(OSError):
    """The word list could not be read."""


class Dictionary:
    """Known words, normalized at load and insert time.

    Iteration follows insertion order, which is the order suggestion scans see.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: dict[str, None] = {}
        self.load_words(words)

    @classmethod
    def load(cls, word_list: str | Iterable[str]) -> Dictionary:
        if isinstance(word_list, str):
            word_list = word_list.split()
        return cls(word_list)

    @classmethod
    def from_file(cls, path: str | Path) -> Dictionary:
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8", errors="ignore")
        except OSError as exc:
            raise SourceUnavailable(f"could not open dictionary {path}: {exc}") from exc
        dictionary = cls.load(raw)
        logger.info("dictionary loaded path=%s words=%s", path, len(dictionary))
        return dictionary

    def load_words(self, words: Iterable[str]) -> int:
        added = 0
        for raw in words:
            for token in raw.split():
                word = normalize_word(token)
                if word and word not in self._words:
                    self._words[word] = None
                    added += 1
        return added

    def contains(self, word: str) -> bool:
        return word in self._words

    def insert(self, word: str) -> bool:
        normalized = normalize_word(word)
        if not normalized:
            raise ValueError(f"{word!r} contains no letters")
        if normalized in self._words:
            return False
        self._words[normalized] = None
        return True

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)
