from __future__ import annotations

import logging
import threading
import time
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Protocol, Sequence

from spellfix.spellcheck.cache import SuggestionCache
from spellfix.spellcheck.dictionary import Dictionary, SourceUnavailable
from spellfix.spellcheck.distance import levenshtein_distance
from spellfix.spellcheck.text import Token, normalize_word, tokenize

logger = logging.getLogger(__name__)

MAX_EDIT_DISTANCE = 2

DistanceFn = Callable[[str, str], int]


@dataclass(frozen=True)
class Correction:
    misspelled: str
    suggestion: str


@dataclass(frozen=True)
class CheckResult:
    misspelled: list[str] = field(default_factory=list)
    corrections: list[Correction] = field(default_factory=list)


class Suggester(Protocol):
    def suggest(self, misspelled: Iterable[str], dictionary: Dictionary) -> list[Correction]:
        ...


class BestMatchSuggester:
    """Deprecated: global closest match per word, no caching.

    Kept because its output differs from CachedFirstMatchSuggester whenever a
    closer entry appears later in the dictionary.
    """

    def __init__(self, max_distance: int = MAX_EDIT_DISTANCE, distance: DistanceFn = levenshtein_distance) -> None:
        warnings.warn(
            "BestMatchSuggester is deprecated; use CachedFirstMatchSuggester",
            DeprecationWarning,
            stacklevel=2,
        )
        self.max_distance = max_distance
        self.distance = distance

    def suggest(self, misspelled: Iterable[str], dictionary: Dictionary) -> list[Correction]:
        corrections: list[Correction] = []
        for word in misspelled:
            best_match = ""
            best_distance: int | None = None
            for entry in dictionary:
                distance = self.distance(word, entry)
                if best_distance is None or distance < best_distance:
                    best_distance = distance
                    best_match = entry

            if best_distance is not None and best_distance <= self.max_distance and best_match:
                corrections.append(Correction(word, best_match))
        return corrections


class CachedFirstMatchSuggester:
    """Accept the first dictionary entry within max_distance and remember it.

    This is not a closest-match search: the result depends on dictionary
    iteration order, and a cached answer survives later dictionary additions
    until the cache is purged.
    """

    def __init__(
        self,
        cache: SuggestionCache,
        max_distance: int = MAX_EDIT_DISTANCE,
        *,
        deadline_s: float | None = None,
        distance: DistanceFn = levenshtein_distance,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.cache = cache
        self.max_distance = max_distance
        self.deadline_s = deadline_s
        self.distance = distance
        self.clock = clock

    def suggest(self, misspelled: Iterable[str], dictionary: Dictionary) -> list[Correction]:
        corrections: list[Correction] = []
        for word in misspelled:
            cached = self.cache.lookup(word)
            if cached is not None:
                corrections.append(Correction(word, cached))
                continue

            match = self._scan(word, dictionary)
            if match is None:
                continue
            self.cache.store(word, match)
            # Another writer may have stored first; report what the cache holds.
            corrections.append(Correction(word, self.cache.lookup(word) or match))
        return corrections

    def _scan(self, word: str, dictionary: Dictionary) -> str | None:
        started = self.clock()
        for entry in dictionary:
            if self.deadline_s is not None and self.clock() - started > self.deadline_s:
                logger.warning("suggestion scan abandoned word=%s deadline_s=%s", word, self.deadline_s)
                return None
            if self.distance(word, entry) <= self.max_distance:
                return entry
        return None


class SpellCheckerEngine:
    def __init__(
        self,
        dictionary: Dictionary | None = None,
        *,
        cache: SuggestionCache | None = None,
        max_distance: int = MAX_EDIT_DISTANCE,
        deadline_s: float | None = None,
    ) -> None:
        self.dictionary = dictionary if dictionary is not None else Dictionary()
        self.cache = cache if cache is not None else SuggestionCache()
        self.max_distance = max_distance
        self.suggester: Suggester = CachedFirstMatchSuggester(
            self.cache, max_distance, deadline_s=deadline_s
        )
        self._lock = threading.RLock()

    def normalize_word(self, word: str) -> str:
        return normalize_word(word)

    def tokenize(self, text: str) -> list[Token]:
        return tokenize(text)

    def load_dictionary(self, path: str | Path) -> bool:
        try:
            dictionary = Dictionary.from_file(path)
        except SourceUnavailable as exc:
            logger.warning("dictionary unavailable path=%s error=%s", path, exc)
            dictionary = Dictionary()
            loaded = False
        else:
            loaded = True
        with self._lock:
            self.dictionary = dictionary
        return loaded

    def load_words(self, words: Iterable[str]) -> int:
        with self._lock:
            return self.dictionary.load_words(words)

    def insert(self, word: str) -> bool:
        with self._lock:
            added = self.dictionary.insert(word)
        logger.info("insert word=%s added=%s", word, added)
        return added

    def purge(self) -> int:
        purged = self.cache.purge()
        logger.info("cache purged entries=%s", purged)
        return purged

    def is_misspelled(self, token: Token | str) -> bool:
        raw = token.raw if isinstance(token, Token) else token
        word = normalize_word(raw)
        return bool(word) and word not in self.dictionary

    def classify(self, tokens: Sequence[Token | str]) -> list[str]:
        with self._lock:
            return [
                normalize_word(t.raw if isinstance(t, Token) else t)
                for t in tokens
                if self.is_misspelled(t)
            ]

    def suggest(self, misspelled: Iterable[str]) -> list[Correction]:
        with self._lock:
            return self.suggester.suggest(misspelled, self.dictionary)

    def best_match(self, misspelled: Iterable[str]) -> list[Correction]:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            suggester = BestMatchSuggester(self.max_distance)
        with self._lock:
            return suggester.suggest(misspelled, self.dictionary)

    def check_text(self, text: str) -> CheckResult:
        misspelled = self.classify(tokenize(text))
        return CheckResult(misspelled=misspelled, corrections=self.suggest(misspelled))