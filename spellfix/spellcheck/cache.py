from __future__ import annotations

import threading


class SuggestionCache:
    """Misspelled word -> first suggestion found for it.

    An entry is never replaced; only purge() removes it.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def lookup(self, word: str) -> str | None:
        return self._entries.get(word)

    def store(self, word: str, suggestion: str) -> bool:
        with self._lock:
            if word in self._entries:
                return False
            self._entries[word] = suggestion
            return True

    def purge(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)
