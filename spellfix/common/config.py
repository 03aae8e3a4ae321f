import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    dictionary_path: str = os.getenv("SPELLFIX_DICTIONARY_PATH", "words.txt")
    max_edit_distance: int = int(os.getenv("SPELLFIX_MAX_EDIT_DISTANCE", "2"))
    suggest_deadline_s: float | None = _optional_float("SPELLFIX_SUGGEST_DEADLINE_S")
    max_text_chars: int = int(os.getenv("SPELLFIX_MAX_TEXT_CHARS", "100000"))


settings = Settings()
