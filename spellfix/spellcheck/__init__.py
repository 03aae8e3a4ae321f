from .cache import SuggestionCache
from .corrector import (
    CorrectionOutcome,
    InvalidSelection,
    accept_first,
    correct_text,
    reassemble,
    replace_token,
    replace_word,
    resolve_choice,
)
from .dictionary import Dictionary, SourceUnavailable
from .distance import levenshtein_distance
from .engine import (
    BestMatchSuggester,
    CachedFirstMatchSuggester,
    CheckResult,
    Correction,
    MAX_EDIT_DISTANCE,
    SpellCheckerEngine,
    Suggester,
)
from .text import Token, normalize_word, tokenize

__all__ = [
    "BestMatchSuggester",
    "CachedFirstMatchSuggester",
    "CheckResult",
    "Correction",
    "CorrectionOutcome",
    "Dictionary",
    "InvalidSelection",
    "MAX_EDIT_DISTANCE",
    "SourceUnavailable",
    "SpellCheckerEngine",
    "Suggester",
    "SuggestionCache",
    "Token",
    "accept_first",
    "correct_text",
    "levenshtein_distance",
    "normalize_word",
    "reassemble",
    "replace_token",
    "replace_word",
    "resolve_choice",
    "tokenize",
]
