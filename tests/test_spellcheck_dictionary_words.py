from pathlib import Path

import pytest

from spellfix.spellcheck.dictionary import Dictionary, SourceUnavailable
from spellfix.spellcheck.engine import SpellCheckerEngine


def test_load_normalizes_and_deduplicates_words() -> None:
    dictionary = Dictionary.load("Hello world\nhello, WORLD 42")

    assert len(dictionary) == 2
    assert dictionary.contains("hello")
    assert "world" in dictionary
    assert list(dictionary) == ["hello", "world"]


def test_insert_reports_whether_the_word_was_new() -> None:
    dictionary = Dictionary.load("cat")

    assert dictionary.insert("Dog") is True
    assert dictionary.insert("dog") is False
    assert dictionary.insert("CAT") is False
    assert len(dictionary) == 2


def test_insert_rejects_words_without_letters() -> None:
    with pytest.raises(ValueError):
        Dictionary().insert("123")


def test_from_file_reads_whitespace_separated_words(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("apple banana\ncherry\n\n  date\n")

    dictionary = Dictionary.from_file(path)

    assert list(dictionary) == ["apple", "banana", "cherry", "date"]


def test_from_file_missing_source_raises_source_unavailable(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable):
        Dictionary.from_file(tmp_path / "missing.txt")


def test_engine_load_dictionary_recovers_with_empty_dictionary(tmp_path: Path) -> None:
    engine = SpellCheckerEngine(Dictionary.load("stale words"))

    assert engine.load_dictionary(tmp_path / "missing.txt") is False
    assert len(engine.dictionary) == 0
