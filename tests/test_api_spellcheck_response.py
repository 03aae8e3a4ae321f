from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from spellfix.api import main
from spellfix.spellcheck.dictionary import Dictionary
from spellfix.spellcheck.engine import SpellCheckerEngine


def _client(monkeypatch, words: str = "hello world") -> TestClient:
    service = main.SpellcheckService(engine=SpellCheckerEngine(Dictionary.load(words)))
    monkeypatch.setattr(main, "spellcheck_service", service)
    return TestClient(main.app)


def test_check_returns_misspelled_words_and_corrections(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.get("/check", params={"q": "helo wrold!"})

    assert response.status_code == 200
    assert response.json() == {
        "misspelled": ["helo", "wrold"],
        "corrections": [
            {"misspelled": "helo", "suggestion": "hello"},
            {"misspelled": "wrold", "suggestion": "world"},
        ],
    }


def test_add_word_reports_duplicates(monkeypatch) -> None:
    client = _client(monkeypatch)

    assert client.post("/words", json={"word": "Python"}).json() == {"word": "python", "added": True}
    assert client.post("/words", json={"word": "python"}).json() == {"word": "python", "added": False}
    assert client.post("/words", json={"word": "123"}).status_code == 422
    assert client.get("/health").json() == {"words": 3, "cached": 0}


def test_purge_clears_cached_suggestions(monkeypatch) -> None:
    client = _client(monkeypatch)
    client.get("/check", params={"q": "helo"})

    assert client.get("/health").json()["cached"] == 1
    assert client.post("/cache/purge").json() == {"purged": 1}
    assert client.get("/health").json()["cached"] == 0


def test_correct_uses_explicit_choices_and_defaults_to_first(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.post("/correct", json={"text": "helo wrold!", "choices": {"0": 0}})

    assert response.status_code == 200
    assert response.json() == {
        "text": "helo world!",
        "changed": True,
        "applied": [{"misspelled": "wrold", "suggestion": "world"}],
    }


def test_service_load_missing_dictionary_serves_empty(tmp_path: Path) -> None:
    service = main.SpellcheckService(dictionary_path=tmp_path / "missing.txt")

    assert service.load() is False
    assert service.health().words == 0
