from spellfix.spellcheck.text import Token, normalize_word, tokenize


def test_normalize_word_keeps_letters_only_and_lowercases() -> None:
    assert normalize_word("Don't!") == "dont"
    assert normalize_word("HeLLo,") == "hello"
    assert normalize_word("e-mail2") == "email"


def test_normalize_word_returns_empty_for_tokens_without_letters() -> None:
    assert normalize_word("!") == ""
    assert normalize_word("1984") == ""
    assert normalize_word("") == ""


def test_tokenize_detaches_single_trailing_punctuation() -> None:
    tokens = tokenize("helo wrold!")

    assert [t.raw for t in tokens] == ["helo", "wrold", "!"]
    assert tokens[-1].is_punctuation
    assert tokens[-1].normalized == ""


def test_tokenize_only_looks_at_the_last_character() -> None:
    assert [t.raw for t in tokenize("end?! don't e.g")] == ["end?", "!", "don't", "e.g"]


def test_tokenize_collapses_whitespace_and_keeps_lone_punctuation() -> None:
    assert [t.raw for t in tokenize("  one \t two\n - three ")] == ["one", "two", "", "-", "three"]
    assert tokenize("") == []


def test_token_normalized_is_derived_from_raw() -> None:
    assert Token("Cat,").normalized == "cat"
