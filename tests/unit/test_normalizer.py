import pytest

from local_rag.ingest.normalizer import normalize, tokenize


def test_normalize_lowercases_and_strips_punctuation() -> None:
    assert normalize("Hello, World!") == "hello, world"
    assert normalize("snake_case#tag") == "snake case tag"


def test_normalize_keeps_math_symbols() -> None:
    assert normalize("E = mc^2 (approx.)") == "e = mc^2 (approx.)"
    assert normalize("a*b/c - d: 1,5") == "a*b/c - d: 1,5"


def test_normalize_collapses_whitespace() -> None:
    assert normalize("  a\t\n  b  ") == "a b"


def test_normalize_keeps_unicode_letters_and_digits() -> None:
    assert normalize("Ünïcödé 123") == "ünïcödé 123"
    assert normalize("数学：1+1") == "数学 1+1"


def test_tokenize_splits_on_single_spaces() -> None:
    assert tokenize("x+y = 3") == ["x+y", "=", "3"]
    assert tokenize("The  Quick\nFox") == ["the", "quick", "fox"]


def test_tokenize_empty_and_symbol_only_text() -> None:
    assert tokenize("") == []
    assert tokenize("!!! ??? ###") == []


def test_non_string_input_fails_fast() -> None:
    with pytest.raises(TypeError):
        normalize(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        tokenize(42)  # type: ignore[arg-type]
