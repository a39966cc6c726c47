"""Tests for word tokenization."""

from audit_trail.diff.tokenizer import normalize, tokenize


def test_strips_diacritics_and_punctuation():
    assert tokenize("Café naïve!") == ["cafe", "naive"]


def test_empty_string():
    assert tokenize("") == []


def test_none():
    assert tokenize(None) == []


def test_whitespace_and_symbols_only():
    assert tokenize("  -- ... !? \n\t") == []


def test_lowercases():
    assert tokenize("Hello WORLD") == ["hello", "world"]


def test_keeps_duplicates_in_order():
    assert tokenize("b a b a") == ["b", "a", "b", "a"]


def test_inner_apostrophe_kept():
    assert tokenize("Don't stop") == ["don't", "stop"]


def test_outer_apostrophes_dropped():
    assert tokenize("'quoted'") == ["quoted"]


def test_digits_are_words():
    assert tokenize("version 2 of 10") == ["version", "2", "of", "10"]


def test_hyphen_splits_words():
    assert tokenize("well-known") == ["well", "known"]


def test_non_latin_letters_are_separators():
    assert tokenize("hello мир world") == ["hello", "world"]


def test_compatibility_decomposition():
    # NFKD turns the "fi" ligature into plain letters
    assert tokenize("ﬁle") == ["file"]


def test_normalize_lowercases_plain_ascii():
    assert normalize("Plain ASCII") == "plain ascii"
