"""Text normalization and word tokenization."""

import re
import unicodedata

# Combining Diacritical Marks block
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")

# ASCII word boundaries: apostrophes count as non-word characters at the edges
_WORD = re.compile(r"\b[a-z0-9']+\b", re.ASCII)


def normalize(text: str) -> str:
    """Decompose, strip combining diacritics, and lowercase."""
    decomposed = unicodedata.normalize("NFKD", text)
    return _COMBINING_MARKS.sub("", decomposed).lower()


def tokenize(text: str | None) -> list[str]:
    """Split text into normalized word tokens.

    Order is preserved and duplicates are kept; deduplication happens when
    token sequences are compared as sets.

    >>> tokenize("Café naïve!")
    ['cafe', 'naive']
    >>> tokenize("Don't stop, don't!")
    ["don't", 'stop', "don't"]
    """
    if not text:
        return []
    return _WORD.findall(normalize(text))
