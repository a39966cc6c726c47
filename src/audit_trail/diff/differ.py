"""Distinct-word set differences between two snapshots."""

from collections.abc import Sequence

from audit_trail.diff.tokenizer import tokenize
from audit_trail.models.version import WordDiff


def diff_tokens(old_tokens: Sequence[str], new_tokens: Sequence[str]) -> WordDiff:
    """Compare two token sequences as sets of distinct words.

    Added and removed words are sorted for deterministic output. Word counts
    are the raw sequence lengths, so repeated words raise the counts without
    ever showing up as added or removed.
    """
    old_set = set(old_tokens)
    new_set = set(new_tokens)
    return WordDiff(
        added_words=tuple(sorted(new_set - old_set)),
        removed_words=tuple(sorted(old_set - new_set)),
        old_word_count=len(old_tokens),
        new_word_count=len(new_tokens),
    )


def diff_words(old_text: str | None, new_text: str | None) -> WordDiff:
    """Tokenize both texts and diff them."""
    return diff_tokens(tokenize(old_text), tokenize(new_text))
