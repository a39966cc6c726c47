"""Word tokenization and distinct-word set comparison."""

from audit_trail.diff.differ import diff_tokens, diff_words
from audit_trail.diff.tokenizer import tokenize

__all__ = ["diff_tokens", "diff_words", "tokenize"]
