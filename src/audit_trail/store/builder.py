"""Build version records from consecutive snapshots."""

import uuid
from datetime import datetime

from audit_trail.diff.differ import diff_tokens
from audit_trail.diff.tokenizer import tokenize
from audit_trail.errors import ValidationError
from audit_trail.models.version import Version

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def code_unit_length(text: str) -> int:
    """Length of text in UTF-16 code units, without any normalization."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a local time as YYYY-MM-DD HH:MM."""
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


def validate_content(content: object) -> str:
    """Return content if it can be saved, else raise ValidationError.

    Content must be a str that encodes as UTF-8, so lone surrogates are
    rejected before they reach the JSON history.
    """
    if not isinstance(content, str):
        raise ValidationError(f"content must be a string, got {type(content).__name__}")
    try:
        content.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValidationError(
            f"content contains an unpaired surrogate at position {e.start}"
        ) from e
    return content


def build_version(
    previous_content: str | None,
    new_content: object,
    *,
    now: datetime | None = None,
) -> Version:
    """Build the record for new_content diffed against previous_content.

    previous_content is None for the first save ever and is then treated as
    empty text.
    """
    content = validate_content(new_content)
    old_text = previous_content or ""

    word_diff = diff_tokens(tokenize(old_text), tokenize(content))
    return Version(
        id=str(uuid.uuid4()),
        timestamp=format_timestamp(now),
        added_words=word_diff.added_words,
        removed_words=word_diff.removed_words,
        old_length=code_unit_length(old_text),
        new_length=code_unit_length(content),
        old_word_count=word_diff.old_word_count,
        new_word_count=word_diff.new_word_count,
        content=content,
    )
