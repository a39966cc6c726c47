"""Tests for version record construction."""

import uuid
from datetime import datetime

import pytest

from audit_trail.errors import ValidationError
from audit_trail.store.builder import (
    build_version,
    code_unit_length,
    format_timestamp,
    validate_content,
)


def test_first_version_against_empty():
    v = build_version(None, "Hello hello world")
    assert v.added_words == ("hello", "world")
    assert v.removed_words == ()
    assert v.old_length == 0
    assert v.new_length == 17
    assert v.old_word_count == 0
    assert v.new_word_count == 3
    assert v.content == "Hello hello world"


def test_diff_against_previous():
    v = build_version("a b c", "b c d")
    assert v.added_words == ("d",)
    assert v.removed_words == ("a",)
    assert v.old_length == 5
    assert v.new_length == 5


def test_id_is_uuid4():
    v = build_version(None, "x")
    assert uuid.UUID(v.id).version == 4


def test_ids_are_unique():
    ids = {build_version(None, "x").id for _ in range(50)}
    assert len(ids) == 50


def test_timestamp_format():
    v = build_version(None, "x", now=datetime(2024, 3, 7, 9, 5, 59))
    assert v.timestamp == "2024-03-07 09:05"


def test_format_timestamp_defaults_to_now():
    stamp = format_timestamp()
    assert datetime.strptime(stamp, "%Y-%m-%d %H:%M")


def test_length_not_normalized():
    # Combining acute accent counts as its own code unit
    decomposed = build_version("", "Café")
    precomposed = build_version("", "Café")
    assert decomposed.new_length == 5
    assert precomposed.new_length == 4
    assert decomposed.added_words == precomposed.added_words == ("cafe",)


def test_length_counts_utf16_code_units():
    assert code_unit_length("a\U0001f600") == 3
    assert code_unit_length("") == 0


@pytest.mark.parametrize("bad", [42, None, b"bytes", ["a"]])
def test_non_string_content_rejected(bad):
    with pytest.raises(ValidationError, match="content must be a string"):
        build_version("previous", bad)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        build_version(None, 3.14)


def test_length_counts_lone_surrogate():
    assert code_unit_length("abc\ud800") == 4


def test_lone_surrogate_rejected():
    with pytest.raises(ValidationError, match="unpaired surrogate at position 3"):
        build_version(None, "abc\ud800")


def test_validate_content_returns_text():
    assert validate_content("fine text") == "fine text"


def test_validate_content_rejects_non_string():
    with pytest.raises(ValidationError, match="got int"):
        validate_content(7)
