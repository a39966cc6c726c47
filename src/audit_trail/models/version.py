"""Version record models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class WordDiff(BaseModel):
    """Distinct-word differences between two token sequences."""

    model_config = ConfigDict(frozen=True)

    added_words: tuple[str, ...] = ()
    removed_words: tuple[str, ...] = ()
    old_word_count: int = Field(default=0, ge=0)
    new_word_count: int = Field(default=0, ge=0)


class Version(BaseModel):
    """An immutable snapshot of the content plus its diff against the previous one.

    Serialized with camelCase keys (``addedWords``, ``oldWordCount``, ...);
    either spelling is accepted on input.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    timestamp: str
    added_words: tuple[str, ...] = ()
    removed_words: tuple[str, ...] = ()
    old_length: int = Field(ge=0)
    new_length: int = Field(ge=0)
    old_word_count: int = Field(ge=0)
    new_word_count: int = Field(ge=0)
    content: str

    @model_validator(mode="after")
    def _check_disjoint(self) -> "Version":
        overlap = set(self.added_words) & set(self.removed_words)
        if overlap:
            raise ValueError(f"words both added and removed: {sorted(overlap)}")
        return self
