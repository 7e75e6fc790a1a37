"""
Chunk and splitter configuration models.
"""

from typing import Any, Callable, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .separators import DEFAULT_SEPARATORS, Separator, as_separator
from .sizing import count_chars


class Chunk(NamedTuple):
    """One emitted unit of output text.

    ``cursor`` is the running sum of the character lengths of the chunks
    emitted before this one. It approximates the start offset in the source
    and drifts once whitespace or separators are trimmed during joining.
    """

    text: str
    cursor: int
    metadata: Optional[Any] = None


class SplitterConfig(BaseModel):
    """Immutable sizing and separator configuration shared by all strategies."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    chunk_size: int = Field(1024, gt=0, description="Upper bound per chunk, in size-model units")
    chunk_overlap: int = Field(64, ge=0, description="Overlap budget between consecutive chunks")
    separators: Tuple[Separator, ...] = Field(
        DEFAULT_SEPARATORS, description="Split points, most preferred first"
    )
    token_counter: Callable[[str], int] = Field(
        count_chars, description="Size model; defaults to character count"
    )

    @field_validator("separators", mode="before")
    @classmethod
    def _coerce_separators(cls, value: Any) -> Tuple[Separator, ...]:
        if isinstance(value, (str, Separator)):
            value = [value]
        return tuple(as_separator(item) for item in value)

    @model_validator(mode="after")
    def _check_overlap(self) -> "SplitterConfig":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self

    def size(self, text: str) -> int:
        return self.token_counter(text)
