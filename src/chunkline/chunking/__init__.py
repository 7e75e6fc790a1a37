"""
Chunkline chunking package.

Recursive separator-aware splitting with size-bounded merging, overlap and
pipe-table protection.
"""

from .assurance import build_chunk_assurance
from .merge import joined, merged
from .models import Chunk, SplitterConfig
from .producer import ChunkProducer, make_producer
from .recursive import split_recursive
from .separators import (
    DEFAULT_SEPARATORS,
    MARKDOWN_SEPARATORS,
    LiteralSeparator,
    PatternSeparator,
    Separator,
    as_separator,
)
from .sizing import count_chars, resolve_counter, tiktoken_counter
from .strategies import (
    STRATEGIES,
    CharacterStrategy,
    MarkdownStrategy,
    RecursiveStrategy,
    SentenceStrategy,
    SplitStrategy,
)
from .tables import TableSpan, detect_tables

__all__ = [
    "Chunk",
    "ChunkProducer",
    "CharacterStrategy",
    "DEFAULT_SEPARATORS",
    "LiteralSeparator",
    "MARKDOWN_SEPARATORS",
    "MarkdownStrategy",
    "PatternSeparator",
    "RecursiveStrategy",
    "STRATEGIES",
    "SentenceStrategy",
    "Separator",
    "SplitStrategy",
    "SplitterConfig",
    "TableSpan",
    "as_separator",
    "build_chunk_assurance",
    "count_chars",
    "detect_tables",
    "joined",
    "make_producer",
    "merged",
    "resolve_counter",
    "split_recursive",
    "tiktoken_counter",
]
