"""
Chunk producer: the public entry point that turns text into Chunk records.
"""

from typing import Any, List, Optional, Sequence

from ..obs.events import ChunkDiagnostic, DiagnosticKind, DiagnosticSink, log_diagnostic
from .models import Chunk, SplitterConfig
from .separators import SeparatorLike
from .sizing import TokenCounter, count_chars
from .strategies import STRATEGIES, CharacterStrategy, SplitStrategy

PREVIEW_CHARS = 60


class ChunkProducer:
    """Drive a splitting strategy and attach cursors and metadata.

    Instances hold no per-call state and can be reused for any number of
    inputs.
    """

    def __init__(
        self,
        strategy: SplitStrategy,
        on_diagnostic: Optional[DiagnosticSink] = None,
    ):
        self.strategy = strategy
        self.on_diagnostic = on_diagnostic or log_diagnostic

    @property
    def config(self) -> SplitterConfig:
        return self.strategy.config

    def produce(self, text: str, metadata: Optional[Any] = None) -> List[Chunk]:
        """
        Split ``text`` into chunks.

        Args:
            text: Input text
            metadata: Optional value attached unchanged to every chunk

        Returns:
            Ordered chunks. Empty or whitespace-only pieces are never emitted.
        """
        cursor = 0
        chunks: List[Chunk] = []

        for piece in self.strategy.split_into(text):
            if not piece or not piece.strip():
                continue

            chunk = Chunk(text=piece, cursor=cursor, metadata=metadata)

            size = self.config.size(piece)
            if size > self.config.chunk_size:
                self.on_diagnostic(
                    ChunkDiagnostic(
                        kind=DiagnosticKind.SIZE_LIMIT_EXCEEDED,
                        chunk_index=len(chunks),
                        cursor=cursor,
                        size=size,
                        limit=self.config.chunk_size,
                        preview=piece[:PREVIEW_CHARS],
                    )
                )

            chunks.append(chunk)
            cursor += len(piece)

        return chunks


def make_producer(
    strategy: str = "recursive",
    chunk_size: int = 1024,
    chunk_overlap: int = 64,
    separators: Optional[Sequence[SeparatorLike]] = None,
    separator: SeparatorLike = "\n\n",
    token_counter: TokenCounter = count_chars,
    on_diagnostic: Optional[DiagnosticSink] = None,
) -> ChunkProducer:
    """
    Build a ChunkProducer for a named strategy.

    Args:
        strategy: One of ``character``, ``recursive``, ``markdown``, ``sentence``
        chunk_size: Upper bound per chunk, in size-model units
        chunk_overlap: Overlap budget, must be smaller than ``chunk_size``
        separators: Priority list for the recursive strategy
        separator: Single separator for the character strategy
        token_counter: Size model (defaults to character count)
        on_diagnostic: Callback receiving size-limit diagnostics

    Returns:
        Configured ChunkProducer
    """
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown strategy: {strategy!r} (expected one of {', '.join(sorted(STRATEGIES))})"
        )

    options: dict = {
        "chunk_size": chunk_size,
        "chunk_overlap": chunk_overlap,
        "token_counter": token_counter,
    }
    if separators is not None:
        options["separators"] = separators
    config = SplitterConfig(**options)

    if strategy == CharacterStrategy.name:
        split_strategy: SplitStrategy = CharacterStrategy(config, separator=separator)
    else:
        split_strategy = STRATEGIES[strategy](config)

    return ChunkProducer(split_strategy, on_diagnostic=on_diagnostic)
