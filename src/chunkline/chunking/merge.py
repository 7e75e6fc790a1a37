"""
Greedy size-bounded packing of segments into chunks with overlap.
"""

from typing import List, NamedTuple, Optional

from .models import SplitterConfig
from .separators import Separator
from .tables import holds_table


class _Piece(NamedTuple):
    text: str
    size: int
    is_table: bool


def joined(pieces: List[str], separator: Separator) -> Optional[str]:
    """Join pieces with the separator's join token; None when nothing is left."""
    text = separator.join_token.join(pieces).strip()
    return text or None


def merged(splits: List[str], separator: Separator, config: SplitterConfig) -> List[str]:
    """
    Pack ``splits`` into chunks of at most ``config.chunk_size`` units.

    When a chunk is emitted, the segments at its tail are carried into the
    next chunk while their combined size stays within ``chunk_overlap`` and
    the incoming segment still fits. Overlap is counted in size-model units,
    so with a custom token counter its width in characters is approximate.

    Segments holding a pipe table are never carried as overlap. A table
    segment that would overflow the window is emitted on its own. Oversized
    single segments are emitted as they are.

    Args:
        splits: Ordered segments, each ideally below ``chunk_size``
        separator: Separator the segments were split on (used to rejoin)
        config: Active splitter configuration

    Returns:
        Ordered list of non-empty chunk strings
    """
    chunk_size = config.chunk_size
    chunk_overlap = config.chunk_overlap

    results: List[str] = []
    window: List[_Piece] = []
    total = 0

    def emit(pieces: List[_Piece]) -> None:
        text = joined([p.text for p in pieces], separator)
        if text is not None:
            results.append(text)

    for split in splits:
        piece = _Piece(split, config.size(split), holds_table(split))

        if piece.is_table and total + piece.size >= chunk_size:
            # Table would overflow the window: give it a chunk of its own
            if window:
                emit(window)
            emit([piece])
            window = []
            total = 0
            continue

        if total + piece.size >= chunk_size and window:
            emit(window)

            while window and (
                total > chunk_overlap
                or (total + piece.size >= chunk_size and total > 0)
            ):
                total -= window.pop(0).size

            # Tables are emitted exactly once
            while any(p.is_table for p in window):
                total -= window.pop(0).size

        window.append(piece)
        total += piece.size

    if window:
        emit(window)

    return results
