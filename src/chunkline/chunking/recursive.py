"""
Recursive multi-separator splitting.

Text is split on the most preferred separator that occurs in it. Pieces that
fit are packed by the merge engine; pieces that are still too large are split
again with the lower-priority separators only. Every recursive call receives
a strictly shorter separator list, so recursion depth is bounded by the
number of separators rather than by the size of the text.
"""

from typing import List, Sequence

from ..core.logging import log
from .merge import merged
from .models import SplitterConfig
from .separators import Separator
from .tables import TableSpan, detect_tables


def split_recursive(
    text: str, separators: Sequence[Separator], config: SplitterConfig
) -> List[str]:
    """
    Split ``text`` into chunk strings using ``separators`` in priority order.

    Args:
        text: Text to split
        separators: Remaining separators, most preferred first
        config: Active splitter configuration

    Returns:
        Ordered chunk strings. Pieces that no separator can divide are
        returned whole, even when larger than ``chunk_size``.
    """
    tables = detect_tables(text)
    if tables and config.size(text) >= config.chunk_size:
        return _split_around_tables(text, tables, separators, config)

    for index, separator in enumerate(separators):
        if separator.occurs_in(text):
            break
    else:
        # Nothing matches; keep the text whole instead of forcing a split
        return [text]

    remaining = separators[index + 1 :]
    splits = separator.split(text)

    if len(splits) == 1 and splits[0] == text:
        # Separator is present but divides nothing; fall through to the next one
        if not remaining:
            return [text]
        return split_recursive(text, remaining, config)

    results: List[str] = []
    good_splits: List[str] = []

    for split in splits:
        if config.size(split) < config.chunk_size:
            good_splits.append(split)
            continue

        if good_splits:
            results.extend(merged(good_splits, separator, config))
            good_splits = []

        if split != text and remaining:
            results.extend(split_recursive(split, remaining, config))
        else:
            # Cannot be divided further; keep as a single oversized chunk
            results.append(split)

    if good_splits:
        results.extend(merged(good_splits, separator, config))

    return results


def _split_around_tables(
    text: str,
    tables: List[TableSpan],
    separators: Sequence[Separator],
    config: SplitterConfig,
) -> List[str]:
    """Emit each table whole and split the prose around it."""
    log.debug("chunk.tables_isolated", tables=len(tables), chars=len(text))

    results: List[str] = []
    current_pos = 0

    for table in tables:
        if table.start > current_pos:
            before_table = text[current_pos : table.start].strip()
            if before_table:
                results.extend(split_recursive(before_table, separators, config))

        results.append(table.text)
        current_pos = table.end

    after_tables = text[current_pos:].strip()
    if after_tables:
        results.extend(split_recursive(after_tables, separators, config))

    return results
