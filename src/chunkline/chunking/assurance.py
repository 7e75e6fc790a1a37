"""
Chunk assurance and quality reporting.
"""

import statistics
from typing import Dict, List, Sequence

from .models import Chunk, SplitterConfig
from .tables import detect_tables


def _stats(values: List[int]) -> Dict[str, int]:
    return {
        "min": min(values) if values else 0,
        "median": int(statistics.median(values)) if values else 0,
        "p95": int(statistics.quantiles(values, n=20)[18])
        if len(values) > 20
        else (max(values) if values else 0),
        "max": max(values) if values else 0,
        "total": sum(values),
    }


def build_chunk_assurance(
    text: str, chunks: Sequence[Chunk], config: SplitterConfig
) -> Dict:
    """
    Build an assurance report for the chunks produced from ``text``.

    Args:
        text: Source text the chunks were produced from
        chunks: Produced chunks, in order
        config: Configuration the chunks were produced with

    Returns:
        Assurance report dictionary
    """
    token_counts = []
    char_counts = []
    breaches = []

    for index, chunk in enumerate(chunks):
        size = config.size(chunk.text)
        token_counts.append(size)
        char_counts.append(len(chunk.text))

        if size > config.chunk_size:
            breaches.append(
                {
                    "index": index,
                    "cursor": chunk.cursor,
                    "token_count": size,
                    "char_count": len(chunk.text),
                }
            )

    tables = detect_tables(text)
    torn = [
        {"start": table.start, "end": table.end}
        for table in tables
        if not any(table.text in chunk.text for chunk in chunks)
    ]

    if torn:
        status = "FAIL"
    elif breaches:
        status = "WARN"
    else:
        status = "PASS"

    return {
        "tokenCap": {
            "chunkSize": config.chunk_size,
            "chunkOverlap": config.chunk_overlap,
        },
        "chunkCount": len(chunks),
        "tokenStats": _stats(token_counts),
        "charStats": _stats(char_counts),
        "breaches": {
            "count": len(breaches),
            "examples": breaches[:10],  # Limit examples
        },
        "tables": {
            "detected": len(tables),
            "intact": len(tables) - len(torn),
            "tornExamples": torn[:10],
        },
        "status": status,
    }
