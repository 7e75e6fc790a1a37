"""Typed diagnostic events emitted while producing chunks."""

from enum import Enum
from typing import Callable

from pydantic import BaseModel, Field

from ..core.logging import log


class DiagnosticKind(str, Enum):
    """Kinds of chunk diagnostics."""

    SIZE_LIMIT_EXCEEDED = "size_limit_exceeded"


class ChunkDiagnostic(BaseModel):
    """A valid but noteworthy outcome for one emitted chunk."""

    kind: DiagnosticKind = Field(..., description="Diagnostic kind")
    chunk_index: int = Field(..., description="Position of the chunk in the output")
    cursor: int = Field(..., description="Cursor of the chunk")
    size: int = Field(..., description="Chunk size in size-model units")
    limit: int = Field(..., description="Configured chunk_size")
    preview: str = Field("", description="First characters of the chunk text")


DiagnosticSink = Callable[[ChunkDiagnostic], None]


def log_diagnostic(event: ChunkDiagnostic) -> None:
    """Default sink: log the diagnostic as a structured warning."""
    log.warning(
        f"chunk.{event.kind.value}",
        chunk_index=event.chunk_index,
        cursor=event.cursor,
        size=event.size,
        limit=event.limit,
        preview=event.preview,
    )
