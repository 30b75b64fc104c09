"""Chunk models produced by the extraction engine."""
from chunkers.base import ANONYMOUS, Chunk, ChunkKind, Location

__all__ = ["ANONYMOUS", "Chunk", "ChunkKind", "Location", "summarize_by_kind"]


def summarize_by_kind(chunks: list[Chunk]) -> dict[str, int]:
    """Count chunks per kind, in order of first appearance."""
    summary: dict[str, int] = {}
    for chunk in chunks:
        summary.setdefault(chunk.kind.value, 0)
        summary[chunk.kind.value] += 1
    return summary
