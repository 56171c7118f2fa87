"""Domain models."""
from .cancellation import CancellationToken
from .chunk import (
    Chunk,
    ScoredChunk,
    SearchOutcome,
    SearchRequest,
    SearchResult,
)
from .params import BM25SearchParams

__all__ = [
    "CancellationToken",
    "Chunk",
    "ScoredChunk",
    "SearchOutcome",
    "SearchRequest",
    "SearchResult",
    "BM25SearchParams",
]
