"""Chunk and search result domain models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..exceptions import InvalidParameters
from .cancellation import CancellationToken

DEFAULT_CHUNK_SIZE = 100
DEFAULT_OVERLAP = 20


@dataclass(frozen=True)
class Chunk:
    """Line window of one file, the unit of ranking."""
    file_path: str  # relative to the search root, or base name
    start_line: int  # 1-based, inclusive
    end_line: int  # 1-based, inclusive
    content: str

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass(frozen=True)
class ScoredChunk:
    """Chunk paired with its relevance score."""
    chunk: Chunk
    score: float


@dataclass(frozen=True)
class SearchRequest:
    """One search invocation."""
    query: str
    path: Optional[str] = None
    include: Optional[str] = None
    chunk_size: int = DEFAULT_CHUNK_SIZE
    overlap: int = DEFAULT_OVERLAP
    cancel_token: CancellationToken = field(
        default_factory=CancellationToken, compare=False
    )

    def __post_init__(self) -> None:
        if not self.query:
            raise InvalidParameters("query must not be empty")
        if self.chunk_size < 1:
            raise InvalidParameters(
                f"chunk_size must be a positive integer, got {self.chunk_size}"
            )
        if self.overlap < 0:
            raise InvalidParameters(
                f"overlap must not be negative, got {self.overlap}"
            )
        if self.overlap >= self.chunk_size:
            raise InvalidParameters(
                f"overlap ({self.overlap}) must be less than chunk_size ({self.chunk_size})"
            )


class SearchOutcome(Enum):
    """Kind of search result."""
    FOUND = "found"
    NO_FILES = "no_files"  # corpus was empty
    NO_MATCHES = "no_matches"  # corpus non-empty, nothing scored above zero


@dataclass
class SearchResult:
    """Final output of one search request."""
    outcome: SearchOutcome
    llm_content: str
    summary: str
    matches: list[ScoredChunk] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.matches)
