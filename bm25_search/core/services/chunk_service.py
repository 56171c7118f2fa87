"""Chunk service - line window splitting."""

from pathlib import Path
from typing import Iterator

from bm25_search.utils.paths import relative_display_path
from bm25_search.utils.text import split_lines

from ..exceptions import InvalidParameters
from ..models.chunk import Chunk
from ..protocols.loader import ContentLoaderProtocol


def chunk_windows(
    line_count: int, chunk_size: int, overlap: int
) -> Iterator[tuple[int, int]]:
    """Yield 1-based inclusive (start, end) line windows.

    Windows start at 1, 1 + (size - overlap), ... and the last one ends at
    line_count, so it may be shorter than chunk_size.

    Args:
        line_count: Number of lines in the file.
        chunk_size: Lines per window.
        overlap: Lines shared by consecutive windows.

    Raises:
        InvalidParameters: chunk_size < 1 or overlap outside [0, chunk_size).
    """
    if chunk_size < 1:
        raise InvalidParameters(f"chunk_size must be a positive integer, got {chunk_size}")
    if not 0 <= overlap < chunk_size:
        raise InvalidParameters(
            f"overlap must be in [0, {chunk_size}), got {overlap}"
        )

    step = chunk_size - overlap
    start = 0
    while start < line_count:
        end = min(start + chunk_size, line_count)
        yield start + 1, end
        if end == line_count:
            break
        start += step


class Chunker:
    """Turns files into overlapping line chunks."""

    def __init__(self, loader: ContentLoaderProtocol):
        self._loader = loader

    @staticmethod
    def chunk_text(
        text: str, file_path: str, chunk_size: int, overlap: int
    ) -> list[Chunk]:
        """Split text into chunks.

        Args:
            text: Full file content.
            file_path: Path reported for every chunk.
            chunk_size: Lines per chunk.
            overlap: Lines shared by consecutive chunks.

        Returns:
            Chunks in line order. Empty for text without lines.
        """
        lines = split_lines(text)
        return [
            Chunk(
                file_path=file_path,
                start_line=start,
                end_line=end,
                content="\n".join(lines[start - 1 : end]),
            )
            for start, end in chunk_windows(len(lines), chunk_size, overlap)
        ]

    def chunk_file(
        self, file_path: Path, root: str, chunk_size: int, overlap: int
    ) -> list[Chunk]:
        """Read a file and split it into chunks named relative to root.

        Raises:
            OSError: File could not be read.
        """
        text = self._loader.load(file_path)
        return self.chunk_text(
            text, relative_display_path(str(file_path), root), chunk_size, overlap
        )
