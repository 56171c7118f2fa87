"""Result selector - filtering, ordering and report formatting."""

import logging
from typing import Sequence

from ..models.chunk import Chunk, ScoredChunk, SearchRequest
from ..strategies.scoring import (
    PositiveScoreStrategy,
    ScoreOrderStrategy,
    SelectionStrategy,
    TopKStrategy,
)

logger = logging.getLogger(__name__)

MAX_RESULTS = 10
RESULT_DELIMITER = "---"


def match_phrase(count: int) -> str:
    """``Found 1 match`` / ``Found N matches``."""
    return f"Found {count} {'match' if count == 1 else 'matches'}"


class ResultSelector:
    """Pairs chunks with scores and keeps the best ones."""

    def __init__(
        self,
        max_results: int = MAX_RESULTS,
        strategies: list[SelectionStrategy] | None = None,
    ):
        """Initialize selector.

        Args:
            max_results: Maximum number of results to keep.
            strategies: Custom selection chain, applied in order.
        """
        self._strategies = strategies or [
            PositiveScoreStrategy(),
            ScoreOrderStrategy(),
            TopKStrategy(max_results),
        ]

    def select(
        self, chunks: Sequence[Chunk], scores: Sequence[float]
    ) -> list[ScoredChunk]:
        """Select the top scoring chunks.

        Args:
            chunks: Corpus, in discovery order.
            scores: Scores parallel to chunks.

        Returns:
            Matches, highest score first.
        """
        if len(chunks) != len(scores):
            raise ValueError(
                f"Got {len(scores)} scores for {len(chunks)} chunks"
            )

        results = [
            ScoredChunk(chunk=chunk, score=float(score))
            for chunk, score in zip(chunks, scores)
        ]
        for strategy in self._strategies:
            results = strategy.apply(results)

        logger.debug(f"Selected {len(results)}/{len(chunks)} chunks")
        return results

    @staticmethod
    def _scope(request: SearchRequest) -> str:
        scope = ""
        if request.path:
            scope += f' in path "{request.path}"'
        if request.include:
            scope += f' (filter: "{request.include}")'
        return scope

    def no_files_message(self, request: SearchRequest) -> str:
        return (
            f'No files found to search for query "{request.query}"'
            f"{self._scope(request)}."
        )

    def no_matches_message(self, request: SearchRequest) -> str:
        return f'No matches found for query "{request.query}"{self._scope(request)}.'

    def summary(self, matches: Sequence[ScoredChunk]) -> str:
        return match_phrase(len(matches))

    def format_report(
        self, request: SearchRequest, matches: Sequence[ScoredChunk]
    ) -> str:
        """Format matches as a text report.

        Args:
            request: Originating request.
            matches: Selected matches.

        Returns:
            Report with one delimited block per match.
        """
        parts = [
            f'{match_phrase(len(matches))} for query "{request.query}":',
            RESULT_DELIMITER,
        ]
        for match in matches:
            chunk = match.chunk
            parts.append(
                f"File: {chunk.file_path} (Lines {chunk.start_line}-{chunk.end_line})"
            )
            parts.append(f"Score: {match.score:.4f}")
            parts.append("Content:")
            parts.append(chunk.content)
            parts.append(RESULT_DELIMITER)

        return "\n".join(parts).strip()
