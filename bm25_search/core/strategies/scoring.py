"""Result selection strategies applied after scoring."""

import logging
from abc import ABC, abstractmethod

from ..models.chunk import ScoredChunk

logger = logging.getLogger(__name__)


class SelectionStrategy(ABC):
    """Base class for result selection strategies."""

    @abstractmethod
    def apply(self, results: list[ScoredChunk]) -> list[ScoredChunk]:
        """Apply strategy to results."""
        ...


class PositiveScoreStrategy(SelectionStrategy):
    """Drop chunks that did not match (score <= 0)."""

    def apply(self, results: list[ScoredChunk]) -> list[ScoredChunk]:
        filtered = [r for r in results if r.score > 0]

        if len(filtered) < len(results):
            logger.debug(f"Positive score filter: {len(results)} → {len(filtered)}")

        return filtered


class ScoreOrderStrategy(SelectionStrategy):
    """Sort by score, highest first. Ties keep discovery order."""

    def apply(self, results: list[ScoredChunk]) -> list[ScoredChunk]:
        return sorted(results, key=lambda r: r.score, reverse=True)


class TopKStrategy(SelectionStrategy):
    """Keep the first top_k results."""

    def __init__(self, top_k: int = 10):
        """Initialize strategy.

        Args:
            top_k: Maximum number of results.
        """
        self._top_k = top_k

    def apply(self, results: list[ScoredChunk]) -> list[ScoredChunk]:
        return results[: self._top_k]
