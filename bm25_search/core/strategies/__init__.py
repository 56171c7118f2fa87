"""Result selection strategies."""
from .scoring import (
    PositiveScoreStrategy,
    ScoreOrderStrategy,
    SelectionStrategy,
    TopKStrategy,
)

__all__ = [
    "PositiveScoreStrategy",
    "ScoreOrderStrategy",
    "SelectionStrategy",
    "TopKStrategy",
]
