"""Ranker protocol for dependency injection."""
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RankerProtocol(Protocol):
    """Protocol for corpus-wide relevance scoring."""

    def score(self, documents: list[str], query_tokens: list[str]) -> np.ndarray:
        """Score every document against the query.

        Corpus statistics are computed over ``documents`` only, so scores are
        comparable within one call and nowhere else.

        Args:
            documents: Chunk texts, in corpus order.
            query_tokens: Tokenized query.

        Returns:
            Array of scores parallel to ``documents``. A document containing
            none of the query tokens scores <= 0.
        """
        ...
