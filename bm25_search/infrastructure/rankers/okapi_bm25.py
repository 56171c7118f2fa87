import logging
import math

import numpy as np
from rank_bm25 import BM25Okapi

from bm25_search.utils.text import tokenize

logger = logging.getLogger(__name__)


class _PositiveIdfBM25(BM25Okapi):
    """BM25Okapi with the Lucene IDF, ln(1 + (N - df + 0.5) / (df + 0.5)) > 0."""

    def _calc_idf(self, nd):
        for word, freq in nd.items():
            self.idf[word] = math.log(
                1 + (self.corpus_size - freq + 0.5) / (freq + 0.5)
            )


class OkapiBM25Ranker:
    """Ranker scoring chunks with Okapi BM25 over the request's corpus."""

    def __init__(self, k1: float = 1.2, b: float = 0.75):
        """Initialize ranker.

        Args:
            k1: Term frequency saturation.
            b: Document length normalization.
        """
        self._k1 = k1
        self._b = b

    def score(self, documents: list[str], query_tokens: list[str]) -> np.ndarray:
        """Score documents against query tokens.

        Args:
            documents: Chunk texts.
            query_tokens: Tokenized query.

        Returns:
            Scores parallel to documents. Zero for documents without any
            query token.
        """
        if not documents:
            return np.zeros(0)

        corpus = [tokenize(doc) for doc in documents]
        if not query_tokens or not any(corpus):
            return np.zeros(len(documents))

        model = _PositiveIdfBM25(corpus, k1=self._k1, b=self._b)
        scores = model.get_scores(query_tokens)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"BM25: {len(documents)} docs, avgdl={model.avgdl:.1f}, "
                f"max={scores.max():.4f}"
            )

        return scores
