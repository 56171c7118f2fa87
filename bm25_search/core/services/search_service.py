"""Search service - gather, rank and select pipeline."""

import logging

from bm25_search.infrastructure.file_system.enumerator import FileEnumerator
from bm25_search.utils.text import tokenize

from ..exceptions import BM25SearchError, SearchOperationFailed
from ..models.chunk import Chunk, SearchOutcome, SearchRequest, SearchResult
from ..protocols.ranker import RankerProtocol
from .chunk_service import Chunker
from .result_selector import ResultSelector
from .workspace_guard import WorkspaceGuard

logger = logging.getLogger(__name__)


class SearchService:
    """BM25 search over the chunks of every matching workspace file."""

    def __init__(
        self,
        guard: WorkspaceGuard,
        enumerator: FileEnumerator,
        chunker: Chunker,
        ranker: RankerProtocol,
        selector: ResultSelector,
    ):
        """Initialize search service.

        Args:
            guard: Workspace path validation.
            enumerator: File discovery.
            chunker: File to chunk splitting.
            ranker: Corpus-wide scorer.
            selector: Filtering, ordering and formatting of results.
        """
        self._guard = guard
        self._enumerator = enumerator
        self._chunker = chunker
        self._ranker = ranker
        self._selector = selector

    def search(self, request: SearchRequest) -> SearchResult:
        """Run one search request.

        Args:
            request: Search request.

        Returns:
            Search result. NO_FILES when nothing was chunked, NO_MATCHES when
            nothing scored above zero.

        Raises:
            BM25SearchError: Bad search path, invalid parameters or
                cancellation.
            SearchOperationFailed: Any other failure.
        """
        try:
            roots = self._guard.search_directories(request.path)
            corpus = self.gather(request, roots)

            if not corpus:
                logger.info(f"Search: no files to search for '{request.query[:50]}'")
                return SearchResult(
                    outcome=SearchOutcome.NO_FILES,
                    llm_content=self._selector.no_files_message(request),
                    summary="No files found",
                )

            scores = self.rank(request, corpus)
            matches = self._selector.select(corpus, scores)

            logger.info(
                f"Search: {len(matches)} matches from {len(corpus)} chunks "
                f"for '{request.query[:50]}'"
            )

            if not matches:
                return SearchResult(
                    outcome=SearchOutcome.NO_MATCHES,
                    llm_content=self._selector.no_matches_message(request),
                    summary="No matches found",
                )

            return SearchResult(
                outcome=SearchOutcome.FOUND,
                llm_content=self._selector.format_report(request, matches),
                summary=self._selector.summary(matches),
                matches=matches,
            )

        except BM25SearchError:
            raise
        except Exception as e:
            raise SearchOperationFailed(str(e) or type(e).__name__) from e

    def gather(self, request: SearchRequest, roots: list[str]) -> list[Chunk]:
        """Chunk every matching file under roots.

        Raises:
            SearchCancelled: Token triggered; the partial corpus is dropped.
        """
        token = request.cancel_token
        corpus: list[Chunk] = []
        file_count = 0

        for root in roots:
            token.raise_if_cancelled()

            for file_path in self._enumerator.iter_files(root, request.include, token):
                token.raise_if_cancelled()
                try:
                    chunks = self._chunker.chunk_file(
                        file_path, root, request.chunk_size, request.overlap
                    )
                except FileNotFoundError:
                    continue
                except (OSError, UnicodeError) as e:
                    logger.debug(f"Could not read/process {file_path}: {e}")
                    continue

                file_count += 1
                corpus.extend(chunks)

        # enumeration stops quietly on cancel
        token.raise_if_cancelled()

        logger.debug(f"Gathered {len(corpus)} chunks from {file_count} files")
        return corpus

    def rank(self, request: SearchRequest, corpus: list[Chunk]) -> list[float]:
        """Score the whole corpus against the query."""
        if not corpus:
            return []
        query_tokens = tokenize(request.query)
        scores = self._ranker.score([c.content for c in corpus], query_tokens)
        return [float(s) for s in scores]
