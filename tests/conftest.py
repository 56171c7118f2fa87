"""
Shared fixtures: a small workspace tree and pipeline builders.
"""

from pathlib import Path

import numpy as np
import pytest

from bm25_search.core.services.chunk_service import Chunker
from bm25_search.core.services.result_selector import ResultSelector
from bm25_search.core.services.search_service import SearchService
from bm25_search.core.services.workspace_guard import WorkspaceGuard
from bm25_search.infrastructure.document_loaders.text_loader import TextLoader
from bm25_search.infrastructure.file_system.enumerator import FileEnumerator
from bm25_search.infrastructure.rankers.okapi_bm25 import OkapiBM25Ranker
from bm25_search.presentation.tool import BM25SearchTool


class SubstringRanker:
    """Fake ranker: 1.0 when the joined query occurs in the chunk, else 0."""

    def __init__(self):
        self.calls = 0

    def score(self, documents, query_tokens):
        self.calls += 1
        needle = " ".join(query_tokens)
        return np.array([1.0 if needle in doc.lower() else 0.0 for doc in documents])


def build_service(target_dir, directories=None, ranker=None, loader=None, guard=None):
    guard = guard or WorkspaceGuard(str(target_dir), directories)
    return SearchService(
        guard=guard,
        enumerator=FileEnumerator(),
        chunker=Chunker(loader or TextLoader()),
        ranker=ranker or OkapiBM25Ranker(),
        selector=ResultSelector(),
    )


def build_tool(target_dir, directories=None, ranker=None, loader=None):
    guard = WorkspaceGuard(str(target_dir), directories)
    service = build_service(target_dir, ranker=ranker, loader=loader, guard=guard)
    return BM25SearchTool(search_service=service, guard=guard)


def write_lines(path: Path, count: int) -> None:
    path.write_text("\n".join(f"line {i}" for i in range(1, count + 1)))


@pytest.fixture
def workspace(tmp_path):
    """fileA.txt, fileB.js and sub/fileC.txt."""
    root = tmp_path / "workspace"
    root.mkdir()
    (root / "fileA.txt").write_text("the quick brown fox\njumps over the lazy dog")
    (root / "fileB.js").write_text(
        'const foo = "bar";\nfunction baz() { return "the quick brown fox"; }'
    )
    (root / "sub").mkdir()
    (root / "sub" / "fileC.txt").write_text("the lazy dog is brown")
    return root


@pytest.fixture
def tool(workspace):
    return build_tool(workspace)
