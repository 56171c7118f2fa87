"""Core search services."""
from .chunk_service import Chunker, chunk_windows
from .result_selector import ResultSelector
from .search_service import SearchService
from .workspace_guard import WorkspaceGuard

__all__ = [
    "Chunker",
    "chunk_windows",
    "ResultSelector",
    "SearchService",
    "WorkspaceGuard",
]
