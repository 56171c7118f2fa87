"""BM25 workspace search.

Ranks overlapping line windows of the files under one or more workspace
directories against a free-text query.
"""

__version__ = "1.0.0"
