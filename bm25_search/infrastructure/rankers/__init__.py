"""Ranker implementations."""
from .okapi_bm25 import OkapiBM25Ranker

__all__ = ["OkapiBM25Ranker"]
