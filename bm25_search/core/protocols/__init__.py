"""Protocol interfaces for dependency injection."""
from .loader import ContentLoaderProtocol
from .ranker import RankerProtocol

__all__ = [
    "ContentLoaderProtocol",
    "RankerProtocol",
]
