"""File system traversal."""
from .enumerator import DEFAULT_IGNORE_PATTERNS, FileEnumerator
from .patterns import GlobMatcher, expand_braces

__all__ = ["DEFAULT_IGNORE_PATTERNS", "FileEnumerator", "GlobMatcher", "expand_braces"]
