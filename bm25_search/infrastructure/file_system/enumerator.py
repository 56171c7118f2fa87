"""Lazy file discovery under a search root."""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from ...core.models.cancellation import CancellationToken
from .patterns import DEFAULT_INCLUDE, GlobMatcher

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_PATTERNS = (
    "**/.git/**",
    "**/node_modules/**",
    "**/bower_components/**",
    "**/.svn/**",
    "**/.hg/**",
)


class FileEnumerator:
    """Streams files under a root that match an include glob."""

    def __init__(self, ignore_patterns: tuple[str, ...] = DEFAULT_IGNORE_PATTERNS):
        """Initialize enumerator.

        Args:
            ignore_patterns: Globs for paths that are never yielded. Directories
                matching one are not traversed.
        """
        self._ignore = [GlobMatcher(p) for p in ignore_patterns]

    def _is_ignored(self, relative_path: str) -> bool:
        return any(m.matches(relative_path) for m in self._ignore)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory {error.filename}: {error}")

    def iter_files(
        self,
        root: str | Path,
        include: Optional[str] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> Iterator[Path]:
        """Yield absolute paths of matching files under root.

        Entries are visited in sorted order, so the sequence is deterministic
        for a fixed tree. Symlinked directories are not followed. Stops early,
        without raising, once the token is cancelled.

        Args:
            root: Absolute directory to search.
            include: Glob relative to root. Defaults to every file.
            cancel_token: Checked between directory entries.

        Yields:
            Absolute file paths.
        """
        root_path = Path(root)
        matcher = GlobMatcher(include or DEFAULT_INCLUDE)

        for dirpath, dirnames, filenames in os.walk(
            root_path, onerror=self._on_walk_error
        ):
            if cancel_token is not None and cancel_token.is_cancelled:
                logger.debug(f"Enumeration of {root_path} cancelled")
                return

            rel_dir = Path(dirpath).relative_to(root_path)
            dirnames[:] = sorted(
                d for d in dirnames
                if not self._is_ignored((rel_dir / d).as_posix() + "/")
            )

            for name in sorted(filenames):
                if cancel_token is not None and cancel_token.is_cancelled:
                    logger.debug(f"Enumeration of {root_path} cancelled")
                    return

                relative = (rel_dir / name).as_posix()
                if self._is_ignored(relative) or not matcher.matches(relative):
                    continue
                yield Path(dirpath) / name
