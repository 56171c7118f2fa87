"""Workspace guard - search path validation and containment."""

import logging
import os
import stat
from typing import Optional, Sequence

from ..exceptions import NotADirectory, OutOfWorkspace, PathAccessError, PathNotFound

logger = logging.getLogger(__name__)


class WorkspaceGuard:
    """Resolves caller paths and keeps them inside the workspace roots."""

    def __init__(self, target_dir: str, directories: Optional[Sequence[str]] = None):
        """Initialize guard.

        Args:
            target_dir: Base directory relative paths are resolved against.
            directories: Permitted workspace roots. Defaults to target_dir.
        """
        self._target_dir = os.path.abspath(target_dir)
        roots = directories or [self._target_dir]
        self._directories = list(
            dict.fromkeys(os.path.realpath(os.path.abspath(d)) for d in roots)
        )

    @property
    def target_dir(self) -> str:
        return self._target_dir

    @property
    def directories(self) -> list[str]:
        return list(self._directories)

    @staticmethod
    def _is_within(path: str, root: str) -> bool:
        try:
            return os.path.commonpath([path, root]) == root
        except ValueError:
            return False

    def is_path_within_workspace(self, path: str) -> bool:
        """Check whether path, with symlinks resolved, lies under a root."""
        resolved = os.path.realpath(os.path.abspath(path))
        return any(self._is_within(resolved, root) for root in self._directories)

    def resolve_search_dir(self, path: Optional[str]) -> Optional[str]:
        """Resolve and validate a search directory.

        Args:
            path: Directory relative to the target dir, or absolute.

        Returns:
            Absolute directory, or None when no path was given.

        Raises:
            OutOfWorkspace: Path escapes every workspace root.
            PathNotFound: Path does not exist.
            NotADirectory: Path is not a directory.
            PathAccessError: Path could not be stat'ed or is malformed.
        """
        if not path:
            return None

        target = os.path.abspath(os.path.join(self._target_dir, path))
        try:
            within = self.is_path_within_workspace(target)
        except ValueError as e:
            # embedded null byte
            raise PathAccessError(target, e) from e
        if not within:
            raise OutOfWorkspace(path, self._directories)

        try:
            st = os.stat(target)
        except FileNotFoundError as e:
            raise PathNotFound(target) from e
        except (OSError, ValueError) as e:
            raise PathAccessError(target, e) from e

        if not stat.S_ISDIR(st.st_mode):
            raise NotADirectory(target)

        return target

    def search_directories(self, path: Optional[str]) -> list[str]:
        """Directories to search: the validated path, or every root."""
        resolved = self.resolve_search_dir(path)
        if resolved is None:
            return self.directories
        return [resolved]
