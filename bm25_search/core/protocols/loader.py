"""Content loader protocol for dependency injection."""
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ContentLoaderProtocol(Protocol):
    """Protocol for reading a file's text."""

    def load(self, file_path: Path) -> str:
        """Read file content.

        Args:
            file_path: Absolute file path.

        Returns:
            File text.

        Raises:
            OSError: File cannot be read. FileNotFoundError when it vanished.
        """
        ...
