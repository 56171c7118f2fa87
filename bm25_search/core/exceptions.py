"""Search error hierarchy."""


class BM25SearchError(Exception):
    """Base class for all search errors."""


class OutOfWorkspace(BM25SearchError):
    """Resolved path escapes every permitted workspace root."""

    def __init__(self, attempted_path: str, directories: list[str]):
        self.attempted_path = attempted_path
        self.directories = list(directories)
        super().__init__(
            f'Path validation failed: Attempted path "{attempted_path}" resolves '
            f"outside the allowed workspace directories: {', '.join(self.directories)}"
        )


class NotADirectory(BM25SearchError):
    """Search path exists but is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path is not a directory: {path}")


class PathNotFound(BM25SearchError):
    """Search path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class PathAccessError(BM25SearchError):
    """Search path could not be stat'ed."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to access path stats for {path}: {cause}")


class InvalidParameters(BM25SearchError):
    """Request parameters failed validation."""


class SearchCancelled(BM25SearchError):
    """The request's cancellation token was triggered."""

    def __init__(self, message: str = "Search cancelled"):
        super().__init__(message)


class SearchOperationFailed(BM25SearchError):
    """Unexpected failure during enumeration, chunking or ranking."""
