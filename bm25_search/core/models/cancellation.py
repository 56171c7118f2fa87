"""Cooperative cancellation."""
import threading

from ..exceptions import SearchCancelled


class CancellationToken:
    """Request-scoped cancellation flag.

    Safe to trigger from another thread or a signal handler; checked by the
    search pipeline before each root, between directory entries and before
    each file read.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise SearchCancelled if the token was triggered."""
        if self._event.is_set():
            raise SearchCancelled()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled})"
