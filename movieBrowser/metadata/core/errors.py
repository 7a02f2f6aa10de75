"""metadata.core.errors
Exception types shared by the client, the fetch controller and the list state.

Contract violations (`InvalidState`, `IndexOutOfRange`) are raised to the
caller. `FetchError` never leaves the fetch worker: it is folded into a
`Failure` result.
"""

from __future__ import annotations

from movieBrowser.metadata.core.models import ErrorKind


class MovieBrowserError(Exception):
    """Base class for every error raised by movieBrowser."""


class InvalidState(MovieBrowserError, RuntimeError):
    """An operation was called in a state that forbids it (e.g. a second `start()`)."""


class IndexOutOfRange(MovieBrowserError, IndexError):
    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"index {index} outside [0, {count})")
        self.index = index
        self.count = count


class FetchError(MovieBrowserError):
    """A network, server or decoding failure while loading the movie list."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.args[0]}"
