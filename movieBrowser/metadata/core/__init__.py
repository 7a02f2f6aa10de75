from movieBrowser.metadata.core.models import (
    MovieItem, MovieCollection, ErrorKind,
    Pending, Success, Failure, FetchResult,
    Closed, Open, OverlayState,
)
from movieBrowser.metadata.core.errors import (
    MovieBrowserError, InvalidState, IndexOutOfRange, FetchError,
)

__all__ = [
    "MovieItem", "MovieCollection", "ErrorKind",
    "Pending", "Success", "Failure", "FetchResult",
    "Closed", "Open", "OverlayState",
    "MovieBrowserError", "InvalidState", "IndexOutOfRange", "FetchError",
]
