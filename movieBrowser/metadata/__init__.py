"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – MovieItem, result / overlay variants, error types
* api_clients – TMDb client (fetch + decode)
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieBrowser.metadata.core.models import (
    MovieItem, ErrorKind, Pending, Success, Failure, Closed, Open,
)
from movieBrowser.metadata.core.errors import (
    MovieBrowserError, InvalidState, IndexOutOfRange, FetchError,
)

# ── API client ────────────────────────────────────────────────────────────
from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient

__all__ = [
    "MovieItem", "ErrorKind",
    "Pending", "Success", "Failure", "Closed", "Open",
    "MovieBrowserError", "InvalidState", "IndexOutOfRange", "FetchError",
    "TMDBClient",
]
