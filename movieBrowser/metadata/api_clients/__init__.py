"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST APIs.

No module-level client singleton here: constructing one needs an API key, so
`main()` builds it once and hands its `fetch` / `decode` to the controller.
"""

from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient

__all__ = ["TMDBClient"]
