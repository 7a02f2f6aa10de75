from __future__ import annotations

import json
from typing import Any

import requests

from movieBrowser.utils import log_debug, throttle
from movieBrowser.settings import (
    TMDB_API_KEY, TMDB_BASE_URL, TMDB_LANGUAGE, REQUEST_TIMEOUT,
)
from movieBrowser.metadata.core.models import ErrorKind, MovieCollection, MovieItem
from movieBrowser.metadata.core.errors import FetchError


class TMDBClient:
    """Thin wrapper around The Movie Database (TMDb) list endpoints."""
    BASE_URL = TMDB_BASE_URL

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        api_key: str | None = None,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.api_key = api_key or TMDB_API_KEY
        if not self.api_key:
            raise RuntimeError("No TMDb API key passed (set TMDB_API_KEY in secret.env)")
        self.session = session or requests.Session()
        self.timeout = timeout

    @throttle(min_delay=0.4)                 # ≈ 2.5 req/sec
    def _get(self, path: str, **params) -> requests.Response:
        params["api_key"] = self.api_key
        return self.session.get(f"{self.BASE_URL}{path}", params=params, timeout=self.timeout)

    # ------------------------------------------------------------------
    # Public – fetch / decode pair used by FetchController
    # ------------------------------------------------------------------
    def fetch(self, endpoint: str) -> bytes:
        """
        GET *endpoint* (e.g. ``/movie/popular``) and return the raw body.

        Raises
        ------
        FetchError
            ``NETWORK`` for transport failures (DNS, refused, timeout),
            ``SERVER`` for any HTTP status >= 400.
        """
        try:
            r = self._get(endpoint, language=TMDB_LANGUAGE, page=1)
        except requests.RequestException as e:
            raise FetchError(ErrorKind.NETWORK, str(e)) from e

        if r.status_code == 429:
            log_debug("TMDb rate limit reached")
        if r.status_code >= 400:
            raise FetchError(ErrorKind.SERVER, self._describe_error(r))

        log_debug(f"TMDb → {endpoint} returned {len(r.content)} bytes")
        return r.content

    @staticmethod
    def decode(raw: bytes) -> MovieCollection:
        """
        Turn a TMDb list payload ``{"page": 1, "results": [...]}`` into a
        MovieCollection, keeping the server's order.

        Raises
        ------
        FetchError
            ``DECODING`` when the body isn't JSON or an entry is malformed.
        """
        try:
            payload = json.loads(raw)
            results = payload["results"]
            if not isinstance(results, list):
                raise TypeError(f"'results' is {type(results).__name__}, expected list")
            return tuple(MovieItem.from_tmdb(m) for m in results)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise FetchError(ErrorKind.DECODING, f"bad movie list payload ({e!r})") from e

    def fetch_image(self, url: str) -> bytes:
        """Raw bytes of a poster on the TMDb image CDN (no API key, no throttle)."""
        r = self.session.get(url, timeout=self.timeout)
        r.raise_for_status()
        return r.content

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _describe_error(r: requests.Response) -> str:
        """Prefer TMDb's own ``status_message`` over the bare status code."""
        detail: Any = None
        try:
            detail = r.json().get("status_message")
        except (ValueError, AttributeError):
            pass
        msg = f"HTTP {r.status_code}"
        return f"{msg} – {detail}" if detail else msg
