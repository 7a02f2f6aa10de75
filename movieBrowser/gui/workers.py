from __future__ import annotations
from typing import Callable, List, Tuple

import requests
from PySide6.QtCore import QObject, Signal, Slot

from movieBrowser.utils import log_debug
from movieBrowser.metadata.core.models import ErrorKind, Failure, MovieCollection, Success
from movieBrowser.metadata.core.errors import FetchError

Fetch  = Callable[[str], bytes]
Decode = Callable[[bytes], MovieCollection]


def _failure(exc: Exception, default: ErrorKind) -> Failure:
    if isinstance(exc, FetchError):
        kind = exc.kind
    elif isinstance(exc, requests.HTTPError):
        kind = ErrorKind.SERVER
    else:
        kind = default
    return Failure(kind, str(exc) or exc.__class__.__name__)


# ───────────────────────── Worker skeleton ────────────────────────────────
class _FetchWorker(QObject):
    """Runs fetch + decode once on its QThread and reports a FetchResult."""
    finished = Signal(object)        # Success | Failure

    def __init__(self, fetch: Fetch, decode: Decode, endpoint: str):
        super().__init__()
        self._fetch   = fetch
        self._decode  = decode
        self.endpoint = endpoint

    @Slot()
    def run(self):
        try:
            raw = self._fetch(self.endpoint)
        except Exception as e:
            log_debug(f"fetch-worker error: {e}")
            self.finished.emit(_failure(e, ErrorKind.NETWORK))
            return

        try:
            movies = self._decode(raw)
        except Exception as e:
            log_debug(f"fetch-worker decode error: {e}")
            self.finished.emit(_failure(e, ErrorKind.DECODING))
            return

        self.finished.emit(Success(movies))


class _PosterWorker(QObject):
    """Downloads poster bytes for (row, url) jobs; decoding happens on the UI thread."""
    loaded   = Signal(int, object)       # row, raw image bytes
    finished = Signal()

    def __init__(self, fetch_image: Callable[[str], bytes], jobs: List[Tuple[int, str]]):
        super().__init__()
        self._fetch_image = fetch_image
        self.jobs = list(jobs)
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @Slot()
    def run(self):
        for row, url in self.jobs:
            if self._cancelled:
                log_debug("poster-worker cancelled")
                break
            try:
                data = self._fetch_image(url)
            except Exception as e:
                log_debug(f"poster-worker error ({url}): {e}")
                continue
            self.loaded.emit(row, data)
        self.finished.emit()
