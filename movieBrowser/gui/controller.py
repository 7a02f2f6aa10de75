"""gui.controller
FetchController: one asynchronous load of the movie list per instance.

The request runs on a worker QThread; the outcome is handed back through a
queued signal so that `current_result()`, `result_changed` and every
registered callback are only ever touched on the UI thread.
"""

from __future__ import annotations
from typing import Callable, List

from PySide6.QtCore import QObject, QThread, Signal, Slot

from movieBrowser.settings import MOVIE_LIST_ENDPOINT
from movieBrowser.utils import log_debug
from movieBrowser.metadata.core.models import Failure, FetchResult, Pending, Success
from movieBrowser.metadata.core.errors import InvalidState
from movieBrowser.gui.workers import Decode, Fetch, _FetchWorker

ResultCallback = Callable[[FetchResult], None]


class FetchController(QObject):
    result_changed = Signal(object)          # fired once, leaving Pending

    def __init__(
        self,
        fetch: Fetch,
        decode: Decode,
        endpoint: str = MOVIE_LIST_ENDPOINT,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._fetch    = fetch
        self._decode   = decode
        self.endpoint  = endpoint
        self._result: FetchResult = Pending()
        self._callbacks: List[ResultCallback] = []
        self._started  = False
        self._thread: QThread | None = None
        self._worker: _FetchWorker | None = None

    # ------------------------------------------------------------------
    def start(self) -> None:
        """Kick off the fetch; returns immediately. Only one call allowed."""
        if self._started:
            raise InvalidState("FetchController.start() may only be called once")
        self._started = True
        log_debug(f"fetch started: {self.endpoint}")

        thr    = QThread(self)
        worker = _FetchWorker(self._fetch, self._decode, self.endpoint)
        worker.moveToThread(thr)

        worker.finished.connect(self._on_finished)     # queued → UI thread
        worker.finished.connect(thr.quit)
        thr.started.connect(worker.run)

        self._thread, self._worker = thr, worker
        thr.start()

    def is_started(self) -> bool:
        return self._started

    def current_result(self) -> FetchResult:
        return self._result

    def on_result_changed(self, callback: ResultCallback) -> None:
        """
        Register a single-shot *callback(result)*.

        Runs once when the fetch leaves Pending, or right away if it
        already has.
        """
        if isinstance(self._result, Pending):
            self._callbacks.append(callback)
        else:
            callback(self._result)

    def wait(self, msecs: int = -1) -> bool:
        """
        Block until the worker thread exits. Does not cancel the request.

        Never call this from a UI handler; `main()` runs it on
        ``QApplication.aboutToQuit`` once the window is gone.
        """
        if self._thread is None:
            return True
        self._thread.quit()          # takes effect once run() returns
        return self._thread.wait() if msecs < 0 else self._thread.wait(msecs)

    # ------------------------------------------------------------------
    @Slot(object)
    def _on_finished(self, result: FetchResult) -> None:
        if not isinstance(self._result, Pending):
            return
        self._result = result

        if isinstance(result, Failure):
            log_debug(f"fetch failed ({result.kind.value}): {result.message}")
        elif isinstance(result, Success):
            log_debug(f"fetch complete ({len(result.movies)} movies)")

        self.result_changed.emit(result)
        callbacks, self._callbacks = self._callbacks, []
        for cb in callbacks:
            # each subscriber runs even if an earlier one raised
            try:
                cb(result)
            except Exception as e:
                log_debug(f"result callback {cb!r} raised: {e!r}")
