from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from movieBrowser.metadata.core.models import (
    Closed, FetchResult, MovieCollection, MovieItem, Open, OverlayState, Success,
)
from movieBrowser.metadata.core.errors import IndexOutOfRange
from movieBrowser.gui.controller import FetchController

_CLOSED = Closed()


class ListViewState(QObject):
    """
    Display-ready view of a FetchController's result plus the detail overlay.

    The overlay has two states, ``Closed`` and ``Open(index)``. Going from
    ``Open(i)`` to ``Open(j)`` is not guarded here; callers close the overlay
    before opening another item (MovieBrowserWindow always does).
    """
    overlay_changed = Signal(object)         # Closed | Open

    def __init__(self, controller: FetchController, parent: QObject | None = None):
        super().__init__(parent)
        self._controller = controller
        self._overlay: OverlayState = _CLOSED
        controller.on_result_changed(self._on_result)

    # ───────────────────────────── queries ──────────────────────────
    def _movies(self) -> MovieCollection:
        result = self._controller.current_result()
        return result.movies if isinstance(result, Success) else ()

    def item_count(self) -> int:
        return len(self._movies())

    def item_at(self, index: int) -> MovieItem:
        movies = self._movies()
        if not 0 <= index < len(movies):
            raise IndexOutOfRange(index, len(movies))
        return movies[index]

    def overlay_state(self) -> OverlayState:
        return self._overlay

    def overlay_item(self) -> MovieItem | None:
        """The item behind ``Open(index)``, or None when closed."""
        self.revalidate()
        if isinstance(self._overlay, Open):
            return self._movies()[self._overlay.index]
        return None

    # ───────────────────────────── overlay ──────────────────────────
    def open_overlay(self, index: int) -> None:
        """
        Open the overlay on *index*.

        Raises
        ------
        IndexOutOfRange
            Unless ``0 <= index < item_count()``; the overlay is left as is.
        """
        self.item_at(index)
        self._set_overlay(Open(index))

    def close_overlay(self) -> None:
        self._set_overlay(_CLOSED)

    def revalidate(self) -> None:
        """Close an open overlay whose index no longer fits the collection."""
        if isinstance(self._overlay, Open) and self._overlay.index >= self.item_count():
            self._set_overlay(_CLOSED)

    # ------------------------------------------------------------------
    def _set_overlay(self, state: OverlayState) -> None:
        if state == self._overlay:
            return
        self._overlay = state
        self.overlay_changed.emit(state)

    def _on_result(self, _result: FetchResult) -> None:
        self.revalidate()
