# gui/main_window.py
from __future__ import annotations
import html
from typing import Callable

from PySide6.QtCore    import Qt, Signal, Slot, QSize, QPropertyAnimation, QEasingCurve, QThread
from PySide6.QtGui     import QAction, QColor, QIcon, QPainter, QPixmap
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QListWidget, QListWidgetItem, QListView,
    QLabel, QVBoxLayout, QSizePolicy, QGraphicsOpacityEffect
)

from movieBrowser.settings import (
    ICON, WINDOW_TITLE, OVERLAY_ANIMATION_MS, OVERLAY_DIM_ALPHA,
)
from movieBrowser.utils              import log_debug, make_number_pixmap
from movieBrowser.metadata.core.models import Closed, Failure, FetchResult, Open, OverlayState
from movieBrowser.gui.controller     import FetchController
from movieBrowser.gui.list_state     import ListViewState
from movieBrowser.gui.info_view      import InfoView
from movieBrowser.gui.workers        import _PosterWorker


class _Backdrop(QWidget):
    """Dimmed full-window layer hosting the InfoView; a click on it dismisses."""
    clicked = Signal()

    def __init__(self, parent: QWidget):
        super().__init__(parent)
        self.info_view = InfoView(self)
        box = QVBoxLayout(self)
        box.setContentsMargins(17, 20, 17, 20)
        box.addWidget(self.info_view, 0, Qt.AlignCenter)

        self.opacity = QGraphicsOpacityEffect(self)
        self.opacity.setOpacity(0.0)
        self.setGraphicsEffect(self.opacity)
        self.hide()

    def paintEvent(self, event):
        p = QPainter(self)
        p.fillRect(self.rect(), QColor(0, 0, 0, OVERLAY_DIM_ALPHA))

    def mousePressEvent(self, event):
        self.clicked.emit()
        event.accept()


class MovieBrowserWindow(QMainWindow):
    """
    Grid of popular movies with a details overlay.

    Navigation leaves this window through signals only: `search_requested`
    and `profile_requested`. Whoever embeds the window decides what to open.

    Cells start with a numbered placeholder; when *fetch_poster* is given,
    posters are downloaded on a worker thread and swapped in as they arrive.
    Closing the window never blocks; call `shutdown()` before the app exits
    to join the worker threads.
    """
    search_requested  = Signal()
    profile_requested = Signal()

    def __init__(
        self,
        controller: FetchController,
        fetch_poster: Callable[[str], bytes] | None = None,
    ):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(720, 900)

        self.controller = controller
        self.state      = ListViewState(controller, self)
        self._fetch_poster = fetch_poster
        self._poster_thread: QThread | None = None
        self._poster_worker: _PosterWorker | None = None

        # ── grid ────────────────────────────────────────────────────────
        self.grid = QListWidget()
        self.grid.setViewMode(QListView.IconMode)
        self.grid.setResizeMode(QListView.Adjust)
        self.grid.setMovement(QListView.Static)
        self.grid.setUniformItemSizes(True)
        self.grid.setWordWrap(True)
        self.grid.setSpacing(1)
        self.grid.setIconSize(QSize(96, 96))
        self.grid.itemClicked.connect(self._on_item_clicked)

        self.status_label = QLabel("Loading…", alignment=Qt.AlignCenter)

        central = QWidget()
        box = QVBoxLayout(central)
        box.setContentsMargins(0, 0, 0, 0)
        box.addWidget(self.status_label)
        box.addWidget(self.grid, 1)
        self.setCentralWidget(central)

        # ── toolbar: profile (left) … search (right) ────────────────────
        tb = self.addToolBar("Main")
        tb.setMovable(False)
        self.profile_action = QAction(ICON("user"), "Profile", self)
        self.profile_action.triggered.connect(lambda: self.profile_requested.emit())
        tb.addAction(self.profile_action)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        tb.addWidget(spacer)

        self.search_action = QAction(ICON("search"), "Search", self)
        self.search_action.setShortcut("Ctrl+F")
        self.search_action.triggered.connect(lambda: self.search_requested.emit())
        tb.addAction(self.search_action)

        # ── overlay ─────────────────────────────────────────────────────
        self.backdrop  = _Backdrop(self)
        self.info_view = self.backdrop.info_view
        self.backdrop.clicked.connect(self.state.close_overlay)
        self.info_view.exit_clicked.connect(self.state.close_overlay)
        self._fade = QPropertyAnimation(self.backdrop.opacity, b"opacity", self)
        self._fade.setDuration(OVERLAY_ANIMATION_MS)
        self._fade.setEasingCurve(QEasingCurve.OutCubic)
        self._fade.finished.connect(self._on_fade_done)
        self.state.overlay_changed.connect(self._on_overlay_changed)

        # registered after ListViewState, so the state is revalidated first
        controller.on_result_changed(self._on_result)

    # ───────────────────────────────────────────────────────────────────
    def _on_result(self, result: FetchResult) -> None:
        if isinstance(result, Failure):
            msg = f"Couldn't load movies ({result.kind.value} error)."
            self.status_label.setText(msg)
            self.status_label.setToolTip(html.escape(result.message))
            self.statusBar().showMessage(f"{msg} {result.message}")
            return
        self.populate()

    def populate(self) -> None:
        """Rebuild the grid from the list state."""
        self.grid.clear()
        count = self.state.item_count()
        for row in range(count):
            movie = self.state.item_at(row)
            item  = QListWidgetItem(QIcon(make_number_pixmap(row + 1)), movie.title)
            item.setData(Qt.UserRole, movie.id)
            item.setToolTip(html.escape(movie.title))
            self.grid.addItem(item)

        if count:
            self.status_label.hide()
        else:
            self.status_label.setText("No movies found.")
        self._update_grid_size()
        self._start_posters()

    # ----- posters -------------------------------------------------------
    def _start_posters(self) -> None:
        if self._fetch_poster is None or self._poster_thread is not None:
            return
        jobs = [
            (row, movie.poster_url)
            for row in range(self.state.item_count())
            if (movie := self.state.item_at(row)).poster_url
        ]
        if not jobs:
            return

        thr    = QThread(self)
        worker = _PosterWorker(self._fetch_poster, jobs)
        worker.moveToThread(thr)

        worker.loaded.connect(self._on_poster_loaded)
        worker.finished.connect(thr.quit)
        thr.started.connect(worker.run)

        self._poster_thread, self._poster_worker = thr, worker
        thr.start()

    @Slot(int, object)
    def _on_poster_loaded(self, row: int, data: bytes) -> None:
        item = self.grid.item(row)
        if item is None:
            return
        pix = QPixmap()
        if not pix.loadFromData(data):
            log_debug(f"poster for row {row} is not an image ({len(data)} bytes)")
            return
        item.setIcon(QIcon(pix))

    @Slot(QListWidgetItem)
    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        # overlay is always fully closed before another item opens
        self.state.close_overlay()
        self.state.open_overlay(self.grid.row(item))

    @Slot(object)
    def _on_overlay_changed(self, overlay: OverlayState) -> None:
        if isinstance(overlay, Open):
            movie = self.state.overlay_item()
            if movie is None:
                return
            self.info_view.set_movie(movie)
            self.backdrop.setGeometry(self.rect())
            self.backdrop.show()
            self.backdrop.raise_()
            self._animate(1.0)
        else:
            self._animate(0.0)

    def _animate(self, end: float) -> None:
        self._fade.stop()
        self._fade.setEndValue(end)
        self._fade.start()

    @Slot()
    def _on_fade_done(self) -> None:
        if isinstance(self.state.overlay_state(), Closed):
            self.backdrop.hide()

    # ----- layout ---------------------------------------------------------
    def _update_grid_size(self) -> None:
        """Two columns, cells a bit taller than wide."""
        w = self.grid.viewport().width()
        self.grid.setGridSize(QSize(max(w // 2 - 1, 120), max(int(w / 1.3) - 9, 160)))

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.backdrop.setGeometry(self.rect())
        self.info_view.setFixedWidth(max(self.width() - 34, 320))
        self._update_grid_size()

    def shutdown(self) -> None:
        """Stop poster downloads and join both worker threads (blocks)."""
        if self._poster_worker is not None:
            self._poster_worker.cancel()
        if self._poster_thread is not None:
            self._poster_thread.quit()
            self._poster_thread.wait()
        self.controller.wait()

    def closeEvent(self, event):
        # no joins here: the fetch may still be running
        if self._poster_worker is not None:
            self._poster_worker.cancel()
        log_debug("browser window closed")
        super().closeEvent(event)
