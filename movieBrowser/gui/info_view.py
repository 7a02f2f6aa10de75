from __future__ import annotations
import html

from PySide6.QtCore    import Qt, Signal # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QPushButton, QGraphicsDropShadowEffect
)

from ..settings import ACCENT_COLOR
from ..utils    import open_url_host_browser
from ..metadata.core.models import MovieItem


class InfoView(QFrame):
    """Detail card for one movie: title, year · rating, overview, poster link."""
    exit_clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("InfoView")
        self.setFrameShape(QFrame.StyledPanel)
        self.setStyleSheet(
            "#InfoView { background:#2b2c2e; border-radius:5px; }"
        )
        self.setMinimumWidth(320)

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 12, 16, 16)

        # ── header: title + exit button ─────────────────────────────────
        header = QHBoxLayout()
        self.title_label = QLabel()
        self.title_label.setTextFormat(Qt.PlainText)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("font-size:18px; font-weight:bold;")
        self.exit_button = QPushButton("✕")
        self.exit_button.setFixedSize(28, 28)
        self.exit_button.setAutoDefault(False)
        self.exit_button.clicked.connect(lambda: self.exit_clicked.emit())
        header.addWidget(self.title_label, 1)
        header.addWidget(self.exit_button, 0, Qt.AlignTop)
        root.addLayout(header)

        # ── year · rating ────────────────────────────────────────────────
        self.meta_label = QLabel()
        self.meta_label.setTextFormat(Qt.PlainText)
        self.meta_label.setStyleSheet(f"color:{ACCENT_COLOR};")
        root.addWidget(self.meta_label)

        self.overview_label = QLabel()
        self.overview_label.setTextFormat(Qt.PlainText)
        self.overview_label.setWordWrap(True)
        self.overview_label.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        root.addWidget(self.overview_label, 1)

        # ── poster link (or plain text) ──────────────────────────────────
        self.poster_label = QLabel()
        self.poster_label.setTextFormat(Qt.RichText)
        self.poster_label.setTextInteractionFlags(Qt.TextBrowserInteraction)
        self.poster_label.setOpenExternalLinks(False)
        self.poster_label.linkActivated.connect(open_url_host_browser)
        root.addWidget(self.poster_label)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(16)
        shadow.setOffset(0, 0)
        self.setGraphicsEffect(shadow)

    def set_movie(self, movie: MovieItem) -> None:
        self.title_label.setText(movie.title)

        parts = []
        if movie.year:
            parts.append(str(movie.year))
        if movie.vote_average is not None:
            parts.append(f"★ {movie.vote_average:.1f}")
        self.meta_label.setText(" · ".join(parts) or "—")

        self.overview_label.setText(movie.overview or "No overview available.")

        url = movie.poster_url
        self.poster_label.setText(
            f'<a href="{html.escape(url, quote=True)}">Poster</a>' if url else "No poster"
        )

    # swallow clicks so they don't reach the backdrop behind us
    def mousePressEvent(self, event):
        event.accept()
