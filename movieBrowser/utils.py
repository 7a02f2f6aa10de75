import functools
import os
import platform
import random
import subprocess
import time
import urllib.parse
from datetime import datetime
import webbrowser

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QPixmap, QPainter, QFont, QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieBrowser import settings


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    log_path = settings.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with log_path.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def make_number_pixmap(
    number: int,
    size: int = 96,
    fg_color: str = "#ffffff",
    bg_color: str = "transparent",
    border_color: str = settings.ACCENT_COLOR
) -> QPixmap:
    """
    Create a square pixmap with a rounded border and centered `number`.
    Used as the grid placeholder until a poster is shown in the overlay.
    """
    pix = QPixmap(size, size)
    pix.fill(QColor(bg_color))

    painter = QPainter(pix)
    painter.setRenderHint(QPainter.Antialiasing)

    pen = painter.pen()
    pen.setWidth(4)
    pen.setColor(QColor(border_color))
    painter.setPen(pen)
    painter.drawRoundedRect(2, 2, size - 4, size - 4, 10, 10)

    font = QFont("Arial", int(size * 0.4), QFont.Bold)
    painter.setFont(font)
    painter.setPen(QColor(fg_color))
    painter.drawText(pix.rect(), Qt.AlignCenter, str(number))

    painter.end()
    return pix


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#202124"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#2b2c2e"))
    palette.setColor(QPalette.AlternateBase, QColor("#323336"))
    palette.setColor(QPalette.Button,        QColor("#2d2e30"))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(settings.ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(settings.ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)


def open_url_host_browser(url: str) -> bool:
    """
    Opens *url* with host OS default browser (WSL-aware).

    Only http(s) URLs are opened. On WSL the URL reaches PowerShell through
    an environment variable (forwarded by ``WSLENV``), never as command
    text. Returns False when *url* was refused.
    """
    if urllib.parse.urlsplit(url).scheme.lower() not in ("http", "https"):
        log_debug(f"refusing to open non-http URL: {url!r}")
        return False
    if "microsoft-standard" in platform.uname().release.lower():
        env = dict(os.environ, MOVIEBROWSER_URL=url)
        env["WSLENV"] = ":".join(filter(None, [env.get("WSLENV"), "MOVIEBROWSER_URL"]))
        subprocess.Popen(
            ["powershell.exe", "-NoProfile", "-c", "Start-Process $env:MOVIEBROWSER_URL"],
            env=env,
        )
    else:
        webbrowser.open(url)
    return True


def throttle(min_delay: float = 1.0):
    """
    Decorator that sleeps `min_delay ±0.3 s` between *network* calls on the
    same function.
    """
    def wrap(fn):
        last_hit = 0.0
        @functools.wraps(fn)
        def inner(*a, **kw):
            nonlocal last_hit
            wait = min_delay - (time.time() - last_hit)
            if wait > 0:
                time.sleep(wait + random.uniform(0, 0.3))
            try:
                return fn(*a, **kw)
            finally:
                last_hit = time.time()
        return inner
    return wrap
