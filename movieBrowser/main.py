import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from movieBrowser.utils          import apply_dark_palette, log_debug
from movieBrowser.metadata       import TMDBClient
from movieBrowser.gui.controller  import FetchController
from movieBrowser.gui.main_window import MovieBrowserWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)

    try:
        client = TMDBClient()
    except RuntimeError as e:
        log_debug(f"startup aborted: {e}")
        QMessageBox.critical(None, "Configuration", str(e))
        sys.exit(1)

    # -------- one controller == one fetch for this window --------------
    controller = FetchController(client.fetch, client.decode)
    window     = MovieBrowserWindow(controller, fetch_poster=client.fetch_image)
    window.search_requested.connect(lambda: log_debug("search requested"))
    window.profile_requested.connect(lambda: log_debug("profile requested"))
    window.show()
    app.aboutToQuit.connect(window.shutdown)     # joins threads after the window is gone

    controller.start()               # returns at once; grid fills on completion

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
