"""
gui
~~~
Qt widgets, the fetch controller and the list/overlay state.

•  No HTTP here – requests go through the `fetch` / `decode` callables handed
   to `FetchController` (normally `metadata.api_clients.TMDBClient`).
•  Re-export the high-level symbols so the app can simply:

    from movieBrowser.gui import FetchController, MovieBrowserWindow
"""

from movieBrowser.gui.controller  import FetchController
from movieBrowser.gui.list_state  import ListViewState
from movieBrowser.gui.info_view   import InfoView
from movieBrowser.gui.main_window import MovieBrowserWindow

__all__ = [
    "FetchController", "ListViewState",
    "InfoView", "MovieBrowserWindow",
]
