"""
movieBrowser
~~~~~~~~~~~~

Top-level package for the Movie Browser application.

Exports:
  - TMDB_API_KEY, MOVIE_LIST_ENDPOINT
  - Utility functions: log_debug, apply_dark_palette
  - Core types: MovieItem, Pending, Success, Failure, ErrorKind
  - GUI: FetchController, ListViewState, MovieBrowserWindow
"""

# settings
from movieBrowser.settings import TMDB_API_KEY, MOVIE_LIST_ENDPOINT

# utils
from movieBrowser.utils import log_debug, apply_dark_palette

# core types + client
from movieBrowser.metadata import (
    MovieItem,
    ErrorKind,
    Pending,
    Success,
    Failure,
    TMDBClient,
)

# GUI
from movieBrowser.gui import FetchController, ListViewState, MovieBrowserWindow

__all__ = [
    # settings
    "TMDB_API_KEY",
    "MOVIE_LIST_ENDPOINT",
    # utils
    "log_debug",
    "apply_dark_palette",
    # core
    "MovieItem",
    "ErrorKind",
    "Pending",
    "Success",
    "Failure",
    "TMDBClient",
    # GUI
    "FetchController",
    "ListViewState",
    "MovieBrowserWindow",
]
