from pathlib import Path
import os
from dotenv import load_dotenv
from PySide6.QtGui import QIcon # type: ignore

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

TMDB_API_KEY        = os.getenv("TMDB_API_KEY")
TMDB_BASE_URL       = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
TMDB_IMAGE_BASE     = os.getenv("TMDB_IMAGE_BASE", "https://image.tmdb.org/t/p/w500")
TMDB_LANGUAGE       = os.getenv("TMDB_LANGUAGE", "en-US")
MOVIE_LIST_ENDPOINT = os.getenv("MOVIE_LIST_ENDPOINT", "/movie/popular")
REQUEST_TIMEOUT     = float(os.getenv("REQUEST_TIMEOUT", "10"))

# File / folder paths
LOG_PATH            = BASE_DIR / "movie_browser_debug.log"

# UI constants
WINDOW_TITLE         = "Movie Browser"
ACCENT_COLOR         = "#3b82f6"
OVERLAY_ANIMATION_MS = 500
OVERLAY_DIM_ALPHA    = 150           # backdrop tint, 0-255
ICON = lambda name: QIcon(str(BASE_DIR / "icons" / f"{name}.svg"))
