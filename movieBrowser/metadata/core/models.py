# Movie dataclass + the fetch / overlay state variants
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Tuple, Union

from movieBrowser import settings


@dataclass(frozen=True, slots=True)
class MovieItem:
    id: int
    title: str
    poster_path: str | None = None
    overview: str | None = None
    release_date: str | None = None
    vote_average: float | None = None

    @property
    def poster_url(self) -> str | None:
        if not self.poster_path:
            return None
        return f"{settings.TMDB_IMAGE_BASE}{self.poster_path}"

    @property
    def year(self) -> int | None:
        head = (self.release_date or "")[:4]
        return int(head) if head.isdigit() else None

    @classmethod
    def from_tmdb(cls, data: Mapping[str, Any]) -> "MovieItem":
        """
        Build an item from one entry of a TMDb list payload.

        Raises
        ------
        KeyError
            If the entry has no ``id``.
        TypeError / ValueError
            If ``id`` or ``vote_average`` are not numeric.
        """
        vote = data.get("vote_average")
        return cls(
            id=int(data["id"]),
            title=data.get("title") or data.get("original_title") or "<untitled>",
            poster_path=data.get("poster_path") or None,
            overview=data.get("overview") or None,
            release_date=data.get("release_date") or None,
            vote_average=float(vote) if vote is not None else None,
        )


# server order, never re-sorted
MovieCollection = Tuple[MovieItem, ...]


class ErrorKind(Enum):
    NETWORK  = "network"
    DECODING = "decoding"
    SERVER   = "server"


# ─────────────────────────── FetchResult ──────────────────────────────
@dataclass(frozen=True, slots=True)
class Pending:
    pass


@dataclass(frozen=True, slots=True)
class Success:
    movies: MovieCollection = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "movies", tuple(self.movies))


@dataclass(frozen=True, slots=True)
class Failure:
    kind: ErrorKind
    message: str = ""


FetchResult = Union[Pending, Success, Failure]


# ─────────────────────────── OverlayState ─────────────────────────────
@dataclass(frozen=True, slots=True)
class Closed:
    pass


@dataclass(frozen=True, slots=True)
class Open:
    index: int


OverlayState = Union[Closed, Open]
