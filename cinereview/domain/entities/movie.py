# cinereview/domain/entities/movie.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

MovieId = Union[int, str]


@dataclass(frozen=True)
class Movie:
    """
    Catalog record. Read-only from the review side; the catalog owns it.
    Rating is on the catalog's 0..10 scale (not the 1..5 review scale).
    """
    id: MovieId
    title: str
    year: int
    rating: float = 0.0
    genre: str = ""
    director: str = ""
    duration: Optional[int] = None  # minutes
    description: str = ""
    poster: Optional[str] = None

    def __post_init__(self):
        if self.id is None:
            raise ValueError("Movie.id is required")
        if not self.title or not self.title.strip():
            raise ValueError("Movie.title is required")
        if self.rating is not None and not (0 <= self.rating <= 10):
            raise ValueError("Movie.rating must be between 0 and 10")
        if self.duration is not None and self.duration < 0:
            raise ValueError("Movie.duration must be >= 0")
