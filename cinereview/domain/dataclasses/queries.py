# cinereview/domain/dataclasses/queries.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from cinereview.common.strings.splitters import blank_to_none
from cinereview.domain.entities.movie import MovieId
from cinereview.domain.errors import InvalidArgument


@dataclass(frozen=True)
class ReviewFilter:
    """Store-level filter. Both None means "every review"."""
    movie_id: Optional[MovieId] = None
    author_id: Optional[str] = None

    def matches(self, review) -> bool:
        if self.movie_id is not None and review.movie_id != self.movie_id:
            return False
        if self.author_id is not None and review.author_id != self.author_id:
            return False
        return True


@dataclass(frozen=True)
class MovieFilter:
    """
    Catalog filter. `search` is a free-text, case-insensitive substring test;
    `search_genre` widens it to the genre field (the /search flavour).
    """
    search: Optional[str] = None
    genre: Optional[str] = None
    year: Optional[int] = None
    min_rating: Optional[float] = None
    search_genre: bool = False

    def is_empty(self) -> bool:
        return not (self.search or self.genre or self.year is not None or self.min_rating is not None)


@dataclass(frozen=True)
class SearchQuery:
    q: Optional[str] = None
    genre: Optional[str] = None
    year: Optional[int] = None
    min_rating: Optional[float] = None

    @classmethod
    def parse(
        cls,
        q: Optional[str] = None,
        genre: Optional[str] = None,
        year: Optional[str] = None,
        rating: Optional[str] = None,
    ) -> "SearchQuery":
        y = blank_to_none(year)
        r = blank_to_none(rating)
        try:
            year_val = int(y) if y is not None else None
        except ValueError:
            raise InvalidArgument("year must be an integer") from None
        try:
            rating_val = float(r) if r is not None else None
        except ValueError:
            raise InvalidArgument("rating must be a number") from None
        if rating_val is not None and not math.isfinite(rating_val):
            raise InvalidArgument("rating must be a finite number")
        return cls(q=blank_to_none(q), genre=blank_to_none(genre), year=year_val, min_rating=rating_val)

    def to_filter(self) -> MovieFilter:
        return MovieFilter(
            search=self.q,
            genre=self.genre,
            year=self.year,
            min_rating=self.min_rating,
            search_genre=True,
        )
