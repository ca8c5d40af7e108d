# cinereview/services/schemas/movies.py
from __future__ import annotations

from typing import Dict, List, Optional

from cinereview.services.schemas.base import CamelModel, PageMeta
from cinereview.services.schemas.reviews import ReviewRead


class MovieRead(CamelModel):
    id: int
    title: str
    year: int
    rating: float
    genre: str
    director: str
    duration: Optional[int] = None
    description: str
    poster: Optional[str] = None


class MovieWithStatsRead(MovieRead):
    review_count: int
    average_rating: float


class MovieDetailRead(MovieWithStatsRead):
    reviews: List[ReviewRead] = []


class MoviePageRead(PageMeta):
    movies: List[MovieRead] = []


class SearchFiltersRead(CamelModel):
    genre: Optional[str] = None
    year: Optional[int] = None
    rating: Optional[float] = None


class SearchPageRead(MoviePageRead):
    search_query: Optional[str] = None
    filters: SearchFiltersRead


class CatalogStatsRead(CamelModel):
    total_movies: int
    total_reviews: int
    average_rating: float
    genre_stats: Dict[str, int]
    year_stats: Dict[str, int]
