from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from cinereview.domain.entities.movie import Movie
from cinereview.domain.entities.review import Review
from cinereview.domain.entities.user import UserProfile


@dataclass(frozen=True)
class RatingSummary:
    review_count: int = 0
    average_rating: float = 0.0


@dataclass(frozen=True)
class MovieWithStats:
    movie: Movie
    stats: RatingSummary


@dataclass
class CatalogStats:
    total_movies: int = 0
    total_reviews: int = 0
    average_rating: float = 0.0
    genre_stats: Dict[str, int] = field(default_factory=dict)
    year_stats: Dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ReviewWithAuthor:
    review: Review
    author: Optional[UserProfile] = None  # None -> left unenriched
