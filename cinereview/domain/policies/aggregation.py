# cinereview/domain/policies/aggregation.py
from __future__ import annotations

from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from cinereview.domain.dataclasses.reports import CatalogStats, RatingSummary
from cinereview.domain.entities.movie import Movie

_ONE_DECIMAL = Decimal("0.1")


def average_rating(ratings: Iterable[int]) -> float:
    """Mean rounded half-up to one decimal; 0 for no ratings."""
    values = [int(r) for r in ratings]
    if not values:
        return 0.0
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def summarize_ratings(ratings: Iterable[int]) -> RatingSummary:
    values = list(ratings)
    return RatingSummary(review_count=len(values), average_rating=average_rating(values))


def catalog_stats(movies: Iterable[Movie], ratings: Iterable[int]) -> CatalogStats:
    movies = list(movies)
    summary = summarize_ratings(ratings)
    return CatalogStats(
        total_movies=len(movies),
        total_reviews=summary.review_count,
        average_rating=summary.average_rating,
        genre_stats=dict(Counter(m.genre for m in movies)),
        year_stats=dict(Counter(m.year for m in movies)),
    )
