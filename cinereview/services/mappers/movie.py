# cinereview/services/mappers/movie.py
from __future__ import annotations

from typing import List

from cinereview.domain.dataclasses.paging import Page
from cinereview.domain.dataclasses.queries import SearchQuery
from cinereview.domain.dataclasses.reports import CatalogStats, MovieWithStats, ReviewWithAuthor
from cinereview.domain.entities.movie import Movie
from cinereview.services.mappers.review import enriched_to_read
from cinereview.services.schemas.movies import (
    CatalogStatsRead, MovieDetailRead, MoviePageRead, MovieRead, MovieWithStatsRead,
    SearchFiltersRead, SearchPageRead,
)


def to_movie_read(m: Movie) -> MovieRead:
    return MovieRead.model_validate(m)


def to_movie_with_stats_read(ms: MovieWithStats) -> MovieWithStatsRead:
    return MovieWithStatsRead(
        **to_movie_read(ms.movie).model_dump(),
        review_count=ms.stats.review_count,
        average_rating=ms.stats.average_rating,
    )


def to_movie_detail_read(ms: MovieWithStats, reviews: List[ReviewWithAuthor]) -> MovieDetailRead:
    return MovieDetailRead(
        **to_movie_with_stats_read(ms).model_dump(),
        reviews=[enriched_to_read(x) for x in reviews],
    )


def _page_meta(page: Page) -> dict:
    return dict(
        current_page=page.current_page,
        total_pages=page.total_pages,
        total_count=page.total_count,
        has_next_page=page.has_next_page,
        has_prev_page=page.has_prev_page,
    )


def to_movie_page(page: Page[Movie]) -> MoviePageRead:
    return MoviePageRead(movies=[to_movie_read(m) for m in page.items], **_page_meta(page))


def to_search_page(page: Page[Movie], query: SearchQuery) -> SearchPageRead:
    return SearchPageRead(
        movies=[to_movie_read(m) for m in page.items],
        search_query=query.q,
        filters=SearchFiltersRead(genre=query.genre, year=query.year, rating=query.min_rating),
        **_page_meta(page),
    )


def to_stats_read(stats: CatalogStats) -> CatalogStatsRead:
    return CatalogStatsRead(
        total_movies=stats.total_movies,
        total_reviews=stats.total_reviews,
        average_rating=stats.average_rating,
        genre_stats=stats.genre_stats,
        year_stats={str(y): n for y, n in stats.year_stats.items()},
    )
