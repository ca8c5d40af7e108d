from __future__ import annotations

from cinereview.domain.dataclasses.paging import Page, PageRequest
from cinereview.domain.dataclasses.queries import MovieFilter, ReviewFilter, SearchQuery
from cinereview.domain.dataclasses.reports import CatalogStats, MovieWithStats
from cinereview.domain.entities.movie import Movie, MovieId
from cinereview.domain.enums.movie_sort import MovieSort
from cinereview.domain.errors import InvalidArgument
from cinereview.domain.policies.aggregation import catalog_stats, summarize_ratings
from cinereview.domain.policies.movie_filters import filter_movies, sort_movies
from cinereview.domain.policies.pagination import paginate
from cinereview.domain.ports.catalog import MovieCatalogPort
from cinereview.domain.ports.review_store import ReviewStorePort


class MovieService:
    """
    Catalog reads: filter -> sort -> paginate over the catalog's movies, plus
    review-derived statistics.
    """

    def __init__(self, catalog: MovieCatalogPort, reviews: ReviewStorePort) -> None:
        self.catalog = catalog
        self.reviews = reviews

    def list_movies(
        self,
        flt: MovieFilter,
        sort: MovieSort = MovieSort.title,
        req: PageRequest = PageRequest(),
    ) -> Page[Movie]:
        found = filter_movies(self.catalog.list_movies(), flt)
        return paginate(sort_movies(found, sort), req)

    def get_movie_with_stats(self, movie_id: MovieId) -> MovieWithStats:
        movie = self.catalog.get(movie_id)
        ratings = self.reviews.ratings(ReviewFilter(movie_id=movie.id))
        return MovieWithStats(movie=movie, stats=summarize_ratings(ratings))

    def search_movies(self, query: SearchQuery, req: PageRequest = PageRequest()) -> Page[Movie]:
        flt = query.to_filter()
        if flt.is_empty():
            raise InvalidArgument("At least one search parameter is required (q, genre, year, or rating)")
        # no relevance ranking: best-rated first
        return self.list_movies(flt, MovieSort.rating, req)

    def catalog_stats(self) -> CatalogStats:
        return catalog_stats(self.catalog.list_movies(), self.reviews.ratings(ReviewFilter()))
