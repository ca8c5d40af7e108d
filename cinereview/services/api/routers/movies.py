# cinereview/services/api/routers/movies.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from cinereview.common.settings import get_settings
from cinereview.common.strings.splitters import blank_to_none
from cinereview.domain.dataclasses.paging import PageRequest
from cinereview.domain.dataclasses.queries import MovieFilter
from cinereview.domain.enums.movie_sort import MovieSort
from cinereview.services.api.deps import get_movie_service, get_review_service, page_request
from cinereview.services.mappers.movie import to_movie_detail_read, to_movie_page
from cinereview.services.mappers.review import to_review_page
from cinereview.services.movies.service import MovieService
from cinereview.services.reviews.service import ReviewService
from cinereview.services.schemas import MovieDetailRead, MoviePageRead, ReviewPageRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/movies", tags=["movies"])


@router.get("", response_model=MoviePageRead)
def list_movies(
    search: Optional[str] = Query(None, description="Case-insensitive substring of title, director or description"),
    genre: Optional[str] = Query(None, description="Exact genre (case-insensitive)"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="title|year|rating"),
    req: PageRequest = Depends(page_request),
    svc: MovieService = Depends(get_movie_service),
) -> MoviePageRead:
    flt = MovieFilter(search=blank_to_none(search), genre=blank_to_none(genre))
    page = svc.list_movies(flt, MovieSort.parse(sort_by), req)
    return to_movie_page(page)


@router.get("/{movie_id}", response_model=MovieDetailRead)
def get_movie(
    movie_id: int = Path(...),
    svc: MovieService = Depends(get_movie_service),
    reviews: ReviewService = Depends(get_review_service),
) -> MovieDetailRead:
    ms = svc.get_movie_with_stats(movie_id)
    return to_movie_detail_read(ms, reviews.all_reviews_for_movie(ms.movie.id))


@router.get("/{movie_id}/reviews", response_model=ReviewPageRead)
def list_movie_reviews(
    movie_id: int = Path(...),
    req: PageRequest = Depends(page_request),
    svc: ReviewService = Depends(get_review_service),
) -> ReviewPageRead:
    return to_review_page(svc.list_reviews_for_movie(movie_id, req))
