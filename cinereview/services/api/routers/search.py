# cinereview/services/api/routers/search.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from cinereview.common.settings import get_settings
from cinereview.domain.dataclasses.paging import PageRequest
from cinereview.domain.dataclasses.queries import SearchQuery
from cinereview.services.api.deps import get_movie_service, page_request
from cinereview.services.mappers.movie import to_search_page, to_stats_read
from cinereview.services.movies.service import MovieService
from cinereview.services.schemas import CatalogStatsRead, SearchPageRead

cfg = get_settings()
router = APIRouter(prefix=cfg.api.prefix, tags=["search"])


@router.get("/search", response_model=SearchPageRead)
def search_movies(
    q: Optional[str] = Query(None, description="Substring of title, director, description or genre"),
    genre: Optional[str] = Query(None),
    year: Optional[str] = Query(None, description="Exact release year"),
    rating: Optional[str] = Query(None, description="Minimum catalog rating (0-10)"),
    req: PageRequest = Depends(page_request),
    svc: MovieService = Depends(get_movie_service),
) -> SearchPageRead:
    query = SearchQuery.parse(q=q, genre=genre, year=year, rating=rating)
    return to_search_page(svc.search_movies(query, req), query)


@router.get("/stats", response_model=CatalogStatsRead)
def catalog_stats(svc: MovieService = Depends(get_movie_service)) -> CatalogStatsRead:
    return to_stats_read(svc.catalog_stats())
