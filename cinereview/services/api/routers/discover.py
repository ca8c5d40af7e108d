# cinereview/services/api/routers/discover.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Path, Query

from cinereview.common.settings import get_settings
from cinereview.domain.dataclasses.paging import PageRequest
from cinereview.domain.ports.upstream import MovieUpstreamPort
from cinereview.services.api.deps import get_movie_upstream

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/discover", tags=["discover"])


def _page(page: Optional[str]) -> int:
    return PageRequest.parse(page).page


@router.get("/popular")
def popular(
    page: Optional[str] = Query(None),
    tmdb: MovieUpstreamPort = Depends(get_movie_upstream),
) -> Dict[str, Any]:
    return tmdb.popular(_page(page))


@router.get("/search")
def search(
    query: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    tmdb: MovieUpstreamPort = Depends(get_movie_upstream),
) -> Dict[str, Any]:
    return tmdb.search(query or "", _page(page))


@router.get("/movies/{movie_id}")
def details(
    movie_id: int = Path(..., ge=1),
    tmdb: MovieUpstreamPort = Depends(get_movie_upstream),
) -> Dict[str, Any]:
    return tmdb.details(movie_id)


@router.get("/movies/{movie_id}/recommendations")
def recommendations(
    movie_id: int = Path(..., ge=1),
    page: Optional[str] = Query(None),
    tmdb: MovieUpstreamPort = Depends(get_movie_upstream),
) -> Dict[str, Any]:
    return tmdb.recommendations(movie_id, _page(page))
