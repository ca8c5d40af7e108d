# cinereview/services/upstream/tmdb_client.py
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from cinereview.common.logging import get_logger
from cinereview.common.settings import TMDBConfig, get_settings
from cinereview.domain.errors import InvalidArgument, MovieNotFound, UpstreamUnavailable

logger = get_logger()


class TMDBClient:
    """
    Thin pass-through to The Movie Database v3 API (MovieUpstreamPort).

    Payloads are returned as-is. Error translation:
      - 404                      -> MovieNotFound
      - other non-2xx / network  -> UpstreamUnavailable
    Connection failures are retried by the transport; HTTP errors are not.
    """

    def __init__(
        self,
        cfg: Optional[TMDBConfig] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.cfg = cfg or get_settings().tmdb
        self._client = httpx.Client(
            base_url=self.cfg.base_url,
            params={"api_key": self.cfg.api_key},
            timeout=self.cfg.timeout_sec,
            transport=transport or httpx.HTTPTransport(retries=self.cfg.retries),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "TMDBClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        try:
            resp = self._client.get(path, params=params or {})
        except httpx.HTTPError as e:
            logger.error("TMDB request %s failed: %s", path, e)
            raise UpstreamUnavailable("Movie metadata service unavailable") from e

        if resp.status_code == httpx.codes.NOT_FOUND:
            raise MovieNotFound()
        if resp.is_error:
            logger.error("TMDB %s answered %s", path, resp.status_code)
            raise UpstreamUnavailable(f"Movie metadata service error ({resp.status_code})")
        return resp.json()

    # ---- MovieUpstreamPort ----

    def popular(self, page: int = 1) -> Dict[str, Any]:
        return self._get("/movie/popular", {"page": page})

    def search(self, query: str, page: int = 1) -> Dict[str, Any]:
        q = (query or "").strip()
        if not q:
            raise InvalidArgument("Query parameter is required")
        return self._get("/search/movie", {"query": q, "page": page, "include_adult": "false"})

    def details(self, movie_id: int) -> Dict[str, Any]:
        return self._get(f"/movie/{int(movie_id)}", {"append_to_response": "credits,videos"})

    def recommendations(self, movie_id: int, page: int = 1) -> Dict[str, Any]:
        return self._get(f"/movie/{int(movie_id)}/recommendations", {"page": page})
