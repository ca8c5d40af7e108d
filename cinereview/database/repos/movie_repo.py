# cinereview/database/repos/movie_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from cinereview.database.models.movie import Movie as DBMovie
from cinereview.database.repos._mapping import to_domain_movie
from cinereview.domain.entities.movie import Movie, MovieId
from cinereview.domain.errors import MovieNotFound, UpstreamUnavailable


def _as_pk(movie_id: MovieId) -> Optional[int]:
    try:
        return int(movie_id)
    except (TypeError, ValueError):
        return None


class SqlAlchemyMovieCatalog:
    """
    Read-only catalog over the `movie` table. Satisfies MovieCatalogPort.
    A dead database is a collaborator outage, not an internal fault.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, movie_id: MovieId) -> bool:
        pk = _as_pk(movie_id)
        if pk is None:
            return False
        stmt = select(func.count()).select_from(DBMovie).where(DBMovie.id == pk)
        try:
            return self.session.execute(stmt).scalar_one() > 0
        except OperationalError as e:
            raise UpstreamUnavailable("Movie catalog unavailable") from e

    def get(self, movie_id: MovieId) -> Movie:
        pk = _as_pk(movie_id)
        if pk is None:
            raise MovieNotFound()
        try:
            row = self.session.get(DBMovie, pk)
        except OperationalError as e:
            raise UpstreamUnavailable("Movie catalog unavailable") from e
        if row is None:
            raise MovieNotFound()
        return to_domain_movie(row)

    def list_movies(self) -> List[Movie]:
        stmt = select(DBMovie).order_by(DBMovie.id.asc())
        try:
            rows = self.session.execute(stmt).scalars().all()
        except OperationalError as e:
            raise UpstreamUnavailable("Movie catalog unavailable") from e
        return [to_domain_movie(r) for r in rows]
