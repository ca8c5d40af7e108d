# cinereview/services/api/deps.py
from __future__ import annotations
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from cinereview.common.settings import get_settings
from cinereview.database.core.main import SessionLocal
from cinereview.database.repos.movie_repo import SqlAlchemyMovieCatalog
from cinereview.database.repos.review_repo import SqlAlchemyReviewStore
from cinereview.database.repos.user_repo import SqlAlchemyUserDirectory
from cinereview.domain.dataclasses.paging import PageRequest
from cinereview.domain.ports.catalog import MovieCatalogPort
from cinereview.domain.ports.identity import IdentityVerifierPort, UserDirectoryPort
from cinereview.domain.ports.review_store import ReviewStorePort
from cinereview.domain.ports.upstream import MovieUpstreamPort
from cinereview.services.auth.jwt_verifier import JwtIdentityVerifier
from cinereview.services.movies.service import MovieService
from cinereview.services.reviews.service import ReviewService
from cinereview.services.upstream.tmdb_client import TMDBClient

_bearer = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction.

    Using the Session.begin() context ensures COMMIT on normal exit,
    and ROLLBACK if an exception bubbles out.
    """
    with db.begin():
        yield db


# ---- ports -> adapters ----

def get_review_store(session: Session = Depends(transactional_session)) -> ReviewStorePort:
    return SqlAlchemyReviewStore(session)


def get_movie_catalog(session: Session = Depends(transactional_session)) -> MovieCatalogPort:
    return SqlAlchemyMovieCatalog(session)


def get_user_directory(session: Session = Depends(transactional_session)) -> UserDirectoryPort:
    return SqlAlchemyUserDirectory(session)


def get_identity_verifier() -> IdentityVerifierPort:
    return JwtIdentityVerifier()


def get_movie_upstream() -> Generator[MovieUpstreamPort, None, None]:
    with TMDBClient() as client:
        yield client


# ---- services ----

def get_review_service(
    store: ReviewStorePort = Depends(get_review_store),
    catalog: MovieCatalogPort = Depends(get_movie_catalog),
    users: UserDirectoryPort = Depends(get_user_directory),
) -> ReviewService:
    return ReviewService(store=store, catalog=catalog, users=users)


def get_movie_service(
    catalog: MovieCatalogPort = Depends(get_movie_catalog),
    store: ReviewStorePort = Depends(get_review_store),
) -> MovieService:
    return MovieService(catalog=catalog, reviews=store)


# ---- request parsing ----

def current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    verifier: IdentityVerifierPort = Depends(get_identity_verifier),
) -> str:
    """Verified author id for write endpoints. Raises Unauthenticated."""
    return verifier.verify(credentials.credentials if credentials else None)


def page_request(page: Optional[str] = None, limit: Optional[str] = None) -> PageRequest:
    """
    ?page & ?limit arrive as raw strings so that junk values fall back to the
    defaults instead of failing validation.
    """
    cfg = get_settings()
    return PageRequest.parse(
        page,
        limit,
        default_limit=cfg.paging.default_limit,
    )
