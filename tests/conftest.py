# tests/conftest.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from cinereview.database.repos.memory_repo import (
    InMemoryMovieCatalog,
    InMemoryReviewStore,
    InMemoryUserDirectory,
)
from cinereview.database.seed import SAMPLE_MOVIES, SAMPLE_USERS
from cinereview.services.movies.service import MovieService
from cinereview.services.reviews.service import ReviewService

APP_SCHEMA = "cinereview"


class TickingClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture()
def catalog() -> InMemoryMovieCatalog:
    return InMemoryMovieCatalog(SAMPLE_MOVIES)


@pytest.fixture()
def store(clock) -> InMemoryReviewStore:
    return InMemoryReviewStore(clock=clock)


@pytest.fixture()
def users() -> InMemoryUserDirectory:
    return InMemoryUserDirectory(SAMPLE_USERS)


@pytest.fixture()
def review_service(store, catalog, users) -> ReviewService:
    return ReviewService(store=store, catalog=catalog, users=users)


@pytest.fixture()
def movie_service(catalog, store) -> MovieService:
    return MovieService(catalog=catalog, reviews=store)


# ---- PostgreSQL (only started when a test asks for it) ----

@pytest.fixture(scope="session")
def _postgres_container():
    from testcontainers.postgres import PostgresContainer

    container = PostgresContainer("postgres:15-alpine")
    try:
        container.start()
    except Exception as e:  # no Docker daemon on this machine
        pytest.skip(f"PostgreSQL container unavailable: {e}")
    try:
        # Force psycopg (v3) driver in the URL returned by testcontainers
        yield container.get_connection_url().replace("psycopg2", "psycopg")
    finally:
        container.stop()


@pytest.fixture(scope="session")
def db_engine(_postgres_container):
    from sqlalchemy import create_engine, text

    from cinereview.database.models import Base

    engine = create_engine(_postgres_container, future=True)
    with engine.begin() as conn:
        conn.execute(text(f'create schema if not exists "{APP_SCHEMA}"'))
        conn.execute(text("CREATE EXTENSION IF NOT EXISTS pgcrypto"))

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
