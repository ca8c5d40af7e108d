# tests/database/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session

from cinereview.database.repos.review_repo import SqlAlchemyReviewStore

APP_SCHEMA = "cinereview"


@pytest.fixture()
def db(db_engine) -> Session:
    """
    Session on one connection whose outer transaction is rolled back after the
    test. Repos may open SAVEPOINTs freely; nothing reaches the database.
    """
    with db_engine.connect() as conn:
        outer = conn.begin()
        conn.execute(text(f'SET search_path TO "{APP_SCHEMA}", public'))
        session = Session(bind=conn, join_transaction_mode="create_savepoint")
        try:
            yield session
        finally:
            session.close()
            outer.rollback()


@pytest.fixture()
def sql_store(db, clock) -> SqlAlchemyReviewStore:
    return SqlAlchemyReviewStore(db, clock=clock)
