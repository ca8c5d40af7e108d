from __future__ import annotations

from uuid import uuid4

import pytest

from cinereview.database.repos.movie_repo import SqlAlchemyMovieCatalog
from cinereview.database.repos.review_repo import SqlAlchemyReviewStore
from cinereview.database.repos.user_repo import SqlAlchemyUserDirectory
from cinereview.database.seed import seed_movies, seed_users
from cinereview.domain.dataclasses.queries import ReviewFilter
from cinereview.domain.entities.review import Review, ReviewPatch
from cinereview.domain.errors import DuplicateReview, Forbidden, MovieNotFound, ReviewNotFound


def _review(movie_id=1, author_id="user123", rating=5, body="Great"):
    return Review(movie_id=movie_id, author_id=author_id, rating=rating, body=body)


def test_insert_assigns_id_and_equal_timestamps(sql_store):
    stored = sql_store.insert(_review(body="  Great  "))
    assert stored.id is not None
    assert stored.body == "Great"
    assert stored.created_at == stored.updated_at

    again = sql_store.find_by_id(stored.id)
    assert again == stored


def test_find_missing_returns_none(sql_store):
    assert sql_store.find_by_id(uuid4()) is None


def test_duplicate_pair_is_rejected(sql_store):
    sql_store.insert(_review())
    with pytest.raises(DuplicateReview):
        sql_store.insert(_review(rating=1, body="again"))
    assert sql_store.count(ReviewFilter(movie_id=1)) == 1


def test_unique_constraint_backs_the_precheck(db, clock):
    class NoPrecheck(SqlAlchemyReviewStore):
        def _exists_pair(self, movie_id, author_id):
            return False

    store = NoPrecheck(db, clock=clock)
    store.insert(_review())
    with pytest.raises(DuplicateReview):
        store.insert(_review(body="raced"))
    # savepoint rolled back; the session is still usable
    assert store.count(ReviewFilter()) == 1


def test_query_orders_newest_first_with_offset(sql_store):
    for movie_id in (1, 2, 3):
        sql_store.insert(_review(movie_id=movie_id, author_id="user456"))
    sql_store.insert(_review(movie_id=1, author_id="user789"))

    mine = sql_store.query(ReviewFilter(author_id="user456"), limit=2, offset=0)
    assert [r.movie_id for r in mine] == [3, 2]
    rest = sql_store.query(ReviewFilter(author_id="user456"), limit=2, offset=2)
    assert [r.movie_id for r in rest] == [1]

    assert sql_store.count(ReviewFilter(movie_id=1)) == 2
    assert sorted(sql_store.ratings(ReviewFilter(movie_id=1))) == [5, 5]


def test_update_by_owner(sql_store):
    r = sql_store.insert(_review(rating=3, body="ok"))
    updated = sql_store.update(r.id, "user123", ReviewPatch(body="better"))
    assert updated.rating == 3
    assert updated.body == "better"
    assert updated.created_at == r.created_at
    assert updated.updated_at > r.updated_at


def test_update_and_delete_enforce_ownership(sql_store):
    r = sql_store.insert(_review())
    with pytest.raises(Forbidden):
        sql_store.update(r.id, "user456", ReviewPatch(rating=1))
    with pytest.raises(Forbidden):
        sql_store.delete(r.id, "user456")
    assert sql_store.find_by_id(r.id).rating == 5

    sql_store.delete(r.id, "user123")
    assert sql_store.find_by_id(r.id) is None
    with pytest.raises(ReviewNotFound):
        sql_store.delete(r.id, "user123")
    with pytest.raises(ReviewNotFound):
        sql_store.update(r.id, "user123", ReviewPatch(rating=2))


def test_catalog_and_directory_over_seed(db):
    assert seed_movies(db) == 5
    assert seed_movies(db) == 0
    assert seed_users(db) == 3
    db.flush()

    catalog = SqlAlchemyMovieCatalog(db)
    assert catalog.exists(3) and catalog.exists("3")
    assert not catalog.exists("abc")
    dk = catalog.get("3")
    assert dk.title == "The Dark Knight"
    assert dk.rating == 9.0
    assert [m.id for m in catalog.list_movies()] == [1, 2, 3, 4, 5]
    with pytest.raises(MovieNotFound):
        catalog.get(999)

    users = SqlAlchemyUserDirectory(db)
    got = users.get_users(["user123", "nobody", ""])
    assert set(got) == {"user123"}
    assert got["user123"].user_name == "John Doe"
    assert users.get_users([]) == {}
