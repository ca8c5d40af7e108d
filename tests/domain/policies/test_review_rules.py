import pytest

from cinereview.domain.entities.review import Review
from cinereview.domain.errors import Forbidden, InvalidArgument
from cinereview.domain.policies.review_rules import (
    ensure_owner, has_existing_review, is_owner, normalize_body, validate_rating,
)


@pytest.mark.parametrize("ok", [1, 3, 5])
def test_validate_rating_accepts_bounds(ok):
    assert validate_rating(ok) == ok


@pytest.mark.parametrize("bad", [0, 6, -1, 4.5, "5", None, True])
def test_validate_rating_rejects(bad):
    with pytest.raises(InvalidArgument):
        validate_rating(bad)


def test_normalize_body_trims():
    assert normalize_body("  Great  ") == "Great"


@pytest.mark.parametrize("bad", ["", "   ", "\n\t", None, 42])
def test_normalize_body_rejects_blank_or_non_string(bad):
    with pytest.raises(InvalidArgument):
        normalize_body(bad)


def test_has_existing_review():
    reviews = [
        Review(movie_id=1, author_id="u1", rating=5, body="a"),
        Review(movie_id=2, author_id="u2", rating=3, body="b"),
    ]
    assert has_existing_review(reviews, 1, "u1") is True
    assert has_existing_review(reviews, 1, "u2") is False
    assert has_existing_review([], 1, "u1") is False


def test_ownership_predicates():
    r = Review(movie_id=1, author_id="u1", rating=5, body="a")
    assert is_owner(r, "u1") is True
    assert is_owner(r, "u2") is False
    assert is_owner(r, None) is False
    ensure_owner(r, "u1")
    with pytest.raises(Forbidden):
        ensure_owner(r, "u2", action="delete")
