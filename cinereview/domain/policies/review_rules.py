# cinereview/domain/policies/review_rules.py
"""
Validation, uniqueness and ownership rules for reviews.

These are pure predicates over already-loaded records. Stores still have to
guarantee uniqueness atomically; `has_existing_review` is the in-process
statement of the same rule.
"""
from __future__ import annotations

from typing import Any, Iterable, TYPE_CHECKING

from cinereview.domain.errors import Forbidden, InvalidArgument

if TYPE_CHECKING:
    from cinereview.domain.entities.movie import MovieId
    from cinereview.domain.entities.review import Review

RATING_MIN = 1
RATING_MAX = 5


def validate_rating(value: Any) -> int:
    # bool is an int subclass; True must not pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"rating must be an integer between {RATING_MIN} and {RATING_MAX}")
    if value < RATING_MIN or value > RATING_MAX:
        raise InvalidArgument(f"rating must be between {RATING_MIN} and {RATING_MAX}")
    return value


def normalize_body(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgument("text must be a string")
    body = value.strip()
    if not body:
        raise InvalidArgument("text must not be empty")
    return body


def has_existing_review(reviews: Iterable["Review"], movie_id: "MovieId", author_id: str) -> bool:
    return any(r.movie_id == movie_id and r.author_id == author_id for r in reviews)


def is_owner(review: "Review", author_id: str | None) -> bool:
    return bool(author_id) and review.author_id == author_id


def ensure_owner(review: "Review", author_id: str | None, *, action: str = "modify") -> None:
    if not is_owner(review, author_id):
        raise Forbidden(f"You can only {action} your own reviews")
