# cinereview/domain/entities/review.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional
from uuid import UUID

from cinereview.domain.entities.movie import MovieId
from cinereview.domain.policies.review_rules import normalize_body, validate_rating


@dataclass
class Review:
    """
    One user's review of one movie.

    Invariants that we keep here:
      - rating is an int in 1..5
      - body is trimmed and non-empty
      - updated_at >= created_at when both are known
    "One review per (movie, author)" and "author-only mutation" need the
    store's view of the world, so they live in the store / policy layer.
    """
    movie_id: MovieId = None  # required
    author_id: str = ""       # required, always the verified identity
    rating: int = 0
    body: str = ""

    # Persistence (assigned by the store)
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.movie_id is None or self.movie_id == "":
            raise ValueError("Review.movie_id is required")
        if not self.author_id:
            raise ValueError("Review.author_id is required")
        self.rating = validate_rating(self.rating)
        self.body = normalize_body(self.body)
        if self.created_at and self.updated_at and self.updated_at < self.created_at:
            raise ValueError("Review.updated_at must be >= created_at")

    def with_changes(self, **changes) -> "Review":
        # re-runs __post_init__, so changed fields are re-validated
        return replace(self, **changes)


@dataclass(frozen=True)
class ReviewPatch:
    """Mutable subset of a review. None means "leave unchanged"."""
    rating: Optional[int] = None
    body: Optional[str] = None

    def validated(self) -> "ReviewPatch":
        return ReviewPatch(
            rating=validate_rating(self.rating) if self.rating is not None else None,
            body=normalize_body(self.body) if self.body is not None else None,
        )

    def apply(self, review: Review, *, now: datetime) -> Review:
        p = self.validated()
        created = review.created_at
        return review.with_changes(
            rating=p.rating if p.rating is not None else review.rating,
            body=p.body if p.body is not None else review.body,
            # clock skew must never produce updated_at < created_at
            updated_at=max(now, created) if created else now,
        )
