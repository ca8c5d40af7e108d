# cinereview/database/repos/memory_repo.py
from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Tuple
from uuid import UUID, uuid4

from cinereview.common.clock import Clock, utcnow
from cinereview.domain.dataclasses.queries import ReviewFilter
from cinereview.domain.entities.movie import Movie, MovieId
from cinereview.domain.entities.review import Review, ReviewPatch
from cinereview.domain.entities.user import UserProfile
from cinereview.domain.errors import DuplicateReview, MovieNotFound, ReviewNotFound
from cinereview.domain.policies.review_rules import ensure_owner, has_existing_review


class InMemoryReviewStore:
    """
    Process-local ReviewStorePort. A single lock serializes every write, which
    is what makes check-then-insert atomic here.
    """

    def __init__(self, clock: Clock = utcnow) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        # id -> (insertion seq, review)
        self._rows: Dict[UUID, Tuple[int, Review]] = {}
        self._seq = 0

    def _ordered(self, flt: ReviewFilter) -> List[Review]:
        with self._lock:
            rows = [(seq, r) for (seq, r) in self._rows.values() if flt.matches(r)]
        # newest first; same timestamp -> later insert first
        rows.sort(key=lambda t: (t[1].created_at, t[0]), reverse=True)
        return [r for (_seq, r) in rows]

    def find_by_id(self, review_id: UUID) -> Optional[Review]:
        with self._lock:
            hit = self._rows.get(review_id)
        return hit[1] if hit else None

    def query(self, flt: ReviewFilter, *, limit: int, offset: int = 0) -> List[Review]:
        return self._ordered(flt)[offset:offset + limit]

    def count(self, flt: ReviewFilter) -> int:
        with self._lock:
            return sum(1 for (_seq, r) in self._rows.values() if flt.matches(r))

    def ratings(self, flt: ReviewFilter) -> List[int]:
        with self._lock:
            return [r.rating for (_seq, r) in self._rows.values() if flt.matches(r)]

    def insert(self, review: Review) -> Review:
        with self._lock:
            existing = (r for (_seq, r) in self._rows.values())
            if has_existing_review(existing, review.movie_id, review.author_id):
                raise DuplicateReview()
            now = self._clock()
            stored = review.with_changes(id=uuid4(), created_at=now, updated_at=now)
            self._seq += 1
            self._rows[stored.id] = (self._seq, stored)
            return stored

    def update(self, review_id: UUID, author_id: str, patch: ReviewPatch) -> Review:
        with self._lock:
            hit = self._rows.get(review_id)
            if hit is None:
                raise ReviewNotFound()
            seq, current = hit
            ensure_owner(current, author_id, action="update")
            updated = patch.apply(current, now=self._clock())
            self._rows[review_id] = (seq, updated)
            return updated

    def delete(self, review_id: UUID, author_id: str) -> None:
        with self._lock:
            hit = self._rows.get(review_id)
            if hit is None:
                raise ReviewNotFound()
            ensure_owner(hit[1], author_id, action="delete")
            del self._rows[review_id]


class InMemoryMovieCatalog:
    def __init__(self, movies: Iterable[Movie] = ()) -> None:
        self._movies: List[Movie] = list(movies)
        self._by_id: Dict[str, Movie] = {str(m.id): m for m in self._movies}

    def exists(self, movie_id: MovieId) -> bool:
        return str(movie_id) in self._by_id

    def get(self, movie_id: MovieId) -> Movie:
        try:
            return self._by_id[str(movie_id)]
        except KeyError:
            raise MovieNotFound() from None

    def list_movies(self) -> List[Movie]:
        return list(self._movies)


class InMemoryUserDirectory:
    def __init__(self, profiles: Iterable[UserProfile] = ()) -> None:
        self._profiles: Dict[str, UserProfile] = {p.uid: p for p in profiles}
        self.calls: List[set] = []  # one entry per batch lookup

    def get_users(self, ids: Iterable[str]) -> Dict[str, UserProfile]:
        wanted = {i for i in ids if i}
        self.calls.append(wanted)
        return {i: self._profiles[i] for i in wanted if i in self._profiles}
