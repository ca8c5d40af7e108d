from __future__ import annotations
from typing import List, Optional, Protocol
from uuid import UUID

from cinereview.domain.dataclasses.queries import ReviewFilter
from cinereview.domain.entities.review import Review, ReviewPatch


class ReviewStorePort(Protocol):
    """
    Owner of review records.

    insert() must make "check no (movie_id, author_id) review exists, then
    write" atomic against concurrent callers and raise DuplicateReview when
    the pair is taken. update()/delete() raise ReviewNotFound / Forbidden /
    InvalidArgument before touching state.
    """
    def insert(self, review: Review) -> Review: ...
    def find_by_id(self, review_id: UUID) -> Optional[Review]: ...
    def query(self, flt: ReviewFilter, *, limit: int, offset: int = 0) -> List[Review]: ...
    def count(self, flt: ReviewFilter) -> int: ...
    def ratings(self, flt: ReviewFilter) -> List[int]: ...
    def update(self, review_id: UUID, author_id: str, patch: ReviewPatch) -> Review: ...
    def delete(self, review_id: UUID, author_id: str) -> None: ...
