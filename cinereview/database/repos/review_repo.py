# cinereview/database/repos/review_repo.py
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cinereview.common.clock import Clock, utcnow
from cinereview.common.logging import get_logger
from cinereview.database.models.review import Review as DBReview
from cinereview.database.repos._mapping import to_domain_review
from cinereview.domain.dataclasses.queries import ReviewFilter
from cinereview.domain.entities.review import Review, ReviewPatch
from cinereview.domain.errors import DuplicateReview, ReviewNotFound
from cinereview.domain.policies.review_rules import ensure_owner

logger = get_logger()

UNIQUE_PAIR_CONSTRAINT = "uq_review_movie_author"


def _violated_constraint(e: IntegrityError) -> Optional[str]:
    diag = getattr(e.orig, "diag", None)
    return getattr(diag, "constraint_name", None)


class SqlAlchemyReviewStore:
    """
    SQLAlchemy-backed review store that satisfies ReviewStorePort.

    Notes
    -----
    • Uniqueness is guaranteed by `uq_review_movie_author`. The pre-check only
      gives the common case a cheap answer; the INSERT runs in a SAVEPOINT so
      a lost race surfaces as DuplicateReview without poisoning the request
      transaction.
    • update/delete lock the row (SELECT ... FOR UPDATE) before the ownership
      check, so the check and the write see the same row.
    • Caller controls commit (request-scoped transaction).
    """

    def __init__(self, db: Session, clock: Clock = utcnow) -> None:
        self.db = db
        self._clock = clock

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    @staticmethod
    def _where(flt: ReviewFilter) -> list:
        conds = []
        if flt.movie_id is not None:
            conds.append(DBReview.movie_id == int(flt.movie_id))
        if flt.author_id is not None:
            conds.append(DBReview.author_id == flt.author_id)
        return conds

    def find_by_id(self, review_id: UUID) -> Optional[Review]:
        row = self.db.get(DBReview, review_id)
        return to_domain_review(row) if row else None

    def query(self, flt: ReviewFilter, *, limit: int, offset: int = 0) -> List[Review]:
        stmt = (
            select(DBReview)
            .where(*self._where(flt))
            .order_by(DBReview.date_created.desc(), DBReview.id.desc())
            .offset(offset)
            .limit(limit)
        )
        rows = self.db.execute(stmt).scalars().all()
        return [to_domain_review(r) for r in rows]

    def count(self, flt: ReviewFilter) -> int:
        stmt = select(func.count()).select_from(DBReview).where(*self._where(flt))
        return int(self.db.execute(stmt).scalar_one())

    def ratings(self, flt: ReviewFilter) -> List[int]:
        stmt = select(DBReview.rating).where(*self._where(flt))
        return [int(r) for (r,) in self.db.execute(stmt).all()]

    def _exists_pair(self, movie_id, author_id: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(DBReview)
            .where(DBReview.movie_id == int(movie_id), DBReview.author_id == author_id)
        )
        return self.db.execute(stmt).scalar_one() > 0

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def insert(self, review: Review) -> Review:
        if self._exists_pair(review.movie_id, review.author_id):
            raise DuplicateReview()

        now = self._clock()
        orm = DBReview(
            movie_id=int(review.movie_id),
            author_id=review.author_id,
            rating=review.rating,
            body=review.body,
            date_created=now,
            last_updated=now,
        )
        try:
            with self.db.begin_nested():
                self.db.add(orm)
        except IntegrityError as e:
            if _violated_constraint(e) == UNIQUE_PAIR_CONSTRAINT:
                raise DuplicateReview() from e
            raise
        self.db.refresh(orm)
        return to_domain_review(orm)

    def _locked(self, review_id: UUID) -> DBReview:
        stmt = select(DBReview).where(DBReview.id == review_id).with_for_update()
        row = self.db.execute(stmt).scalars().first()
        if row is None:
            raise ReviewNotFound()
        return row

    def update(self, review_id: UUID, author_id: str, patch: ReviewPatch) -> Review:
        row = self._locked(review_id)
        current = to_domain_review(row)
        ensure_owner(current, author_id, action="update")

        updated = patch.apply(current, now=self._clock())
        row.rating = updated.rating
        row.body = updated.body
        # explicit value suppresses the column's onupdate default
        row.last_updated = updated.updated_at
        self.db.flush()
        return to_domain_review(row)

    def delete(self, review_id: UUID, author_id: str) -> None:
        row = self._locked(review_id)
        ensure_owner(to_domain_review(row), author_id, action="delete")
        self.db.delete(row)
        self.db.flush()
        logger.debug("review %s deleted", review_id)
