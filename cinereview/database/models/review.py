from __future__ import annotations

from sqlalchemy import Integer, String, Text, UniqueConstraint, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column

from cinereview.database.core.main import Base
from cinereview.database.core.service_object import ServiceObject


class Review(ServiceObject, Base):
    __tablename__ = "review"
    __table_args__ = (
        # one review per user per movie; inserts race on this, not on a pre-check
        UniqueConstraint("movie_id", "author_id", name="uq_review_movie_author"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="rating_1_5"),
        CheckConstraint("length(btrim(body)) > 0", name="body_not_blank"),
        CheckConstraint("last_updated >= date_created", name="updated_after_created"),
        Index("ix_review_movie_created", "movie_id", "date_created"),
        Index("ix_review_author_created", "author_id", "date_created"),
    )

    # No FK to movie: the catalog is an external collaborator
    movie_id: Mapped[int] = mapped_column(Integer, nullable=False)
    author_id: Mapped[str] = mapped_column(String(128), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
