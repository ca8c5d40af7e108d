from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, Numeric, Text, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column

from cinereview.database.core.main import Base


class Movie(Base):
    """Read-only catalog row. Ids are external (seeded / TMDB-style ints)."""
    __tablename__ = "movie"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 0 AND 10", name="rating_0_10"),
        Index("ix_movie_genre", "genre"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[float] = mapped_column(Numeric(3, 1), nullable=False, default=0)
    genre: Mapped[str] = mapped_column(Text, nullable=False, default="")
    director: Mapped[str] = mapped_column(Text, nullable=False, default="")
    duration_min: Mapped[Optional[int]] = mapped_column(Integer)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    poster_url: Mapped[Optional[str]] = mapped_column(Text)
