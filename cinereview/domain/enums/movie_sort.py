from __future__ import annotations
from enum import StrEnum

class MovieSort(StrEnum):
    title = "title"
    year = "year"
    rating = "rating"

    @classmethod
    def parse(cls, value: str | None) -> "MovieSort":
        # unknown keys fall back to the default ordering
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.title
