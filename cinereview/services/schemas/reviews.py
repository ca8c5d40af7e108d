# cinereview/services/schemas/reviews.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, StrictInt

from cinereview.services.schemas.base import CamelModel, PageMeta


class ReviewCreate(CamelModel):
    # author comes from the bearer token; any userId in the body is ignored
    movie_id: int
    rating: StrictInt  # 1..5, range checked by the domain
    text: str = Field(..., max_length=5000)


class ReviewUpdate(CamelModel):
    rating: Optional[StrictInt] = None
    text: Optional[str] = Field(default=None, max_length=5000)


class ReviewRead(CamelModel):
    id: UUID
    movie_id: int
    user_id: str
    rating: int
    text: str
    created_at: datetime
    updated_at: datetime
    user_name: Optional[str] = None
    user_photo: Optional[str] = None


class ReviewPageRead(PageMeta):
    reviews: List[ReviewRead] = []
