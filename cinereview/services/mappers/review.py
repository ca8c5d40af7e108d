# cinereview/services/mappers/review.py
from __future__ import annotations

from cinereview.domain.dataclasses.paging import Page
from cinereview.domain.dataclasses.reports import ReviewWithAuthor
from cinereview.domain.entities.review import Review
from cinereview.services.schemas.reviews import ReviewPageRead, ReviewRead


def to_review_read(review: Review, author=None) -> ReviewRead:
    return ReviewRead(
        id=review.id,
        movie_id=review.movie_id,
        user_id=review.author_id,
        rating=review.rating,
        text=review.body,
        created_at=review.created_at,
        updated_at=review.updated_at,
        user_name=author.user_name if author else None,
        user_photo=author.photo_url if author else None,
    )


def enriched_to_read(item: ReviewWithAuthor) -> ReviewRead:
    return to_review_read(item.review, item.author)


def to_review_page(page: Page[ReviewWithAuthor]) -> ReviewPageRead:
    return ReviewPageRead(
        reviews=[enriched_to_read(x) for x in page.items],
        current_page=page.current_page,
        total_pages=page.total_pages,
        total_count=page.total_count,
        has_next_page=page.has_next_page,
        has_prev_page=page.has_prev_page,
    )
