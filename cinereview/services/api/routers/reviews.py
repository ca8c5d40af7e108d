# cinereview/services/api/routers/reviews.py
from __future__ import annotations

from http import HTTPStatus
from uuid import UUID

from fastapi import APIRouter, Depends, Path

from cinereview.common.settings import get_settings
from cinereview.domain.dataclasses.paging import PageRequest
from cinereview.services.api.deps import current_user_id, get_review_service, page_request
from cinereview.services.mappers.review import enriched_to_read, to_review_page, to_review_read
from cinereview.services.reviews.service import ReviewService
from cinereview.services.schemas import ReviewCreate, ReviewPageRead, ReviewRead, ReviewUpdate

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/reviews", tags=["reviews"])


# declared before /{review_id} so "user" is never parsed as an id
@router.get("/user/{user_id}", response_model=ReviewPageRead)
def list_user_reviews(
    user_id: str = Path(..., min_length=1, max_length=128),
    req: PageRequest = Depends(page_request),
    svc: ReviewService = Depends(get_review_service),
) -> ReviewPageRead:
    return to_review_page(svc.list_reviews_for_user(user_id, req))


@router.get("/{review_id}", response_model=ReviewRead)
def get_review(
    review_id: UUID = Path(...),
    svc: ReviewService = Depends(get_review_service),
) -> ReviewRead:
    return enriched_to_read(svc.get_review(review_id))


@router.post("", response_model=ReviewRead, status_code=HTTPStatus.CREATED)
def create_review(
    payload: ReviewCreate,
    user_id: str = Depends(current_user_id),
    svc: ReviewService = Depends(get_review_service),
) -> ReviewRead:
    created = svc.create_review(user_id, payload.movie_id, payload.rating, payload.text)
    return to_review_read(created)


@router.put("/{review_id}", response_model=ReviewRead)
def update_review(
    payload: ReviewUpdate,
    review_id: UUID = Path(...),
    user_id: str = Depends(current_user_id),
    svc: ReviewService = Depends(get_review_service),
) -> ReviewRead:
    updated = svc.update_review(user_id, review_id, rating=payload.rating, text=payload.text)
    return to_review_read(updated)


@router.delete("/{review_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_review(
    review_id: UUID = Path(...),
    user_id: str = Depends(current_user_id),
    svc: ReviewService = Depends(get_review_service),
) -> None:
    svc.delete_review(user_id, review_id)
    return None
