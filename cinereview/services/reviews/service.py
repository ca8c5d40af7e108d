from __future__ import annotations

from typing import Dict, List, Optional
from uuid import UUID

from cinereview.common.logging import get_logger
from cinereview.domain.dataclasses.paging import Page, PageRequest
from cinereview.domain.dataclasses.queries import ReviewFilter
from cinereview.domain.dataclasses.reports import ReviewWithAuthor
from cinereview.domain.entities.movie import MovieId
from cinereview.domain.entities.review import Review, ReviewPatch
from cinereview.domain.entities.user import UserProfile
from cinereview.domain.errors import InvalidArgument, ReviewNotFound, UpstreamUnavailable
from cinereview.domain.policies.pagination import build_page
from cinereview.domain.ports.catalog import MovieCatalogPort
from cinereview.domain.ports.identity import UserDirectoryPort
from cinereview.domain.ports.review_store import ReviewStorePort

logger = get_logger()


class ReviewService:
    """
    Review use-cases. Storage, catalog and user directory are injected ports;
    this class never talks to a database directly.

    `author_id` arguments are always the verified identity from the
    IdentityVerifier, never a client-supplied field.
    """

    def __init__(
        self,
        store: ReviewStorePort,
        catalog: MovieCatalogPort,
        users: Optional[UserDirectoryPort] = None,
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.users = users

    # ---- reads ----

    def list_reviews_for_movie(self, movie_id: MovieId, req: PageRequest) -> Page[ReviewWithAuthor]:
        return self._list(ReviewFilter(movie_id=movie_id), req)

    def list_reviews_for_user(self, user_id: str, req: PageRequest) -> Page[ReviewWithAuthor]:
        return self._list(ReviewFilter(author_id=user_id), req)

    def all_reviews_for_movie(self, movie_id: MovieId) -> List[ReviewWithAuthor]:
        """Every review of one movie, newest first, for the movie detail view."""
        flt = ReviewFilter(movie_id=movie_id)
        total = self.store.count(flt)
        rows = self.store.query(flt, limit=total) if total else []
        return self._enrich(rows)

    def get_review(self, review_id: UUID) -> ReviewWithAuthor:
        review = self.store.find_by_id(review_id)
        if review is None:
            raise ReviewNotFound()
        return self._enrich([review])[0]

    def _list(self, flt: ReviewFilter, req: PageRequest) -> Page[ReviewWithAuthor]:
        total = self.store.count(flt)
        rows = self.store.query(flt, limit=req.limit, offset=req.offset) if req.offset < total else []
        page = build_page(rows, total, req)
        profiles = self._profiles(page.items)
        return page.map(lambda r: ReviewWithAuthor(review=r, author=profiles.get(r.author_id)))

    def _profiles(self, reviews: List[Review]) -> Dict[str, UserProfile]:
        """One batch lookup per page; a missing profile never fails the page."""
        if self.users is None or not reviews:
            return {}
        try:
            return self.users.get_users({r.author_id for r in reviews})
        except UpstreamUnavailable as e:
            logger.warning("user directory unavailable, returning reviews unenriched: %s", e.message)
            return {}

    def _enrich(self, reviews: List[Review]) -> List[ReviewWithAuthor]:
        profiles = self._profiles(reviews)
        return [ReviewWithAuthor(review=r, author=profiles.get(r.author_id)) for r in reviews]

    # ---- writes ----

    def create_review(self, author_id: str, movie_id: MovieId, rating, text) -> Review:
        if movie_id is None or movie_id == "":
            raise InvalidArgument("movieId is required")
        draft = Review(movie_id=movie_id, author_id=author_id, rating=rating, body=text)
        # canonical catalog id, so "1" and 1 land on the same uniqueness key
        movie = self.catalog.get(movie_id)
        created = self.store.insert(draft.with_changes(movie_id=movie.id))
        logger.info("review %s created by %s for movie %s", created.id, author_id, movie.id)
        return created

    def update_review(self, author_id: str, review_id: UUID, rating=None, text=None) -> Review:
        patch = ReviewPatch(rating=rating, body=text).validated()
        updated = self.store.update(review_id, author_id, patch)
        logger.info("review %s updated by %s", review_id, author_id)
        return updated

    def delete_review(self, author_id: str, review_id: UUID) -> None:
        self.store.delete(review_id, author_id)
        logger.info("review %s deleted by %s", review_id, author_id)
