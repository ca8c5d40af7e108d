# cinereview/database/repos/_mapping.py
from __future__ import annotations
from cinereview.database.models.movie import Movie as DBMovie
from cinereview.database.models.review import Review as DBReview
from cinereview.database.models.user import UserProfile as DBUserProfile
from cinereview.domain.entities.movie import Movie as DomainMovie
from cinereview.domain.entities.review import Review as DomainReview
from cinereview.domain.entities.user import UserProfile as DomainUserProfile


def to_domain_review(row: DBReview) -> DomainReview:
    return DomainReview(
        id=row.id,
        movie_id=row.movie_id,
        author_id=row.author_id,
        rating=row.rating,
        body=row.body,
        created_at=row.date_created,
        updated_at=row.last_updated,
    )


def to_domain_movie(row: DBMovie) -> DomainMovie:
    return DomainMovie(
        id=row.id,
        title=row.title,
        year=row.release_year,
        rating=float(row.rating) if row.rating is not None else 0.0,
        genre=row.genre or "",
        director=row.director or "",
        duration=row.duration_min,
        description=row.description or "",
        poster=row.poster_url,
    )


def to_db_movie(movie: DomainMovie) -> DBMovie:
    return DBMovie(
        id=int(movie.id),
        title=movie.title,
        release_year=movie.year,
        rating=movie.rating,
        genre=movie.genre,
        director=movie.director,
        duration_min=movie.duration,
        description=movie.description,
        poster_url=movie.poster,
    )


def to_domain_user(row: DBUserProfile) -> DomainUserProfile:
    return DomainUserProfile(
        uid=row.uid,
        display_name=row.display_name,
        email=row.email,
        photo_url=row.photo_url,
    )
