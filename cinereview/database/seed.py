# cinereview/database/seed.py
"""
Sample catalog + author profiles.

    python -m cinereview.database.seed

Idempotent: existing movie ids / user uids are left alone.
"""
from __future__ import annotations

from typing import Iterable, List

from sqlalchemy.orm import Session

from cinereview.common.logging import get_logger
from cinereview.database.models.movie import Movie as DBMovie
from cinereview.database.repos._mapping import to_db_movie
from cinereview.database.repos.user_repo import SqlAlchemyUserDirectory
from cinereview.domain.entities.movie import Movie
from cinereview.domain.entities.user import UserProfile

logger = get_logger()

_POSTER_BASE = "https://image.tmdb.org/t/p/w500"

SAMPLE_MOVIES: List[Movie] = [
    Movie(
        id=1,
        title="The Shawshank Redemption",
        year=1994,
        rating=9.3,
        genre="Drama",
        director="Frank Darabont",
        duration=142,
        poster=f"{_POSTER_BASE}/q6y0Go1tsGEsmtFryDOJo3dEmqu.jpg",
        description="Two imprisoned men bond over a number of years, finding solace and eventual "
                    "redemption through acts of common decency.",
    ),
    Movie(
        id=2,
        title="The Godfather",
        year=1972,
        rating=9.2,
        genre="Crime",
        director="Francis Ford Coppola",
        duration=175,
        poster=f"{_POSTER_BASE}/3bhkrj58Vtu7enYsRolD1fZdja1.jpg",
        description="The aging patriarch of an organized crime dynasty transfers control of his "
                    "clandestine empire to his reluctant son.",
    ),
    Movie(
        id=3,
        title="The Dark Knight",
        year=2008,
        rating=9.0,
        genre="Action",
        director="Christopher Nolan",
        duration=152,
        poster=f"{_POSTER_BASE}/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        description="When the menace known as the Joker wreaks havoc and chaos on the people of Gotham, "
                    "Batman must accept one of the greatest psychological and physical tests of his "
                    "ability to fight injustice.",
    ),
    Movie(
        id=4,
        title="Pulp Fiction",
        year=1994,
        rating=8.9,
        genre="Crime",
        director="Quentin Tarantino",
        duration=154,
        poster=f"{_POSTER_BASE}/d5iIlFn5s0ImszYzBPb8JPIfbXD.jpg",
        description="The lives of two mob hitmen, a boxer, a gangster and his wife, and a pair of diner "
                    "bandits intertwine in four tales of violence and redemption.",
    ),
    Movie(
        id=5,
        title="Forrest Gump",
        year=1994,
        rating=8.8,
        genre="Drama",
        director="Robert Zemeckis",
        duration=142,
        poster=f"{_POSTER_BASE}/saHP97rTPS5eLwERh_sVru84Gbp.jpg",
        description="The presidencies of Kennedy and Johnson, the Vietnam War, the Watergate scandal and "
                    "other historical events unfold from the perspective of an Alabama man with an IQ of 75.",
    ),
]

SAMPLE_USERS: List[UserProfile] = [
    UserProfile(uid="user123", display_name="John Doe"),
    UserProfile(uid="user456", display_name="Jane Smith"),
    UserProfile(uid="user789", display_name="Mike Johnson"),
]


def seed_movies(db: Session, movies: Iterable[Movie] = SAMPLE_MOVIES) -> int:
    added = 0
    for m in movies:
        if db.get(DBMovie, int(m.id)) is None:
            db.add(to_db_movie(m))
            added += 1
    return added


def seed_users(db: Session, users: Iterable[UserProfile] = SAMPLE_USERS) -> int:
    users = list(users)
    directory = SqlAlchemyUserDirectory(db)
    known = directory.get_users(u.uid for u in users)
    fresh = [u for u in users if u.uid not in known]
    for u in fresh:
        directory.upsert(u)
    return len(fresh)


def main() -> None:
    from cinereview.database.core.main import SessionLocal

    with SessionLocal.begin() as db:
        n_movies = seed_movies(db)
        n_users = seed_users(db)
    logger.info("seeded %d movies, %d user profiles", n_movies, n_users)


if __name__ == "__main__":
    main()
