# cinereview/domain/policies/movie_filters.py
from __future__ import annotations

from typing import Callable, Iterable, List

from cinereview.domain.dataclasses.queries import MovieFilter
from cinereview.domain.entities.movie import Movie
from cinereview.domain.enums.movie_sort import MovieSort


def _fold(s: str | None) -> str:
    return (s or "").casefold()


def matches_text(movie: Movie, needle: str, *, include_genre: bool = False) -> bool:
    n = _fold(needle)
    fields = [movie.title, movie.director, movie.description]
    if include_genre:
        fields.append(movie.genre)
    return any(n in _fold(f) for f in fields)


def filter_movies(movies: Iterable[Movie], f: MovieFilter) -> List[Movie]:
    out: List[Movie] = []
    genre = _fold(f.genre) if f.genre else None
    for m in movies:
        if f.search and not matches_text(m, f.search, include_genre=f.search_genre):
            continue
        if genre is not None and _fold(m.genre) != genre:
            continue
        if f.year is not None and m.year != f.year:
            continue
        if f.min_rating is not None and not (m.rating or 0.0) >= f.min_rating:
            continue
        out.append(m)
    return out


_SORT_KEYS: dict[MovieSort, Callable[[Movie], object]] = {
    MovieSort.title: lambda m: _fold(m.title),
    MovieSort.year: lambda m: -(m.year or 0),
    MovieSort.rating: lambda m: -(m.rating or 0.0),
}


def sort_movies(movies: Iterable[Movie], sort: MovieSort = MovieSort.title) -> List[Movie]:
    # sorted() is stable: ties keep source order
    return sorted(movies, key=_SORT_KEYS.get(sort, _SORT_KEYS[MovieSort.title]))
