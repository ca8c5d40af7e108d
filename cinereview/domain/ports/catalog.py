from __future__ import annotations
from typing import List, Protocol

from cinereview.domain.entities.movie import Movie, MovieId

class MovieCatalogPort(Protocol):
    def exists(self, movie_id: MovieId) -> bool: ...
    # raises MovieNotFound
    def get(self, movie_id: MovieId) -> Movie: ...
    # source order; callers sort
    def list_movies(self) -> List[Movie]: ...
