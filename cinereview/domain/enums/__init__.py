from cinereview.domain.enums.movie_sort import MovieSort
__all__ = [
    "MovieSort",
]
