from cinereview.services.schemas.reviews import (
    ReviewCreate,
    ReviewUpdate,
    ReviewRead,
    ReviewPageRead,
)
from cinereview.services.schemas.movies import (
    MovieRead,
    MovieWithStatsRead,
    MovieDetailRead,
    MoviePageRead,
    SearchFiltersRead,
    SearchPageRead,
    CatalogStatsRead,
)
from cinereview.services.schemas.errors import ErrorRead

__all__ = [
    "ReviewCreate",
    "ReviewUpdate",
    "ReviewRead",
    "ReviewPageRead",
    "MovieRead",
    "MovieWithStatsRead",
    "MovieDetailRead",
    "MoviePageRead",
    "SearchFiltersRead",
    "SearchPageRead",
    "CatalogStatsRead",
    "ErrorRead",
]
