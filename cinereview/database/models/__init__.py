# cinereview/database/models/__init__.py

from cinereview.database.core.main import Base
from cinereview.database.models.movie import Movie
from cinereview.database.models.review import Review
from cinereview.database.models.user import UserProfile

__all__ = [
    "Base",
    "Movie",
    "Review",
    "UserProfile",
]
