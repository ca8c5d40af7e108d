# cinereview/domain/errors.py
from __future__ import annotations


class CineReviewError(Exception):
    """
    Root of the documented failure kinds. Anything raised by the core that is
    NOT a subclass of this is an internal fault and must surface as such.
    """
    code: str = "error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class InvalidArgument(CineReviewError, ValueError):
    code = "invalid_argument"


class Unauthenticated(CineReviewError):
    code = "unauthenticated"


class Forbidden(CineReviewError):
    code = "forbidden"


class NotFound(CineReviewError):
    code = "not_found"


class MovieNotFound(NotFound):
    def __init__(self, message: str = "Movie not found") -> None:
        super().__init__(message)


class ReviewNotFound(NotFound):
    def __init__(self, message: str = "Review not found") -> None:
        super().__init__(message)


class DuplicateReview(CineReviewError):
    code = "duplicate_review"

    def __init__(self, message: str = "You have already reviewed this movie") -> None:
        super().__init__(message)


class UpstreamUnavailable(CineReviewError):
    code = "upstream_unavailable"
