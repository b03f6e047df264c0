from .review_service import Review, ReviewService
from .movie_icons import get_movie_icon

__all__ = [
    'Review',
    'ReviewService',
    'get_movie_icon'
]
