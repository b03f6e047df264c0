"""Movie reviews loaded from a JSON file"""
import json
import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Review:
    movie_id: int
    user_name: str
    rating: float
    comment: str


class ReviewService:

    def __init__(self, reviews=()):
        self._by_movie = {}
        for review in reviews:
            self._by_movie.setdefault(review.movie_id, []).append(review)

    @classmethod
    def from_path(cls, path):
        """
        Load reviews from a JSON array of
        {movieId, userName, rating, comment} objects.

        A missing or malformed file yields an empty review set.
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                records = json.load(f)
            reviews = [
                Review(
                    movie_id=int(record['movieId']),
                    user_name=str(record['userName']),
                    rating=float(record['rating']),
                    comment=str(record['comment'])
                )
                for record in records
            ]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Reviews unavailable from %s: %s", path, e)
            return cls()

        logger.info("Loaded %d reviews from %s", len(reviews), path)
        return cls(reviews)

    def get_reviews_for_movie(self, movie_id):
        return list(self._by_movie.get(movie_id, []))
