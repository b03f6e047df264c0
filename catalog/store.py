"""In-memory movie catalog built once from the bundled JSON dataset."""
import json
import logging

from .errors import DataLoadError
from .models import Movie


logger = logging.getLogger(__name__)


class CatalogStore:
    """Ordered, read-only set of movies with an id index.

    Dataset order is kept for "all movies" listings; lookups by id go
    through a dict built alongside the sequence.
    """

    def __init__(self, movies=()):
        self._movies = tuple(movies)
        self._by_id = {}
        for movie in self._movies:
            if movie.id in self._by_id:
                raise ValueError(f"Duplicate movie id: {movie.id}")
            self._by_id[movie.id] = movie

    def __len__(self):
        return len(self._movies)

    def __iter__(self):
        return iter(self._movies)

    def all_movies(self):
        return self._movies

    def by_id(self, movie_id):
        return self._by_id.get(movie_id)


def load_movies(path):
    """
    Parse the movie dataset at ``path``.

    The file must hold a JSON array of objects with the fields
    ``id, movieName, director, year, genre, description, duration,
    imdbRating``. Array order becomes catalog order.

    Raises:
        DataLoadError: the file is missing, unreadable or malformed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except OSError as e:
        raise DataLoadError(path, str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataLoadError(path, f"invalid JSON: {e}") from e

    if not isinstance(records, list):
        raise DataLoadError(path, "expected a JSON array of movies")

    movies = []
    for index, record in enumerate(records):
        try:
            movies.append(Movie.from_dict(record))
        except KeyError as e:
            raise DataLoadError(path, f"record {index} is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise DataLoadError(path, f"record {index} is invalid: {e}") from e

    return movies


def load_catalog(path):
    """
    Build a CatalogStore from ``path`` without raising on bad data.

    Returns:
        tuple: (store, error) where error is None on success. On failure
        the store is empty and error is the DataLoadError.
    """
    try:
        movies = load_movies(path)
        store = CatalogStore(movies)
    except DataLoadError as e:
        return CatalogStore(), e
    except ValueError as e:
        return CatalogStore(), DataLoadError(path, str(e))

    logger.info("Loaded %d movies from %s", len(store), path)
    return store, None
