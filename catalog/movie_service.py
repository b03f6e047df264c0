import logging

from .search import all_genres, parse_id_filter, search
from .store import CatalogStore, load_catalog


logger = logging.getLogger(__name__)


class MovieService:
    """Read-only operations over the movie catalog used by the web views."""

    def __init__(self, store=None):
        self.store = store if store is not None else CatalogStore()
        self._genres = all_genres(self.store)

    @classmethod
    def from_path(cls, path):
        store, error = load_catalog(path)
        if error is not None:
            logger.error("Catalog unavailable, serving an empty catalog: %s", error)
        return cls(store)

    def get_all_movies(self):
        return list(self.store.all_movies())

    def get_movie_by_id(self, movie_id):
        movie_id = parse_id_filter(movie_id)
        if movie_id is None:
            return None
        return self.store.by_id(movie_id)

    def search_movies(self, name=None, movie_id=None, genre=None):
        logger.info("Searching movies with name=%r, id=%r, genre=%r", name, movie_id, genre)

        results = search(self.store, name=name, movie_id=movie_id, genre=genre)

        if parse_id_filter(movie_id) is not None and not results:
            logger.warning("No movie found with id %s", movie_id)

        logger.info("Search completed, found %d movies", len(results))
        return results

    def get_all_genres(self):
        # computed once in __init__
        return list(self._genres)
