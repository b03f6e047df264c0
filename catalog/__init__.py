from .errors import DataLoadError
from .models import Movie
from .store import CatalogStore, load_catalog, load_movies
from .search import all_genres, parse_id_filter, search
from .movie_service import MovieService

__all__ = [
    'DataLoadError',
    'Movie',
    'CatalogStore',
    'load_catalog',
    'load_movies',
    'all_genres',
    'parse_id_filter',
    'search',
    'MovieService'
]
