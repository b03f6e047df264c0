import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from catalog import CatalogStore, Movie, MovieService
from services.review_service import Review, ReviewService


@pytest.fixture
def sample_movies():
    return [
        Movie(1, 'Test Movie', 'Test Director', 2023, 'Drama', 'Test description', 120, 4.5),
        Movie(2, 'Action Movie', 'Action Director', 2022, 'Action', 'Action description', 110, 4.0),
        Movie(3, 'Comedy Film', 'Comedy Director', 2021, 'Comedy', 'Comedy description', 95, 3.5),
    ]


@pytest.fixture
def store(sample_movies):
    return CatalogStore(sample_movies)


@pytest.fixture
def movie_service(store):
    return MovieService(store)


@pytest.fixture
def bundled_service():
    from config import Config
    return MovieService.from_path(Config.MOVIES_DATA_PATH)


@pytest.fixture
def review_service():
    return ReviewService([
        Review(1, 'alice', 5, 'Loved it'),
        Review(1, 'bob', 3.5, 'Decent'),
        Review(2, 'carol', 4, 'Fun ride'),
    ])


@pytest.fixture
def client(movie_service, review_service):
    from app import create_app

    app = create_app(movie_service=movie_service, review_service=review_service)
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def write_json(tmp_path):
    def _write(payload, name='data.json'):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding='utf-8')
        else:
            path.write_text(json.dumps(payload), encoding='utf-8')
        return str(path)
    return _write
