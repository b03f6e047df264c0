import logging

from catalog import MovieService


def test_get_all_movies(bundled_service):
    movies = bundled_service.get_all_movies()

    assert len(movies) > 0
    assert [movie.id for movie in movies] == sorted(movie.id for movie in movies)


def test_get_movie_by_id(bundled_service):
    movie = bundled_service.get_movie_by_id(1)

    assert movie is not None
    assert movie.id == 1


def test_get_movie_by_id_not_found(bundled_service):
    assert bundled_service.get_movie_by_id(999) is None


def test_get_movie_by_id_invalid(bundled_service):
    assert bundled_service.get_movie_by_id(None) is None
    assert bundled_service.get_movie_by_id(0) is None
    assert bundled_service.get_movie_by_id(-1) is None


def test_search_by_id_matches_lookup(bundled_service):
    for movie in bundled_service.get_all_movies():
        assert bundled_service.search_movies('ignored', movie.id, 'ignored') == [movie]


def test_search_by_name_case_insensitive(bundled_service):
    results = bundled_service.search_movies('Prison', None, None)

    assert results
    assert bundled_service.search_movies('PRISON', None, None) == results
    assert bundled_service.search_movies('prison', None, None) == results
    assert bundled_service.search_movies('  Prison  ', None, None) == results


def test_search_by_genre(bundled_service):
    results = bundled_service.search_movies(None, None, 'Drama')

    assert results
    assert all('drama' in movie.genre.lower() for movie in results)


def test_search_by_name_and_genre(bundled_service):
    results = bundled_service.search_movies('Family', None, 'Crime')

    assert [movie.name for movie in results] == ['The Family Boss']
    # 'The Family Reunion' matches the name only
    assert all('crime' in movie.genre.lower() for movie in results)


def test_search_invalid_id_returns_filtered_catalog(bundled_service):
    everything = bundled_service.get_all_movies()

    assert bundled_service.search_movies(None, 0, None) == everything
    assert bundled_service.search_movies(None, -1, None) == everything


def test_search_no_results(bundled_service):
    assert bundled_service.search_movies('NonExistentMovie', None, None) == []


def test_search_genre_partial_match(bundled_service):
    results = bundled_service.search_movies(None, None, 'Sci')

    assert results
    assert all('sci' in movie.genre.lower() for movie in results)


def test_get_all_genres(bundled_service):
    genres = bundled_service.get_all_genres()

    assert genres == sorted(set(genres))
    for movie in bundled_service.get_all_movies():
        assert movie.genre in genres


def test_unknown_id_is_logged(movie_service, caplog):
    with caplog.at_level(logging.WARNING):
        assert movie_service.search_movies(None, 42, None) == []

    assert 'No movie found with id 42' in caplog.text


def test_from_path_degrades_to_empty_catalog(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        service = MovieService.from_path(str(tmp_path / 'missing.json'))

    assert 'Catalog unavailable' in caplog.text
    assert service.get_all_movies() == []
    assert service.search_movies(None, None, None) == []
    assert service.search_movies(None, 1, None) == []
    assert service.get_all_genres() == []
