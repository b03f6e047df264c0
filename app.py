from flask import Flask, jsonify, request, render_template, redirect, url_for
from config import Config
import logging

from catalog import MovieService
from services.review_service import ReviewService
from services.movie_icons import get_movie_icon

from metrics import (
    metrics_endpoint, track_request,
    CATALOG_SIZE, SEARCH_QUERY_COUNT,
    SEARCH_RESULTS_COUNT, MOVIE_VIEWS
)

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


NO_RESULTS_MESSAGE = (
    'No movies found matching your search. '
    'Try different criteria or go back to see all movies.'
)


def _search_criteria():
    """Read the optional name/id/genre query parameters.

    An id that does not parse as an integer is treated as absent.
    """
    name = request.args.get('name')
    movie_id = request.args.get('id', type=int)
    genre = request.args.get('genre')
    return name, movie_id, genre


def _has_criteria(name, movie_id, genre):
    return bool(
        (name and name.strip())
        or (movie_id is not None and movie_id > 0)
        or (genre and genre.strip())
    )


def create_app(movie_service=None, review_service=None):
    app = Flask(__name__)
    app.config.from_object(Config)

    if movie_service is None:
        movie_service = MovieService.from_path(app.config['MOVIES_DATA_PATH'])
    if review_service is None:
        review_service = ReviewService.from_path(app.config['REVIEWS_DATA_PATH'])

    app.extensions['movie_service'] = movie_service
    app.extensions['review_service'] = review_service

    CATALOG_SIZE.set(len(movie_service.get_all_movies()))


    @app.route('/')
    def home():
        return redirect(url_for('movies_list'))


    @app.route('/health')
    @track_request
    def health():
        return jsonify({
            'status': 'healthy',
            'service': 'movie-catalog',
            'version': '1.0.0',
            'movies': len(movie_service.get_all_movies())
        }), 200


    @app.route('/movies')
    @track_request
    def movies_list():
        name, movie_id, genre = _search_criteria()
        logger.info("Fetching movies with name=%r, id=%r, genre=%r", name, movie_id, genre)

        context = {}
        if _has_criteria(name, movie_id, genre):
            SEARCH_QUERY_COUNT.labels(view='html').inc()
            movies = movie_service.search_movies(name, movie_id, genre)
            SEARCH_RESULTS_COUNT.observe(len(movies))

            context.update(
                search_performed=True,
                search_name=name,
                search_id=movie_id,
                search_genre=genre
            )
            if not movies:
                context.update(no_results=True, message=NO_RESULTS_MESSAGE)
        else:
            movies = movie_service.get_all_movies()
            context['search_performed'] = False

        return render_template(
            'movies.html',
            movies=movies,
            all_genres=movie_service.get_all_genres(),
            **context
        )


    @app.route('/movies/<int:movie_id>/details')
    @track_request
    def movie_details(movie_id):
        logger.info("Fetching details for movie id %s", movie_id)

        movie = movie_service.get_movie_by_id(movie_id)
        if movie is None:
            logger.warning("Movie with id %s not found", movie_id)
            return render_template(
                'error.html',
                title='Movie Not Found',
                message=f'Movie with ID {movie_id} was not found.'
            ), 404

        MOVIE_VIEWS.labels(movie_id=movie.id).inc()

        return render_template(
            'movie_details.html',
            movie=movie,
            movie_icon=get_movie_icon(movie.name),
            all_reviews=review_service.get_reviews_for_movie(movie.id)
        )


    @app.route('/movies/search')
    @track_request
    def search_api():
        name, movie_id, genre = _search_criteria()
        logger.info("API search request: name=%r, id=%r, genre=%r", name, movie_id, genre)

        if not _has_criteria(name, movie_id, genre):
            logger.warning("Empty search criteria, returning all movies")
            movies = movie_service.get_all_movies()
            return jsonify({
                'results': [movie.to_dict() for movie in movies],
                'count': len(movies)
            })

        SEARCH_QUERY_COUNT.labels(view='api').inc()

        try:
            movies = movie_service.search_movies(name, movie_id, genre)
        except Exception as e:
            logger.exception("Search failed")
            return jsonify({'error': 'Search failed', 'details': str(e)}), 500

        SEARCH_RESULTS_COUNT.observe(len(movies))

        return jsonify({
            'results': [movie.to_dict() for movie in movies],
            'count': len(movies)
        })


    @app.route('/api/genres')
    @track_request
    def genres_api():
        return jsonify({'genres': movie_service.get_all_genres()})


    @app.route('/metrics')
    def metrics():
        return metrics_endpoint()


    return app


if __name__ == '__main__':
    app = create_app()
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
