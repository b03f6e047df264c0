from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response
import time
import functools


REQUEST_COUNT = Counter(
    'catalog_request_count',
    'Total Flask Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'catalog_request_duration_seconds',
    'Flask Request Duration',
    ['method', 'endpoint']
)


CATALOG_SIZE = Gauge(
    'catalog_movies',
    'Number of movies loaded into the catalog'
)


SEARCH_QUERY_COUNT = Counter(
    'catalog_search_queries_total',
    'Total search queries',
    ['view']
)

SEARCH_RESULTS_COUNT = Histogram(
    'catalog_search_results',
    'Number of search results returned',
    buckets=(0, 1, 2, 5, 10, 25, 50, 100)
)


MOVIE_VIEWS = Counter(
    'catalog_movie_views_total',
    'Total movie detail page views',
    ['movie_id']
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)
            status_code = _status_of(response)

            REQUEST_COUNT.labels(
                method=f.__name__,
                endpoint=f.__name__,
                http_status=status_code
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=f.__name__,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except Exception:
            REQUEST_COUNT.labels(
                method=f.__name__,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def _status_of(response):
    # Views return either a response object or a (body, status) tuple
    if isinstance(response, tuple) and len(response) > 1 and isinstance(response[1], int):
        return response[1]
    return getattr(response, 'status_code', 200)


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
