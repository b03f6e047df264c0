"""Search and filter rules over a CatalogStore.

An id filter, when valid, wins over everything else. Otherwise name and
genre are case-insensitive substring filters combined with AND; a blank
filter is the same as no filter.
"""


def parse_id_filter(value):
    """
    Normalise a raw id into a positive int or None.

    Only ints and strings of decimal digits are accepted. Anything else
    (None, booleans, floats, 0, negatives, unparseable strings) disables
    the id filter.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            return None
        value = int(value)
    if not isinstance(value, int):
        return None
    return value if value > 0 else None


def _normalise_text(value):
    if value is None:
        return None
    needle = value.strip().lower()
    return needle or None


def _contains(field, needle):
    return needle is None or needle in field.lower()


def search(store, name=None, movie_id=None, genre=None):
    movie_id = parse_id_filter(movie_id)
    if movie_id is not None:
        movie = store.by_id(movie_id)
        return [movie] if movie is not None else []

    name_needle = _normalise_text(name)
    genre_needle = _normalise_text(genre)

    return [
        movie
        for movie in store.all_movies()
        if _contains(movie.name, name_needle) and _contains(movie.genre, genre_needle)
    ]


def all_genres(store):
    return sorted({movie.genre for movie in store.all_movies()})
