from dataclasses import dataclass


def _field(data, key, *types):
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, types):
        raise TypeError(f"field {key!r} must be {' or '.join(t.__name__ for t in types)}, got {value!r}")
    return value


@dataclass(frozen=True)
class Movie:
    id: int
    name: str
    director: str
    year: int
    genre: str
    description: str
    duration_minutes: int
    imdb_rating: float

    @classmethod
    def from_dict(cls, data):
        """Build a Movie from one dataset record (dataset field names).

        Field types are checked, not coerced: a mistyped field raises TypeError.
        """
        return cls(
            id=_field(data, 'id', int),
            name=_field(data, 'movieName', str),
            director=_field(data, 'director', str),
            year=_field(data, 'year', int),
            genre=_field(data, 'genre', str),
            description=_field(data, 'description', str),
            duration_minutes=_field(data, 'duration', int),
            imdb_rating=float(_field(data, 'imdbRating', int, float))
        )

    def to_dict(self):
        return {
            'id': self.id,
            'movieName': self.name,
            'director': self.director,
            'year': self.year,
            'genre': self.genre,
            'description': self.description,
            'duration': self.duration_minutes,
            'imdbRating': self.imdb_rating
        }
