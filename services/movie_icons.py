DEFAULT_ICON = '🎬'

# First matching keyword wins
ICON_KEYWORDS = [
    ('prison', '🔒'),
    ('godfather', '🌹'),
    ('family', '👨‍👩‍👧'),
    ('knight', '🦇'),
    ('pulp', '💼'),
    ('forrest', '🪶'),
    ('inception', '🌀'),
    ('matrix', '💊'),
    ('space', '🚀'),
    ('star', '⭐'),
    ('heist', '💰'),
    ('hero', '🦸'),
    ('comedy', '😂'),
    ('action', '💥'),
]


def get_movie_icon(movie_name):
    if not movie_name:
        return DEFAULT_ICON

    lowered = movie_name.lower()
    for keyword, icon in ICON_KEYWORDS:
        if keyword in lowered:
            return icon
    return DEFAULT_ICON
