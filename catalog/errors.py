class DataLoadError(Exception):
    """Raised when the movie dataset cannot be read or parsed."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load movies from {path}: {reason}")
