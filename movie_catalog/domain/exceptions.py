class DomainError(Exception):
    pass


class NotFoundError(DomainError):
    pass


class MovieNotFoundError(NotFoundError):
    def __init__(self, movie_id: str):
        super().__init__("Movie not found")
        self.movie_id = movie_id


class ConfigurationError(DomainError):
    pass
