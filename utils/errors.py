class BlogError(Exception):
    """Base class for errors that map to an HTTP status"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogError):
    status_code = 400


class NotFound(BlogError):
    status_code = 404


class StoreUninitialized(BlogError):
    status_code = 500

    def __init__(self, message: str = "Posts data not initialized"):
        super().__init__(message)
