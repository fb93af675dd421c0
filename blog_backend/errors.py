class ConfigurationError(RuntimeError):
    """Raised at startup when the process configuration is unusable."""


class BlogError(Exception):
    """Base for errors that map directly onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogError):
    status_code = 400


class AuthError(BlogError):
    status_code = 401


class Forbidden(BlogError):
    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFound(BlogError):
    status_code = 404


class Conflict(BlogError):
    status_code = 409


class StorageError(BlogError):
    status_code = 500
