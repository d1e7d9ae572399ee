# storefront/domain/errors.py


class ResourceNotFound(Exception):
    """Raised by a store when the requested record does not exist."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
