# storefront/domain/errors.py


class ServiceError(Exception):
    """Base for errors a service hands back to its router."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(ServiceError):
    """Malformed or missing request input."""


class NotFound(ServiceError):
    """The product, cart or order does not exist."""


class InternalError(ServiceError):
    """A datastore or serialization failure. The message never carries store detail."""
