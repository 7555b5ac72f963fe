"""Exceptions raised by the Best Buy client."""


class BestBuyError(Exception):
    """Base class for all client errors."""


class AuthorizationError(BestBuyError):
    """No API key is configured for the client."""


class InvalidArgumentError(BestBuyError, ValueError):
    """The arguments describe a request the API does not support."""


class ServiceError(BestBuyError):
    """Communicating with the service failed.

    Transport failures, non-2xx responses and undecodable bodies all map to
    this one error. The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
