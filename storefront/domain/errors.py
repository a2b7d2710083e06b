# storefront/domain/errors.py


class StorefrontError(Exception):
    """Base for errors a route handler knows how to answer."""

    status_code = 500


class InvalidRequestError(StorefrontError):
    status_code = 400


class AuthenticationError(StorefrontError):
    status_code = 401


class NotFoundError(StorefrontError):
    status_code = 404


class ConflictError(StorefrontError):
    status_code = 409


class UpstreamError(StorefrontError):
    """Another service answered with an error status."""

    status_code = 500

    def __init__(self, service: str, status: int, message: str = ""):
        self.service = service
        self.status = status
        super().__init__(message or f"{service} service responded with {status}")
