"""Domain errors raised by the catalog query and mutation layers."""


class CatalogError(Exception):
    """Base class for catalog failures carrying the HTTP status they map to."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(CatalogError):
    """A required product field is missing or malformed."""

    status_code = 400


class AuthorizationError(CatalogError):
    """The admin key supplied with a mutation does not match the configured one."""

    status_code = 401


class NotFoundError(CatalogError):
    """No product matches the requested slug."""

    status_code = 404


class StoreError(CatalogError):
    """The catalog store rejected or failed to execute a statement."""

    status_code = 500
