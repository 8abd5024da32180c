"""Errors raised by the catalog services.

Each error carries the HTTP status the API layer answers with, so the
error handlers can map them without knowing every subclass.
"""


class CatalogError(Exception):
    status_code = 500
    message = "An unexpected error occurred"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(CatalogError):
    """Missing or malformed input"""

    status_code = 400
    message = "Invalid input"


class NotFoundError(CatalogError):
    """Referenced entity does not exist"""

    status_code = 404
    message = "Resource not found"


class ConflictError(CatalogError):
    """Uniqueness violation"""

    status_code = 409
    message = "Resource already exists"


class StoreError(CatalogError):
    """The database could not complete the operation"""

    status_code = 500
    message = "Database error"
