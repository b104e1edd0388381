"""Product error kinds.

Raised by the store and the router; the application's exception
handlers translate them into JSON responses of the form
``{response_key: message}`` with the class's status code.
"""

from __future__ import annotations


class ProductError(Exception):
    """Base class for errors carrying a client-facing message."""

    status_code = 500
    response_key = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProductValidationError(ProductError):
    """A required field is missing from a create request."""

    status_code = 422


class ProductNotFoundError(ProductError):
    """No product matches the given identifier or name."""

    status_code = 404
    response_key = "message"


class StoreError(ProductError):
    """The store failed while executing an operation."""
