"""Exceptions raised by the library catalog."""


class CatalogException(Exception):
    """Base exception for catalog operations."""


class InvalidArgumentError(CatalogException, ValueError):
    """Raised when an argument names something the catalog does not recognize."""


class NotFoundError(CatalogException):
    """Raised when a book or patron is not known to the catalog."""
