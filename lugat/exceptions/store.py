"""Data store related exceptions."""

from .base import LugatException


class QueryError(LugatException):
    """Raised when a prefix or article query against the store fails."""

    pass


class StoreSetupError(LugatException):
    """Raised when a store cannot be opened, created or imported into."""

    pass
