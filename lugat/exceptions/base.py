"""Base exception classes for Lugat."""


class LugatException(Exception):
    """Base exception for all Lugat errors.

    All custom exceptions in the lugat package should inherit
    from this base class for consistent error handling.
    """

    pass
