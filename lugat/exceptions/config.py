"""Configuration exceptions."""

from .base import LugatException


class ConfigError(LugatException):
    """Raised when a configuration value is invalid."""

    pass
