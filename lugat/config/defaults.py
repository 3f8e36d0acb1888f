"""Default configuration values for Lugat."""

from .config import LugatConfig


def create_default_config(**overrides) -> LugatConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        LugatConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            store_backend="remote",
            api_url="https://example.appsync-api.eu-west-1.amazonaws.com/graphql",
        )
    """
    return LugatConfig(**overrides)
