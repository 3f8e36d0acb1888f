"""Helpers shared by CLI subcommands."""

from lugat.config import ConfigManager, LugatConfig


def config_from_args(args) -> LugatConfig:
    """Load the saved configuration with command line overrides applied.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration for this invocation

    Raises:
        ConfigError: If an override is invalid
    """
    overrides = {}
    if getattr(args, "db", None):
        overrides["db_path"] = args.db
    if getattr(args, "api_url", None):
        overrides["store_backend"] = "remote"
        overrides["api_url"] = args.api_url
    if getattr(args, "api_key", None):
        overrides["api_key"] = args.api_key
    return ConfigManager.load_config(**overrides)
