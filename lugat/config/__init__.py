"""Configuration management for Lugat."""

from .config import STORE_BACKENDS, LugatConfig
from .defaults import create_default_config
from .manager import ConfigManager

__all__ = ["LugatConfig", "STORE_BACKENDS", "create_default_config", "ConfigManager"]
