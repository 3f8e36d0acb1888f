"""Configuration classes for Lugat."""

from dataclasses import dataclass, field
from pathlib import Path

from lugat.exceptions import ConfigError

STORE_BACKENDS = ("sqlite", "remote")


@dataclass(frozen=True)
class LugatConfig:
    """Immutable configuration for the lookup widget and its data store.

    Frozen so that a config can be shared between the GUI thread and
    query workers without copying.
    """

    # Data store settings
    store_backend: str = "sqlite"  # "sqlite" or "remote"
    db_path: Path = field(default_factory=lambda: Path.home() / ".lugat" / "lugat.db")
    api_url: str = ""  # GraphQL endpoint of the hosted dictionary API
    api_key: str = ""
    request_timeout: float = 10.0  # Seconds per HTTP request
    page_size: int = 100  # Items requested per GraphQL page

    # Rendering settings
    abbreviation_dict: str = "crh-ru"  # Dictionary whose entries get abbreviation styling
    link_scheme: str = "lookup"  # URL scheme for cross-reference links

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        """Normalize paths and reject values the store cannot work with."""
        if isinstance(self.db_path, str):
            object.__setattr__(self, "db_path", Path(self.db_path))
        if not isinstance(self.db_path, Path):
            raise ConfigError(f"db_path must be a path, got {self.db_path!r}")

        if self.store_backend not in STORE_BACKENDS:
            raise ConfigError(
                f"Unknown store backend: {self.store_backend!r} "
                f"(expected one of {', '.join(STORE_BACKENDS)})"
            )
        if self.request_timeout <= 0:
            raise ConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.page_size <= 0:
            raise ConfigError(f"page_size must be positive, got {self.page_size}")
