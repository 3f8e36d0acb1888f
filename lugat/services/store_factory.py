"""Factory for the configured data store."""

import logging

from lugat.config import LugatConfig
from lugat.exceptions import StoreSetupError
from lugat.interfaces import DataStore
from lugat.services.stores import RemoteStore, SQLiteStore

logger = logging.getLogger(__name__)


def create_store(config: LugatConfig) -> DataStore:
    """Create the data store selected by ``config.store_backend``.

    Args:
        config: Application configuration

    Returns:
        A ready-to-query store

    Raises:
        StoreSetupError: If the remote backend has no endpoint configured
    """
    if config.store_backend == "remote":
        if not config.api_url:
            raise StoreSetupError("Remote store selected but no api_url is configured")
        logger.info(f"Using remote dictionary API at {config.api_url}")
        return RemoteStore(
            api_url=config.api_url,
            api_key=config.api_key,
            timeout=config.request_timeout,
            page_size=config.page_size,
        )

    store = SQLiteStore(config.db_path)
    if not store.is_available():
        logger.warning(f"Dictionary database not found at {config.db_path}; lookups will be empty")
    return store
