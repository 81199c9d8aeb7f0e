"""Factory for wiring services from a configuration."""

import logging

from binary_tutor.config import BinaryTutorConfig
from binary_tutor.interfaces import KeyValueStore
from binary_tutor.services.conversion_service import ConversionService
from binary_tutor.services.history_service import HistoryLedger
from binary_tutor.services.stores import JsonFileStore
from binary_tutor.services.theme_service import ThemePreferenceService

logger = logging.getLogger(__name__)


def create_store(config: BinaryTutorConfig) -> KeyValueStore:
    """Create the file-backed store configured by ``config``."""
    logger.debug(f"Using storage file {config.storage_path}")
    return JsonFileStore(config.storage_path)


def create_conversion_service(
    config: BinaryTutorConfig, store: KeyValueStore | None = None
) -> ConversionService:
    """Create a conversion service with a loaded history ledger.

    Args:
        config: Application configuration
        store: Store to use instead of the configured file

    Returns:
        Ready-to-use ConversionService
    """
    if store is None:
        store = create_store(config)
    ledger = HistoryLedger(store, key=config.history_key, limit=config.history_limit)
    ledger.load()
    return ConversionService(ledger)


def create_theme_service(
    config: BinaryTutorConfig, store: KeyValueStore | None = None
) -> ThemePreferenceService:
    """Create the theme preference service for ``config``."""
    if store is None:
        store = create_store(config)
    return ThemePreferenceService(store, key=config.theme_key, default=config.default_theme)
