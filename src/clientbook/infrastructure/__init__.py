"""Infrastructure layer: concrete implementations of application ports, config and logging."""

from clientbook.infrastructure.config import (
    Settings,
    configure_logging,
    load_env,
    load_settings,
)
from clientbook.infrastructure.json_storage import DataLoadingError, JsonAddressBookStorage
from clientbook.infrastructure.memory_storage import InMemoryAddressBookStorage
from clientbook.infrastructure.sample_data import sample_address_book

__all__ = [
    "DataLoadingError",
    "InMemoryAddressBookStorage",
    "JsonAddressBookStorage",
    "Settings",
    "configure_logging",
    "load_env",
    "load_settings",
    "sample_address_book",
]
