"""
Clientbook core: clean-architecture layout.

- domain: field value objects, Person, AddressBook, appointments. No outer dependencies.
- application: tokenizer, command parsers, commands, ModelManager, LogicManager, ports.
- infrastructure: adapters (JsonAddressBookStorage, InMemoryAddressBookStorage), config.
- ui: terminal view and command loop.
"""

from clientbook.application import (
    CommandFailure,
    CommandResult,
    LogicManager,
    ModelManager,
    parse_command,
)
from clientbook.domain import AddressBook, Person
from clientbook.infrastructure import InMemoryAddressBookStorage, JsonAddressBookStorage

__all__ = [
    "AddressBook",
    "CommandFailure",
    "CommandResult",
    "InMemoryAddressBookStorage",
    "JsonAddressBookStorage",
    "LogicManager",
    "ModelManager",
    "Person",
    "parse_command",
]
