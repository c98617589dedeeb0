"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from clientbook.domain import AddressBook


class AddressBookStorage(Protocol):
    """Loads and saves the whole address book."""

    def load(self) -> AddressBook | None:
        """Return the stored address book, or None if nothing has been stored yet."""
        ...

    def save(self, address_book: AddressBook) -> None:
        """Replace the stored address book. May raise OSError."""
        ...
