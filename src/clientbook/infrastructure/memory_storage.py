"""In-memory implementation of AddressBookStorage (no file)."""

from clientbook.domain import AddressBook


class InMemoryAddressBookStorage:
    """Keeps a copy of the last saved address book. Counts saves for callers that care."""

    def __init__(self, initial: AddressBook | None = None) -> None:
        self._stored: AddressBook | None = AddressBook(initial.persons) if initial else None
        self.save_count = 0

    def load(self) -> AddressBook | None:
        if self._stored is None:
            return None
        return AddressBook(self._stored.persons)

    def save(self, address_book: AddressBook) -> None:
        self._stored = AddressBook(address_book.persons)
        self.save_count += 1
