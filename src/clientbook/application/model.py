"""In-memory model: the address book plus its filtered, sorted and appointment views.

Views are tuples rebuilt synchronously after every change to the book, the
filter predicate or the sort key. Listeners registered with subscribe() are
called after each rebuild.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from clientbook.domain import AddressBook, Appointment, Person, ProgrammerError
from clientbook.domain.predicates import PersonPredicate, PersonSortKey, show_all_persons
from clientbook.domain.prompts import GatherEmailPrompt

logger = logging.getLogger(__name__)

ModelListener = Callable[["ModelManager"], None]


@dataclass(frozen=True)
class ScheduledAppointment:
    """An appointment joined with the person who owns it, as shown in the appointment view."""

    appointment: Appointment
    person: Person


def _require(*values: object) -> None:
    if any(v is None for v in values):
        raise ProgrammerError("Argument must not be None.")


class ModelManager:
    """Sole owner and mutator of the address book. Other components read tuples."""

    def __init__(self, address_book: AddressBook | None = None) -> None:
        logger.debug("Initializing with address book: %r", address_book)
        self._address_book = AddressBook(address_book.persons if address_book else ())
        self._predicate: PersonPredicate = show_all_persons
        self._sort_key: PersonSortKey | None = None
        self._sorted_persons: tuple[Person, ...] = ()
        self._filtered_persons: tuple[Person, ...] = ()
        self._appointments: tuple[ScheduledAppointment, ...] = ()
        self._listeners: list[ModelListener] = []
        self._refresh()

    # --- address book ---

    @property
    def address_book(self) -> AddressBook:
        """Read-only use only; mutate through the model so views stay current."""
        return self._address_book

    def set_address_book(self, address_book: AddressBook) -> None:
        _require(address_book)
        self._address_book.reset_data(address_book)
        self._refresh()

    def has_person(self, person: Person) -> bool:
        _require(person)
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        """Add person and reset the filter to show everyone. Raises DuplicatePersonError."""
        _require(person)
        self._address_book.add_person(person)
        self._predicate = show_all_persons
        self._refresh()

    def delete_person(self, target: Person) -> None:
        _require(target)
        self._address_book.remove_person(target)
        self._refresh()

    def set_person(self, target: Person, edited: Person) -> None:
        _require(target, edited)
        self._address_book.set_person(target, edited)
        self._refresh()

    def clear_appointments(self, day: date) -> None:
        _require(day)
        self._address_book.clear_appointments(day)
        self._refresh()

    def has_appointment_with_date(self, day: date) -> bool:
        _require(day)
        return self._address_book.has_appointment_with_date(day)

    def gather_emails(self, prompt: GatherEmailPrompt) -> str:
        _require(prompt)
        return self._address_book.gather_emails(prompt)

    # --- views ---

    def get_filtered_person_list(self) -> tuple[Person, ...]:
        return self._filtered_persons

    def get_sorted_person_list(self) -> tuple[Person, ...]:
        return self._sorted_persons

    def get_appointment_list(self) -> tuple[ScheduledAppointment, ...]:
        return self._appointments

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        _require(predicate)
        self._predicate = predicate
        self._refresh()

    def sort_filtered_person_list(self, key: PersonSortKey | None) -> None:
        """Order the person views by key; None restores insertion order. Appointments stay by date."""
        self._sort_key = key
        self._refresh()

    def subscribe(self, listener: ModelListener) -> Callable[[], None]:
        """Call listener after every view rebuild. Returns a function that unsubscribes it."""
        _require(listener)
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _refresh(self) -> None:
        persons = self._address_book.persons
        if self._sort_key is not None:
            persons = tuple(sorted(persons, key=self._sort_key))
        self._sorted_persons = persons
        self._filtered_persons = tuple(p for p in persons if self._predicate(p))
        self._appointments = self._build_appointments(self._filtered_persons)
        for listener in list(self._listeners):
            listener(self)

    @staticmethod
    def _build_appointments(persons: tuple[Person, ...]) -> tuple[ScheduledAppointment, ...]:
        scheduled = [
            ScheduledAppointment(appointment=p.appointment, person=p)
            for p in persons
            if p.has_appointment()
        ]
        scheduled.sort(key=lambda s: s.appointment.date_time)
        return tuple(scheduled)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._filtered_persons == other._filtered_persons
        )
