"""Domain entities: Person and AddressBook."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date

from clientbook.domain.appointment import NO_APPOINTMENT, Appointment, ScheduleItem
from clientbook.domain.errors import (
    DuplicatePersonError,
    PersonNotFoundError,
    ProgrammerError,
)
from clientbook.domain.fields import (
    Address,
    Email,
    FinancialPlan,
    Name,
    NextOfKinName,
    NextOfKinPhone,
    Phone,
    Remark,
    Tag,
)
from clientbook.domain.prompts import GatherEmailPrompt


@dataclass(frozen=True)
class Person:
    """
    A client in the address book.
    Immutable: edits produce a new Person that replaces this one in the AddressBook.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    next_of_kin_name: NextOfKinName | None = None
    next_of_kin_phone: NextOfKinPhone | None = None
    remark: Remark = field(default_factory=lambda: Remark(""))
    appointment: ScheduleItem = NO_APPOINTMENT
    financial_plans: frozenset[FinancialPlan] = frozenset()
    tags: frozenset[Tag] = frozenset()

    def __post_init__(self):
        for attr in ("name", "phone", "email", "address", "remark", "appointment"):
            if getattr(self, attr) is None:
                raise ProgrammerError(f"Person {attr} must not be None.")
        object.__setattr__(self, "financial_plans", frozenset(self.financial_plans))
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person | None") -> bool:
        """Weaker notion of equality used for duplicate detection: names match case-insensitively."""
        if other is self:
            return True
        return other is not None and other.name.value.lower() == self.name.value.lower()

    def has_appointment(self) -> bool:
        return isinstance(self.appointment, Appointment)

    def with_appointment(self, appointment: ScheduleItem) -> "Person":
        return replace(self, appointment=appointment)


class AddressBook:
    """Ordered collection of persons. No two persons are ever the same person."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        self.set_persons(persons)

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def has_person(self, person: Person) -> bool:
        if person is None:
            raise ProgrammerError("person must not be None.")
        return any(p.is_same_person(person) for p in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError()
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited. The edited person may not collide with anyone else."""
        if target is None or edited is None:
            raise ProgrammerError("target and edited person must not be None.")
        index = self._index_of(target)
        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError()
        self._persons[index] = edited

    def remove_person(self, person: Person) -> None:
        self._persons.pop(self._index_of(person))

    def set_persons(self, persons: Iterable[Person]) -> None:
        persons = list(persons)
        for i, person in enumerate(persons):
            if any(person.is_same_person(other) for other in persons[i + 1:]):
                raise DuplicatePersonError()
        self._persons = persons

    def reset_data(self, other: "AddressBook") -> None:
        self.set_persons(other.persons)

    def has_appointment_with_date(self, day: date) -> bool:
        return any(
            p.has_appointment() and p.appointment.date == day for p in self._persons
        )

    def clear_appointments(self, day: date) -> None:
        """Drop every appointment that falls on the given date."""
        self._persons = [
            p.with_appointment(NO_APPOINTMENT)
            if p.has_appointment() and p.appointment.date == day
            else p
            for p in self._persons
        ]

    def gather_emails(self, prompt: GatherEmailPrompt) -> str:
        """Return emails of persons selected by the prompt, space separated."""
        return " ".join(p.email.value for p in self._persons if prompt.matches(p))

    def _index_of(self, person: Person) -> int:
        for i, p in enumerate(self._persons):
            if p == person:
                return i
        raise PersonNotFoundError()

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self):
        return iter(tuple(self._persons))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook({len(self._persons)} persons)"
