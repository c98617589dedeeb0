"""JSON file implementation of AddressBookStorage.

File shape: {"persons": [{name, phone, email, address, next_of_kin_name,
next_of_kin_phone, remark, appointment: {name, date_time} | null,
financial_plans: [...], tags: [...]}, ...]}. date_time uses dd-MM-yyyy HH:mm.
"""

import logging
from pathlib import Path

import pydantic
from pydantic import BaseModel, Field

from clientbook.domain import (
    NO_APPOINTMENT,
    Address,
    AddressBook,
    Appointment,
    DuplicatePersonError,
    Email,
    FinancialPlan,
    Name,
    NextOfKinName,
    NextOfKinPhone,
    Person,
    Phone,
    Remark,
    Tag,
    ValidationError,
)

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."


class DataLoadingError(Exception):
    """Stored data exists but cannot be turned back into an address book."""


class JsonAdaptedAppointment(BaseModel):
    name: str
    date_time: str


class JsonAdaptedPerson(BaseModel):
    """Storage form of a Person. Fields hold raw strings; to_person() validates them."""

    name: str
    phone: str
    email: str
    address: str
    next_of_kin_name: str | None = None
    next_of_kin_phone: str | None = None
    remark: str = ""
    appointment: JsonAdaptedAppointment | None = None
    financial_plans: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_person(cls, person: Person) -> "JsonAdaptedPerson":
        appointment = None
        if isinstance(person.appointment, Appointment):
            appointment = JsonAdaptedAppointment(
                name=person.appointment.name.value,
                date_time=person.appointment.formatted_date_time(),
            )
        return cls(
            name=person.name.value,
            phone=person.phone.value,
            email=person.email.value,
            address=person.address.value,
            next_of_kin_name=person.next_of_kin_name.value if person.next_of_kin_name else None,
            next_of_kin_phone=person.next_of_kin_phone.value if person.next_of_kin_phone else None,
            remark=person.remark.value,
            appointment=appointment,
            financial_plans=sorted(fp.value for fp in person.financial_plans),
            tags=sorted(t.value for t in person.tags),
        )

    def to_person(self) -> Person:
        """Raises ValidationError when a stored value breaks its field's rule."""
        appointment = NO_APPOINTMENT
        if self.appointment is not None:
            appointment = Appointment.parse(self.appointment.name, self.appointment.date_time)
        return Person(
            name=Name(self.name),
            phone=Phone(self.phone),
            email=Email(self.email),
            address=Address(self.address),
            next_of_kin_name=(
                NextOfKinName(self.next_of_kin_name) if self.next_of_kin_name is not None else None
            ),
            next_of_kin_phone=(
                NextOfKinPhone(self.next_of_kin_phone)
                if self.next_of_kin_phone is not None
                else None
            ),
            remark=Remark(self.remark),
            appointment=appointment,
            financial_plans=frozenset(FinancialPlan(fp) for fp in self.financial_plans),
            tags=frozenset(Tag(t) for t in self.tags),
        )


class JsonSerializableAddressBook(BaseModel):
    persons: list[JsonAdaptedPerson] = Field(default_factory=list)

    @classmethod
    def from_address_book(cls, address_book: AddressBook) -> "JsonSerializableAddressBook":
        return cls(persons=[JsonAdaptedPerson.from_person(p) for p in address_book.persons])

    def to_address_book(self) -> AddressBook:
        address_book = AddressBook()
        for adapted in self.persons:
            person = adapted.to_person()
            if address_book.has_person(person):
                raise DataLoadingError(MESSAGE_DUPLICATE_PERSON)
            address_book.add_person(person)
        return address_book


class JsonAddressBookStorage:
    """Stores the address book as one JSON document at file_path."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> AddressBook | None:
        if not self._file_path.exists():
            logger.info("Data file %s not found", self._file_path)
            return None
        try:
            raw = self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DataLoadingError(f"Data file {self._file_path} could not be read: {exc}") from exc
        try:
            data = JsonSerializableAddressBook.model_validate_json(raw)
            return data.to_address_book()
        except pydantic.ValidationError as exc:
            raise DataLoadingError(f"Data file {self._file_path} is malformed: {exc}") from exc
        except (ValidationError, DuplicatePersonError) as exc:
            raise DataLoadingError(f"Illegal value in {self._file_path}: {exc}") from exc

    def save(self, address_book: AddressBook) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        data = JsonSerializableAddressBook.from_address_book(address_book)
        self._file_path.write_text(data.model_dump_json(indent=2), encoding="utf-8")
        logger.debug("Saved %d persons to %s", len(address_book), self._file_path)
