"""Typical persons shared by the tests."""

from clientbook.domain import (
    Address,
    AddressBook,
    Appointment,
    Email,
    FinancialPlan,
    Name,
    NextOfKinName,
    NextOfKinPhone,
    Person,
    Phone,
    Remark,
    Tag,
)


def make_person(
    name: str = "Amy Bee",
    phone: str = "85355255",
    email: str = "amy@gmail.com",
    address: str = "123, Jurong West Ave 6, #08-111",
    nok_name: str | None = "Bob Bee",
    nok_phone: str | None = "91234567",
    remark: str = "",
    plans: tuple[str, ...] = (),
    tags: tuple[str, ...] = (),
    appointment: tuple[str, str] | None = None,
) -> Person:
    person = Person(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        next_of_kin_name=NextOfKinName(nok_name) if nok_name else None,
        next_of_kin_phone=NextOfKinPhone(nok_phone) if nok_phone else None,
        remark=Remark(remark),
        financial_plans=frozenset(FinancialPlan(p) for p in plans),
        tags=frozenset(Tag(t) for t in tags),
    )
    if appointment is not None:
        person = person.with_appointment(Appointment.parse(*appointment))
    return person


ALICE = make_person(
    "Alice Pauline", "94351253", "alice@example.com", "123, Jurong West Ave 6, #08-111",
    plans=("Retirement Plan",), tags=("friends",), appointment=("Review", "10-01-2027 09:00"),
)
BENSON = make_person(
    "Benson Meier", "98765432", "johnd@example.com", "311, Clementi Ave 2, #02-25",
    plans=("Education Plan",), tags=("owesMoney", "friends"),
)
CARL = make_person(
    "Carl Kurz", "95352563", "heinz@example.com", "wall street",
    appointment=("Kickoff", "02-01-2027 14:00"),
)
DANIEL = make_person(
    "Daniel Meier", "87652533", "cornelia@example.com", "10th street",
    plans=("Retirement Plan",), tags=("friends",),
)
ELLE = make_person(
    "Elle Meyer", "9482224", "werner@example.com", "michegan ave",
    appointment=("Renewal", "10-01-2027 08:30"),
)

TYPICAL_PERSONS = [ALICE, BENSON, CARL, DANIEL, ELLE]


def typical_address_book() -> AddressBook:
    return AddressBook(TYPICAL_PERSONS)
