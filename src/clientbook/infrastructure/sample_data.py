"""Sample clients used when no data file exists yet."""

from collections.abc import Iterable

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
    Tag,
)


def _person(
    name: str,
    phone: str,
    email: str,
    address: str,
    nok_name: str,
    nok_phone: str,
    plans: Iterable[str] = (),
    tags: Iterable[str] = (),
    appointment: tuple[str, str] | None = None,
) -> Person:
    person = Person(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        next_of_kin_name=NextOfKinName(nok_name),
        next_of_kin_phone=NextOfKinPhone(nok_phone),
        financial_plans=frozenset(FinancialPlan(p) for p in plans),
        tags=frozenset(Tag(t) for t in tags),
    )
    if appointment is not None:
        person = person.with_appointment(Appointment.parse(*appointment))
    return person


def sample_persons() -> list[Person]:
    return [
        _person(
            "Alex Yeoh", "87438807", "alexyeoh@example.com", "Blk 30 Geylang Street 29, #06-40",
            "Mary Yeoh", "91234567", plans=["Retirement Plan"], tags=["friends"],
            appointment=("Annual review", "05-01-2027 10:00"),
        ),
        _person(
            "Bernice Yu", "99272758", "berniceyu@example.com", "Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            "Tom Yu", "92345678", plans=["Education Plan"], tags=["colleagues", "friends"],
        ),
        _person(
            "Charlotte Oliveiro", "93210283", "charlotte@example.com", "Blk 11 Ang Mo Kio Street 74, #11-04",
            "Paul Oliveiro", "93456789", plans=["Retirement Plan", "Health Plan"], tags=["neighbours"],
            appointment=("Plan renewal", "03-01-2027 15:30"),
        ),
        _person(
            "David Li", "91031282", "lidavid@example.com", "Blk 436 Serangoon Gardens Street 26, #16-43",
            "Lucy Li", "94567890", tags=["family"],
        ),
    ]


def sample_address_book() -> AddressBook:
    return AddressBook(sample_persons())
