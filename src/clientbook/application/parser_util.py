"""Convert raw argument text into domain values, raising ParseError on bad input."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date
from typing import TypeVar

from clientbook.application.errors import ParseError
from clientbook.domain import (
    Address,
    Appointment,
    Email,
    FinancialPlan,
    Name,
    NextOfKinName,
    NextOfKinPhone,
    Phone,
    ProgrammerError,
    Remark,
    Tag,
    ValidationError,
)
from clientbook.domain.appointment import parse_date

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

T = TypeVar("T")


@dataclass(frozen=True)
class Index:
    """Position of a person in the displayed list. Stored zero-based."""

    zero_based: int

    def __post_init__(self):
        if self.zero_based < 0:
            raise ProgrammerError("Index must be non-negative.")

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


def parse_index(raw: str) -> Index:
    """Parse a one-based, strictly positive index. Leading and trailing whitespace is ignored."""
    text = (raw or "").strip()
    if not text.isdecimal() or not text.isascii() or int(text) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(text))


def _parse_field(factory: Callable[[str], T], raw: str) -> T:
    try:
        return factory(raw.strip())
    except ValidationError as exc:
        raise ParseError(str(exc)) from exc


def parse_name(raw: str) -> Name:
    return _parse_field(Name, raw)


def parse_phone(raw: str) -> Phone:
    return _parse_field(Phone, raw)


def parse_email(raw: str) -> Email:
    return _parse_field(Email, raw)


def parse_address(raw: str) -> Address:
    return _parse_field(Address, raw)


def parse_next_of_kin_name(raw: str) -> NextOfKinName:
    return _parse_field(NextOfKinName, raw)


def parse_next_of_kin_phone(raw: str) -> NextOfKinPhone:
    return _parse_field(NextOfKinPhone, raw)


def parse_remark(raw: str) -> Remark:
    # Remarks keep inner whitespace; only the ends are trimmed
    return _parse_field(Remark, raw)


def parse_tag(raw: str) -> Tag:
    return _parse_field(Tag, raw)


def parse_financial_plan(raw: str) -> FinancialPlan:
    return _parse_field(FinancialPlan, raw)


def parse_tags(raws: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(raw) for raw in raws)


def parse_financial_plans(raws: Iterable[str]) -> frozenset[FinancialPlan]:
    return frozenset(parse_financial_plan(raw) for raw in raws)


def parse_appointment(name: str, date_time: str) -> Appointment:
    try:
        return Appointment.parse(name, date_time)
    except ValidationError as exc:
        raise ParseError(str(exc)) from exc


def parse_appointment_date(raw: str) -> date:
    try:
        return parse_date(raw)
    except ValidationError as exc:
        raise ParseError(str(exc)) from exc
