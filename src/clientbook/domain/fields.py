"""Validated value objects for the fields of a Person.

Every field wraps one string, is immutable once created, and raises
ValidationError with its MESSAGE_CONSTRAINTS when the raw value does not match.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from clientbook.domain.errors import ProgrammerError, ValidationError

_ALNUM = r"[^\W_]"
_ALNUM_AND_SPACES = _ALNUM + r"(?:[^\W_]| )*"
_DIGITS = r"[0-9]{3,}"


@dataclass(frozen=True)
class _Field:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    VALIDATION_REGEX: ClassVar[str] = r".*"

    def __post_init__(self):
        if self.value is None:
            raise ProgrammerError(f"{type(self).__name__} value must not be None.")
        if not type(self).is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        """Return True if raw satisfies this field's format rule."""
        return re.fullmatch(cls.VALIDATION_REGEX, raw) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = _ALNUM_AND_SPACES


@dataclass(frozen=True)
class Phone(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    VALIDATION_REGEX: ClassVar[str] = _DIGITS


_SPECIAL_CHARACTERS = "+_.-"
_ALNUM_NO_UNDERSCORE = r"[^\W_]+"
_LOCAL_PART_REGEX = _ALNUM_NO_UNDERSCORE + r"(?:[+_.\-]" + _ALNUM_NO_UNDERSCORE + r")*"
_DOMAIN_PART_REGEX = _ALNUM_NO_UNDERSCORE + r"(?:-" + _ALNUM_NO_UNDERSCORE + r")*"
# last label is a single domain part of at least 2 characters
_DOMAIN_LAST_PART_REGEX = r"(?=[^.]{2,}$)" + _DOMAIN_PART_REGEX
_DOMAIN_REGEX = r"(?:" + _DOMAIN_PART_REGEX + r"\.)*" + _DOMAIN_LAST_PART_REGEX


@dataclass(frozen=True)
class Email(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        f"characters, excluding the parentheses, ({_SPECIAL_CHARACTERS}). The local-part may "
        "not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by "
        "hyphens, if any."
    )
    VALIDATION_REGEX: ClassVar[str] = _LOCAL_PART_REGEX + "@" + _DOMAIN_REGEX


@dataclass(frozen=True)
class Address(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"
    VALIDATION_REGEX: ClassVar[str] = r"\S.*"


@dataclass(frozen=True)
class Remark(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Remarks can take any values, including blanks"
    VALIDATION_REGEX: ClassVar[str] = r"(?s).*"


@dataclass(frozen=True)
class Tag(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    VALIDATION_REGEX: ClassVar[str] = _ALNUM + "+"

    def __str__(self) -> str:
        return f"[{self.value}]"


@dataclass(frozen=True)
class FinancialPlan(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Financial plan names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = _ALNUM_AND_SPACES

    def __str__(self) -> str:
        return f"[{self.value}]"


@dataclass(frozen=True)
class NextOfKinName(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Next-of-kin names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = _ALNUM_AND_SPACES


@dataclass(frozen=True)
class NextOfKinPhone(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Next-of-kin phone numbers should only contain numbers, "
        "and it should be at least 3 digits long"
    )
    VALIDATION_REGEX: ClassVar[str] = _DIGITS


@dataclass(frozen=True)
class AppointmentName(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Appointment names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = _ALNUM_AND_SPACES
