"""Domain layer: value objects, entities and predicates. No dependencies on outer layers."""

from clientbook.domain.appointment import (
    NO_APPOINTMENT,
    Appointment,
    NoAppointment,
    ScheduleItem,
)
from clientbook.domain.entities import AddressBook, Person
from clientbook.domain.errors import (
    DuplicatePersonError,
    PersonNotFoundError,
    ProgrammerError,
    ValidationError,
)
from clientbook.domain.fields import (
    Address,
    AppointmentName,
    Email,
    FinancialPlan,
    Name,
    NextOfKinName,
    NextOfKinPhone,
    Phone,
    Remark,
    Tag,
)
from clientbook.domain.prompts import (
    GatherEmailByFinancialPlan,
    GatherEmailByTag,
    GatherEmailPrompt,
)

__all__ = [
    "NO_APPOINTMENT",
    "Address",
    "AddressBook",
    "Appointment",
    "AppointmentName",
    "DuplicatePersonError",
    "Email",
    "FinancialPlan",
    "GatherEmailByFinancialPlan",
    "GatherEmailByTag",
    "GatherEmailPrompt",
    "Name",
    "NextOfKinName",
    "NextOfKinPhone",
    "NoAppointment",
    "Person",
    "PersonNotFoundError",
    "Phone",
    "ProgrammerError",
    "Remark",
    "ScheduleItem",
    "Tag",
    "ValidationError",
]
