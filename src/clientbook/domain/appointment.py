"""Schedule items: a person either has no appointment or one scheduled Appointment."""

from dataclasses import dataclass
from datetime import date, datetime

from clientbook.domain.errors import ValidationError
from clientbook.domain.fields import AppointmentName

DATE_TIME_FORMAT = "%d-%m-%Y %H:%M"
DATE_FORMAT = "%d-%m-%Y"

MESSAGE_DATE_TIME_CONSTRAINTS = (
    "Appointment date and time should be in the format dd-MM-yyyy HH:mm"
)
MESSAGE_DATE_CONSTRAINTS = "Dates should be in the format dd-MM-yyyy"


@dataclass(frozen=True)
class NoAppointment:
    """Placeholder for a person without a scheduled appointment."""

    def __str__(self) -> str:
        return ""


NO_APPOINTMENT = NoAppointment()


@dataclass(frozen=True)
class Appointment:
    """
    A scheduled meeting with a client.
    Holds no reference to its owner; the model joins it with the person when building views.
    """

    name: AppointmentName
    date_time: datetime

    @classmethod
    def parse(cls, name: str, date_time: str) -> "Appointment":
        """Build an Appointment from raw text. Raises ValidationError on bad input."""
        return cls(name=AppointmentName(name.strip()), date_time=parse_date_time(date_time))

    @property
    def date(self) -> date:
        return self.date_time.date()

    def formatted_date_time(self) -> str:
        return self.date_time.strftime(DATE_TIME_FORMAT)

    def __str__(self) -> str:
        return f"{self.name}, {self.formatted_date_time()}"


ScheduleItem = NoAppointment | Appointment


def parse_date_time(raw: str) -> datetime:
    """Parse dd-MM-yyyy HH:mm text. Raises ValidationError."""
    try:
        return datetime.strptime((raw or "").strip(), DATE_TIME_FORMAT)
    except ValueError as exc:
        raise ValidationError(MESSAGE_DATE_TIME_CONSTRAINTS) from exc


def parse_date(raw: str) -> date:
    """Parse dd-MM-yyyy text. Raises ValidationError."""
    try:
        return datetime.strptime((raw or "").strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise ValidationError(MESSAGE_DATE_CONSTRAINTS) from exc
