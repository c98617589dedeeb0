"""Filter predicates and sort keys applied by the model to the person list."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from clientbook.domain.entities import Person

PersonPredicate = Callable[[Person], bool]
PersonSortKey = Callable[[Person], object]


def show_all_persons(person: Person) -> bool:
    return True


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word, ignoring case."""

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {w.lower() for w in person.name.value.split()}
        return any(k.lower() in words for k in self.keywords)


def by_name(person: Person) -> object:
    return person.name.value.lower()


def by_appointment(person: Person) -> object:
    """Earliest appointment first; persons without an appointment go last, by name."""
    if person.has_appointment():
        return (0, person.appointment.date_time, person.name.value.lower())
    return (1, datetime.max, person.name.value.lower())


SORT_KEYS: dict[str, PersonSortKey] = {
    "name": by_name,
    "appointment": by_appointment,
}
