"""Terminal rendering of the model's person and appointment views with rich."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from clientbook.application import ModelManager, ScheduledAppointment
from clientbook.domain import Person


def person_table(persons: tuple[Person, ...]) -> Table:
    table = Table(title="Clients", show_lines=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Address")
    table.add_column("Next-of-kin")
    table.add_column("Financial plans", style="green")
    table.add_column("Tags", style="magenta")
    table.add_column("Remark", style="dim")
    for i, person in enumerate(persons, start=1):
        nok = ""
        if person.next_of_kin_name is not None:
            nok = person.next_of_kin_name.value
            if person.next_of_kin_phone is not None:
                nok += f" ({person.next_of_kin_phone})"
        cells = [
            str(i),
            person.name.value,
            person.phone.value,
            person.email.value,
            person.address.value,
            nok,
            ", ".join(sorted(fp.value for fp in person.financial_plans)),
            ", ".join(sorted(t.value for t in person.tags)),
            person.remark.value,
        ]
        # user text is shown as-is, never as rich markup
        table.add_row(*(Text(c) for c in cells))
    return table


def appointment_table(appointments: tuple[ScheduledAppointment, ...]) -> Table:
    table = Table(title="Appointments")
    table.add_column("When", style="cyan")
    table.add_column("What")
    table.add_column("With", style="bold")
    for item in appointments:
        table.add_row(
            item.appointment.formatted_date_time(),
            Text(item.appointment.name.value),
            Text(item.person.name.value),
        )
    return table


class PersonListView:
    """Re-renders both lists whenever the model rebuilds its views."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._unsubscribe = None

    def attach(self, model: ModelManager) -> None:
        self.detach()
        self._unsubscribe = model.subscribe(self.render)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def render(self, model: ModelManager) -> None:
        self._console.print(person_table(model.get_filtered_person_list()))
        appointments = model.get_appointment_list()
        if appointments:
            self._console.print(appointment_table(appointments))
