"""Commands produced by the parsers and executed against the model.

Each command is an immutable value; execute() applies it to a ModelManager and
returns a CommandResult, or raises CommandError when the current model state
does not allow it (e.g. an index outside the displayed list).
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import ClassVar, Protocol

from clientbook.application.errors import CommandError
from clientbook.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    format_person,
)
from clientbook.application.model import ModelManager
from clientbook.application.parser_util import Index
from clientbook.domain import (
    NO_APPOINTMENT,
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
    ProgrammerError,
    Remark,
    Tag,
)
from clientbook.domain.appointment import DATE_FORMAT
from clientbook.domain.predicates import (
    NameContainsKeywordsPredicate,
    PersonSortKey,
    show_all_persons,
)
from clientbook.domain.prompts import GatherEmailPrompt

MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful command."""

    feedback: str
    show_help: bool = False
    exit: bool = False


class Command(Protocol):
    def execute(self, model: ModelManager) -> CommandResult:
        ...


def _person_at(model: ModelManager, index: Index) -> Person:
    persons = model.get_filtered_person_list()
    if index.zero_based >= len(persons):
        raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return persons[index.zero_based]


@dataclass(frozen=True)
class AddCommand:
    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a person to the address book. Parameters: "
        "n/NAME p/PHONE e/EMAIL a/ADDRESS [nkn/NEXT_OF_KIN_NAME] [nkp/NEXT_OF_KIN_PHONE] "
        "[fp/FINANCIAL_PLAN]... [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2, #02-25 "
        "nkn/Jane Doe nkp/91234567 fp/Retirement Plan t/friends"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New person added: {}"

    person: Person

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_person(self.person):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        model.add_person(self.person)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(self.person)))


@dataclass
class EditPersonDescriptor:
    """
    The fields an edit replaces. A None slot keeps the current value.
    For financial_plans and tags an empty frozenset clears every entry,
    while None leaves them untouched.
    """

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    next_of_kin_name: NextOfKinName | None = None
    next_of_kin_phone: NextOfKinPhone | None = None
    financial_plans: frozenset[FinancialPlan] | None = None
    tags: frozenset[Tag] | None = None

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None
            for value in (
                self.name,
                self.phone,
                self.email,
                self.address,
                self.next_of_kin_name,
                self.next_of_kin_phone,
                self.financial_plans,
                self.tags,
            )
        )

    def apply_to(self, person: Person) -> Person:
        """Return a new Person with the present slots replaced. Remark and appointment are kept."""
        return replace(
            person,
            name=self.name if self.name is not None else person.name,
            phone=self.phone if self.phone is not None else person.phone,
            email=self.email if self.email is not None else person.email,
            address=self.address if self.address is not None else person.address,
            next_of_kin_name=(
                self.next_of_kin_name
                if self.next_of_kin_name is not None
                else person.next_of_kin_name
            ),
            next_of_kin_phone=(
                self.next_of_kin_phone
                if self.next_of_kin_phone is not None
                else person.next_of_kin_phone
            ),
            financial_plans=(
                self.financial_plans
                if self.financial_plans is not None
                else person.financial_plans
            ),
            tags=self.tags if self.tags is not None else person.tags,
        )


@dataclass(frozen=True)
class EditCommand:
    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the details of the person identified by the index number used in the "
        "displayed person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] "
        "[a/ADDRESS] [nkn/NEXT_OF_KIN_NAME] [nkp/NEXT_OF_KIN_PHONE] "
        "[fp/FINANCIAL_PLAN]... [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited Person: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: Index
    descriptor: EditPersonDescriptor

    def __post_init__(self):
        if not self.descriptor.is_any_field_edited():
            raise ProgrammerError("EditCommand needs at least one edited field.")
        # the descriptor is mutable; keep a private copy
        object.__setattr__(self, "descriptor", replace(self.descriptor))

    def execute(self, model: ModelManager) -> CommandResult:
        person = _person_at(model, self.index)
        edited = self.descriptor.apply_to(person)
        if not person.is_same_person(edited) and model.has_person(edited):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        model.set_person(person, edited)
        model.update_filtered_person_list(show_all_persons)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(edited)))


@dataclass(frozen=True)
class DeleteCommand:
    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the person identified by the index number used in the displayed "
        "person list.\nParameters: INDEX (must be a positive integer)\nExample: delete 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted Person: {}"

    index: Index

    def execute(self, model: ModelManager) -> CommandResult:
        person = _person_at(model, self.index)
        model.delete_person(person)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(person)))


@dataclass(frozen=True)
class FindCommand:
    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all persons whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\nExample: find alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        count = len(model.get_filtered_person_list())
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(count))


@dataclass(frozen=True)
class RemarkCommand:
    COMMAND_WORD: ClassVar[str] = "remark"
    MESSAGE_USAGE: ClassVar[str] = (
        "remark: Edits the remark of the person identified by the index number used in the "
        "last person listing. Existing remark will be overwritten by the input.\n"
        "Parameters: INDEX (must be a positive integer) r/[REMARK]\n"
        "Example: remark 1 r/Likes to swim."
    )
    MESSAGE_ADD_SUCCESS: ClassVar[str] = "Added remark to Person: {}"
    MESSAGE_DELETE_SUCCESS: ClassVar[str] = "Removed remark from Person: {}"

    index: Index
    remark: Remark

    def execute(self, model: ModelManager) -> CommandResult:
        person = _person_at(model, self.index)
        edited = replace(person, remark=self.remark)
        model.set_person(person, edited)
        model.update_filtered_person_list(show_all_persons)
        message = self.MESSAGE_ADD_SUCCESS if self.remark.value else self.MESSAGE_DELETE_SUCCESS
        return CommandResult(message.format(format_person(edited)))


@dataclass(frozen=True)
class SortCommand:
    COMMAND_WORD: ClassVar[str] = "sort"
    MESSAGE_USAGE: ClassVar[str] = (
        "sort: Sorts the displayed person list by the given field.\n"
        "Parameters: FIELD (name or appointment)\nExample: sort name"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Sorted persons by {}"

    field_name: str
    key: PersonSortKey

    def execute(self, model: ModelManager) -> CommandResult:
        model.sort_filtered_person_list(self.key)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.field_name))


@dataclass(frozen=True)
class ClearCommand:
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_SUCCESS: ClassVar[str] = "Address book has been cleared!"

    def execute(self, model: ModelManager) -> CommandResult:
        model.set_address_book(AddressBook())
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ListCommand:
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all persons"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_person_list(show_all_persons)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ScheduleCommand:
    COMMAND_WORD: ClassVar[str] = "schedule"
    MESSAGE_USAGE: ClassVar[str] = (
        "schedule: Schedules an appointment with the person identified by the index number "
        "used in the displayed person list. An existing appointment is replaced.\n"
        "Parameters: INDEX (must be a positive integer) ap/APPOINTMENT_NAME "
        "d/DATE_TIME (dd-MM-yyyy HH:mm)\n"
        "Example: schedule 1 ap/Annual review d/01-12-2026 14:30"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Scheduled appointment for Person: {}"

    index: Index
    appointment: Appointment

    def execute(self, model: ModelManager) -> CommandResult:
        person = _person_at(model, self.index)
        edited = person.with_appointment(self.appointment)
        model.set_person(person, edited)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(edited)))


@dataclass(frozen=True)
class CompleteCommand:
    """Completes either one person's appointment (by index) or every appointment on a date."""

    COMMAND_WORD: ClassVar[str] = "complete"
    MESSAGE_USAGE: ClassVar[str] = (
        "complete: Completes appointments, removing them from the schedule.\n"
        "Parameters: INDEX (must be a positive integer) or d/DATE (dd-MM-yyyy)\n"
        "Example: complete 1 or complete d/01-12-2026"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Completed appointment(s)"
    MESSAGE_NO_APPOINTMENT_FOR_PERSON: ClassVar[str] = "This person has no appointment to complete."
    MESSAGE_NO_APPOINTMENT_ON_DATE: ClassVar[str] = "There are no appointments on {}."

    index: Index | None = None
    day: date | None = None

    def execute(self, model: ModelManager) -> CommandResult:
        if self.index is not None:
            person = _person_at(model, self.index)
            if not person.has_appointment():
                raise CommandError(self.MESSAGE_NO_APPOINTMENT_FOR_PERSON)
            model.set_person(person, person.with_appointment(NO_APPOINTMENT))
            return CommandResult(self.MESSAGE_SUCCESS)
        if not model.has_appointment_with_date(self.day):
            raise CommandError(
                self.MESSAGE_NO_APPOINTMENT_ON_DATE.format(self.day.strftime(DATE_FORMAT))
            )
        model.clear_appointments(self.day)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class GatherCommand:
    COMMAND_WORD: ClassVar[str] = "gather"
    MESSAGE_USAGE: ClassVar[str] = (
        "gather: Gathers the emails of all persons with the given financial plan or tag.\n"
        "Parameters: fp/FINANCIAL_PLAN or t/TAG (exactly one)\n"
        "Example: gather fp/Retirement Plan"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Emails of persons with {}:\n{}"

    prompt: GatherEmailPrompt

    def execute(self, model: ModelManager) -> CommandResult:
        emails = model.gather_emails(self.prompt)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.prompt, emails))


@dataclass(frozen=True)
class HelpCommand:
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows program usage instructions.\nExample: help"

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(help_text(), show_help=True)


@dataclass(frozen=True)
class ExitCommand:
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_SUCCESS: ClassVar[str] = "Exiting Address Book as requested ..."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, exit=True)


def help_text() -> str:
    """Usage of every command, one block per command."""
    usages = [
        AddCommand.MESSAGE_USAGE,
        EditCommand.MESSAGE_USAGE,
        DeleteCommand.MESSAGE_USAGE,
        FindCommand.MESSAGE_USAGE,
        RemarkCommand.MESSAGE_USAGE,
        SortCommand.MESSAGE_USAGE,
        ScheduleCommand.MESSAGE_USAGE,
        CompleteCommand.MESSAGE_USAGE,
        GatherCommand.MESSAGE_USAGE,
        "list: Lists all persons.",
        "clear: Clears all entries from the address book.",
        "exit: Exits the program.",
    ]
    return "\n\n".join(usages)
