"""User-facing messages shared by parsers and commands."""

from clientbook.domain import Person

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"


def format_person(person: Person) -> str:
    """One-line description of a person for command feedback."""
    parts = [
        person.name.value,
        f"; Phone: {person.phone}",
        f"; Email: {person.email}",
        f"; Address: {person.address}",
    ]
    if person.next_of_kin_name is not None:
        parts.append(f"; Next-of-kin Name: {person.next_of_kin_name}")
    if person.next_of_kin_phone is not None:
        parts.append(f"; Next-of-kin Phone: {person.next_of_kin_phone}")
    if person.remark.value:
        parts.append(f"; Remark: {person.remark}")
    if person.has_appointment():
        parts.append(f"; Appointment: {person.appointment}")
    parts.append("; Financial Plans: " + "".join(sorted(str(fp) for fp in person.financial_plans)))
    parts.append("; Tags: " + "".join(sorted(str(t) for t in person.tags)))
    return "".join(parts)
