"""Domain errors. ValidationError is user-facing; ProgrammerError signals a caller bug."""


class ValidationError(ValueError):
    """A raw field value does not satisfy the field's format rule."""


class ProgrammerError(Exception):
    """An invariant was violated by the caller. Not meant to be caught."""


class DuplicatePersonError(ProgrammerError):
    """Operation would result in two persons with the same name."""

    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate persons.")


class PersonNotFoundError(ProgrammerError):
    """Target person is not in the address book."""

    def __init__(self) -> None:
        super().__init__("Person not found in the address book.")
