"""User-recoverable errors raised while parsing or executing a command."""


class ParseError(Exception):
    """A command line is structurally malformed. The message is shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateArgumentError(ParseError):
    """A single-valued prefix was given more than once."""


class NothingEditedError(ParseError):
    """An edit command does not change any field."""


class CommandError(Exception):
    """A well-formed command cannot be applied to the current model."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
