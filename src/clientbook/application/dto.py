"""Result types returned across the application boundary."""

from dataclasses import dataclass

from clientbook.application.commands import Command


# --- parse_command results ---


@dataclass(frozen=True)
class ParsedCommand:
    """The line was understood; execute the command."""

    command: Command


@dataclass(frozen=True)
class ParseFailure:
    """The line was malformed. The message explains how, usually with usage text."""

    message: str


# --- LogicManager.execute failures ---


@dataclass(frozen=True)
class CommandFailure:
    """The line could not be parsed, applied or saved. Shown to the user verbatim."""

    message: str
