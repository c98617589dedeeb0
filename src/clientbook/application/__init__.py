"""Application layer: parsing, commands, model, and ports. Depends only on domain."""

from clientbook.application.commands import (
    Command,
    CommandResult,
    EditCommand,
    EditPersonDescriptor,
)
from clientbook.application.dto import CommandFailure, ParsedCommand, ParseFailure
from clientbook.application.errors import (
    CommandError,
    DuplicateArgumentError,
    NothingEditedError,
    ParseError,
)
from clientbook.application.logic import LogicManager
from clientbook.application.model import ModelManager, ScheduledAppointment
from clientbook.application.parsers import COMMAND_PARSERS, parse_command
from clientbook.application.ports import AddressBookStorage
from clientbook.application.tokenizer import ArgumentMultimap, Prefix, tokenize

__all__ = [
    "COMMAND_PARSERS",
    "AddressBookStorage",
    "ArgumentMultimap",
    "Command",
    "CommandError",
    "CommandFailure",
    "CommandResult",
    "DuplicateArgumentError",
    "EditCommand",
    "EditPersonDescriptor",
    "LogicManager",
    "ModelManager",
    "NothingEditedError",
    "ParseError",
    "ParseFailure",
    "ParsedCommand",
    "Prefix",
    "ScheduledAppointment",
    "parse_command",
    "tokenize",
]
