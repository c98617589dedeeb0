"""Command parsers: one function per command word, dispatched through COMMAND_PARSERS.

Each parser takes the argument text after the command word and returns a
command or raises ParseError. parse_command() wraps the whole exchange into a
ParsedCommand / ParseFailure result.
"""

import logging
import re
from collections.abc import Callable

from clientbook.application import parser_util
from clientbook.application.commands import (
    AddCommand,
    ClearCommand,
    Command,
    CompleteCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    GatherCommand,
    HelpCommand,
    ListCommand,
    RemarkCommand,
    ScheduleCommand,
    SortCommand,
)
from clientbook.application.dto import ParsedCommand, ParseFailure
from clientbook.application.errors import NothingEditedError, ParseError
from clientbook.application.messages import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
)
from clientbook.application.syntax import (
    PREFIX_ADDRESS,
    PREFIX_APPOINTMENT_DATE,
    PREFIX_APPOINTMENT_NAME,
    PREFIX_EMAIL,
    PREFIX_FINANCIAL_PLAN,
    PREFIX_NAME,
    PREFIX_NEXT_OF_KIN_NAME,
    PREFIX_NEXT_OF_KIN_PHONE,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_TAG,
)
from clientbook.application.tokenizer import ArgumentMultimap, Prefix, tokenize
from clientbook.domain import FinancialPlan, Person, Tag
from clientbook.domain.predicates import SORT_KEYS, NameContainsKeywordsPredicate
from clientbook.domain.prompts import GatherEmailByFinancialPlan, GatherEmailByTag

logger = logging.getLogger(__name__)

_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

CommandParser = Callable[[str], Command]


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


def _parse_index_or_usage(raw: str, usage: str) -> parser_util.Index:
    try:
        return parser_util.parse_index(raw)
    except ParseError as exc:
        raise _invalid_format(usage) from exc


def _all_present(multimap: ArgumentMultimap, *prefixes: Prefix) -> bool:
    return all(multimap.get_value(p) is not None for p in prefixes)


def parse_add(args: str) -> AddCommand:
    multimap = tokenize(
        args,
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_NEXT_OF_KIN_NAME,
        PREFIX_NEXT_OF_KIN_PHONE,
        PREFIX_FINANCIAL_PLAN,
        PREFIX_TAG,
    )
    if (
        not _all_present(multimap, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
        or multimap.get_preamble()
    ):
        raise _invalid_format(AddCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_NEXT_OF_KIN_NAME,
        PREFIX_NEXT_OF_KIN_PHONE,
    )
    nok_name = multimap.get_value(PREFIX_NEXT_OF_KIN_NAME)
    nok_phone = multimap.get_value(PREFIX_NEXT_OF_KIN_PHONE)
    person = Person(
        name=parser_util.parse_name(multimap.get_value(PREFIX_NAME)),
        phone=parser_util.parse_phone(multimap.get_value(PREFIX_PHONE)),
        email=parser_util.parse_email(multimap.get_value(PREFIX_EMAIL)),
        address=parser_util.parse_address(multimap.get_value(PREFIX_ADDRESS)),
        next_of_kin_name=(
            parser_util.parse_next_of_kin_name(nok_name) if nok_name is not None else None
        ),
        next_of_kin_phone=(
            parser_util.parse_next_of_kin_phone(nok_phone) if nok_phone is not None else None
        ),
        financial_plans=parser_util.parse_financial_plans(
            multimap.get_all_values(PREFIX_FINANCIAL_PLAN)
        ),
        tags=parser_util.parse_tags(multimap.get_all_values(PREFIX_TAG)),
    )
    return AddCommand(person)


def _parse_tags_for_edit(values: list[str]) -> frozenset[Tag] | None:
    """None when no t/ was given; empty set when the only t/ is blank."""
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parser_util.parse_tags(values)


def _parse_financial_plans_for_edit(values: list[str]) -> frozenset[FinancialPlan] | None:
    """None when no fp/ was given; empty set when the only fp/ is blank."""
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parser_util.parse_financial_plans(values)


def parse_edit(args: str) -> EditCommand:
    multimap = tokenize(
        args,
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_NEXT_OF_KIN_NAME,
        PREFIX_NEXT_OF_KIN_PHONE,
        PREFIX_FINANCIAL_PLAN,
        PREFIX_TAG,
    )
    index = _parse_index_or_usage(multimap.get_preamble(), EditCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_NEXT_OF_KIN_NAME,
        PREFIX_NEXT_OF_KIN_PHONE,
    )

    descriptor = EditPersonDescriptor()
    if (value := multimap.get_value(PREFIX_NAME)) is not None:
        descriptor.name = parser_util.parse_name(value)
    if (value := multimap.get_value(PREFIX_PHONE)) is not None:
        descriptor.phone = parser_util.parse_phone(value)
    if (value := multimap.get_value(PREFIX_EMAIL)) is not None:
        descriptor.email = parser_util.parse_email(value)
    if (value := multimap.get_value(PREFIX_ADDRESS)) is not None:
        descriptor.address = parser_util.parse_address(value)
    if (value := multimap.get_value(PREFIX_NEXT_OF_KIN_NAME)) is not None:
        descriptor.next_of_kin_name = parser_util.parse_next_of_kin_name(value)
    if (value := multimap.get_value(PREFIX_NEXT_OF_KIN_PHONE)) is not None:
        descriptor.next_of_kin_phone = parser_util.parse_next_of_kin_phone(value)
    descriptor.financial_plans = _parse_financial_plans_for_edit(
        multimap.get_all_values(PREFIX_FINANCIAL_PLAN)
    )
    descriptor.tags = _parse_tags_for_edit(multimap.get_all_values(PREFIX_TAG))

    if not descriptor.is_any_field_edited():
        raise NothingEditedError(EditCommand.MESSAGE_NOT_EDITED)
    return EditCommand(index, descriptor)


def parse_delete(args: str) -> DeleteCommand:
    return DeleteCommand(_parse_index_or_usage(args, DeleteCommand.MESSAGE_USAGE))


def parse_find(args: str) -> FindCommand:
    keywords = args.split()
    if not keywords:
        raise _invalid_format(FindCommand.MESSAGE_USAGE)
    return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


def parse_remark(args: str) -> RemarkCommand:
    multimap = tokenize(args, PREFIX_REMARK)
    index = _parse_index_or_usage(multimap.get_preamble(), RemarkCommand.MESSAGE_USAGE)
    value = multimap.get_value(PREFIX_REMARK)
    if value is None:
        raise _invalid_format(RemarkCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(PREFIX_REMARK)
    return RemarkCommand(index, parser_util.parse_remark(value))


def parse_sort(args: str) -> SortCommand:
    field_name = args.strip().lower()
    key = SORT_KEYS.get(field_name)
    if key is None:
        raise _invalid_format(SortCommand.MESSAGE_USAGE)
    return SortCommand(field_name, key)


def parse_schedule(args: str) -> ScheduleCommand:
    multimap = tokenize(args, PREFIX_APPOINTMENT_NAME, PREFIX_APPOINTMENT_DATE)
    index = _parse_index_or_usage(multimap.get_preamble(), ScheduleCommand.MESSAGE_USAGE)
    if not _all_present(multimap, PREFIX_APPOINTMENT_NAME, PREFIX_APPOINTMENT_DATE):
        raise _invalid_format(ScheduleCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(PREFIX_APPOINTMENT_NAME, PREFIX_APPOINTMENT_DATE)
    appointment = parser_util.parse_appointment(
        multimap.get_value(PREFIX_APPOINTMENT_NAME),
        multimap.get_value(PREFIX_APPOINTMENT_DATE),
    )
    return ScheduleCommand(index, appointment)


def parse_complete(args: str) -> CompleteCommand:
    multimap = tokenize(args, PREFIX_APPOINTMENT_DATE)
    preamble = multimap.get_preamble()
    raw_date = multimap.get_value(PREFIX_APPOINTMENT_DATE)
    if bool(preamble) == (raw_date is not None):
        raise _invalid_format(CompleteCommand.MESSAGE_USAGE)
    if raw_date is None:
        return CompleteCommand(index=_parse_index_or_usage(preamble, CompleteCommand.MESSAGE_USAGE))
    multimap.verify_no_duplicate_prefixes_for(PREFIX_APPOINTMENT_DATE)
    return CompleteCommand(day=parser_util.parse_appointment_date(raw_date))


def parse_gather(args: str) -> GatherCommand:
    multimap = tokenize(args, PREFIX_FINANCIAL_PLAN, PREFIX_TAG)
    plans = multimap.get_all_values(PREFIX_FINANCIAL_PLAN)
    tags = multimap.get_all_values(PREFIX_TAG)
    if multimap.get_preamble() or len(plans) + len(tags) != 1:
        raise _invalid_format(GatherCommand.MESSAGE_USAGE)
    if plans:
        if not plans[0]:
            raise _invalid_format(GatherCommand.MESSAGE_USAGE)
        return GatherCommand(GatherEmailByFinancialPlan(plans[0]))
    if not tags[0]:
        raise _invalid_format(GatherCommand.MESSAGE_USAGE)
    return GatherCommand(GatherEmailByTag(tags[0]))


COMMAND_PARSERS: dict[str, CommandParser] = {
    AddCommand.COMMAND_WORD: parse_add,
    EditCommand.COMMAND_WORD: parse_edit,
    DeleteCommand.COMMAND_WORD: parse_delete,
    FindCommand.COMMAND_WORD: parse_find,
    RemarkCommand.COMMAND_WORD: parse_remark,
    SortCommand.COMMAND_WORD: parse_sort,
    ScheduleCommand.COMMAND_WORD: parse_schedule,
    CompleteCommand.COMMAND_WORD: parse_complete,
    GatherCommand.COMMAND_WORD: parse_gather,
    ClearCommand.COMMAND_WORD: lambda args: ClearCommand(),
    ListCommand.COMMAND_WORD: lambda args: ListCommand(),
    HelpCommand.COMMAND_WORD: lambda args: HelpCommand(),
    ExitCommand.COMMAND_WORD: lambda args: ExitCommand(),
}


def parse_command(line: str) -> ParsedCommand | ParseFailure:
    """Parse one line of user input into a command, or a failure carrying the message to show."""
    match = _COMMAND_FORMAT.fullmatch((line or "").strip())
    if match is None:
        return ParseFailure(MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE))

    command_word = match.group("command_word")
    arguments = match.group("arguments")
    logger.debug("Command word: %s; arguments: %s", command_word, arguments)

    parser = COMMAND_PARSERS.get(command_word)
    if parser is None:
        logger.debug("Unknown command word: %s", command_word)
        return ParseFailure(MESSAGE_UNKNOWN_COMMAND)
    try:
        return ParsedCommand(parser(arguments))
    except ParseError as exc:
        return ParseFailure(exc.message)
