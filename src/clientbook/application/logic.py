"""Runs one line of user input: parse, execute against the model, save."""

import logging

from clientbook.application.commands import CommandResult
from clientbook.application.dto import CommandFailure, ParseFailure
from clientbook.application.errors import CommandError
from clientbook.application.model import ModelManager, ScheduledAppointment
from clientbook.application.parsers import parse_command
from clientbook.application.ports import AddressBookStorage
from clientbook.domain import Person

logger = logging.getLogger(__name__)

MESSAGE_FILE_OPS_ERROR = "Could not save data to file: {}"


class LogicManager:
    """Entry point used by the UI. Holds the model and the storage it saves to."""

    def __init__(self, model: ModelManager, storage: AddressBookStorage) -> None:
        self._model = model
        self._storage = storage

    @property
    def model(self) -> ModelManager:
        return self._model

    def execute(self, line: str) -> CommandResult | CommandFailure:
        """Run one command line. Parse and execution errors come back as CommandFailure."""
        logger.info("----------------[USER COMMAND][%s]", line)
        parsed = parse_command(line)
        if isinstance(parsed, ParseFailure):
            logger.info("Parse failure: %s", parsed.message)
            return CommandFailure(parsed.message)

        try:
            result = parsed.command.execute(self._model)
        except CommandError as exc:
            logger.info("Command failure: %s", exc.message)
            return CommandFailure(exc.message)

        try:
            self._storage.save(self._model.address_book)
        except OSError as exc:
            logger.warning("Saving address book failed: %s", exc)
            return CommandFailure(MESSAGE_FILE_OPS_ERROR.format(exc))
        return result

    def get_filtered_person_list(self) -> tuple[Person, ...]:
        return self._model.get_filtered_person_list()

    def get_appointment_list(self) -> tuple[ScheduledAppointment, ...]:
        return self._model.get_appointment_list()
