"""Tests for LogicManager: parse, execute and save in one call."""

from clientbook.application import CommandFailure, CommandResult, LogicManager, ModelManager
from clientbook.application.commands import AddCommand
from clientbook.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_UNKNOWN_COMMAND,
)
from clientbook.infrastructure import InMemoryAddressBookStorage, JsonAddressBookStorage
from person_builder import typical_address_book


def _logic(storage=None) -> LogicManager:
    return LogicManager(ModelManager(typical_address_book()), storage or InMemoryAddressBookStorage())


def test_success_saves_address_book() -> None:
    storage = InMemoryAddressBookStorage()
    logic = _logic(storage)
    result = logic.execute(
        "add n/Zoe Lim p/81234567 e/zoe@example.com a/1 Main St fp/Health Plan t/new"
    )
    assert isinstance(result, CommandResult)
    assert result.feedback.startswith("New person added: Zoe Lim")
    assert storage.save_count == 1
    assert storage.load() == logic.model.address_book


def test_parse_failure_is_returned_not_raised() -> None:
    storage = InMemoryAddressBookStorage()
    logic = _logic(storage)
    assert logic.execute("uicfhmowqewca") == CommandFailure(MESSAGE_UNKNOWN_COMMAND)
    assert storage.save_count == 0


def test_command_error_is_returned() -> None:
    logic = _logic()
    assert logic.execute("delete 9") == CommandFailure(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)


def test_missing_field_shows_usage() -> None:
    result = _logic().execute("add n/Zoe")
    assert isinstance(result, CommandFailure)
    assert AddCommand.MESSAGE_USAGE in result.message


def test_save_failure_is_reported(tmp_path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    logic = _logic(JsonAddressBookStorage(blocker / "book.json"))
    result = logic.execute("list")
    assert isinstance(result, CommandFailure)
    assert result.message.startswith("Could not save data to file: ")


def test_views_are_exposed() -> None:
    logic = _logic()
    logic.execute("find Carl")
    assert [p.name.value for p in logic.get_filtered_person_list()] == ["Carl Kurz"]
    assert [s.person.name.value for s in logic.get_appointment_list()] == ["Carl Kurz"]


def test_edit_clear_tags_end_to_end() -> None:
    logic = _logic()
    logic.execute("edit 2 t/")
    assert logic.get_filtered_person_list()[1].tags == frozenset()
    before = logic.get_filtered_person_list()[0].tags
    logic.execute("edit 1 p/12345")
    assert logic.get_filtered_person_list()[0].tags == before
