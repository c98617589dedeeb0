"""Tests for the terminal view and the command loop. Output goes to a recording Console."""

import io

from rich.console import Console

from clientbook.application import ModelManager
from clientbook.domain.predicates import NameContainsKeywordsPredicate
from clientbook.infrastructure import JsonAddressBookStorage, Settings
from clientbook.ui import PersonListView, build_logic, run
from clientbook.ui.app import initial_address_book
from person_builder import typical_address_book


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, record=True, force_terminal=False)


def test_view_renders_on_model_change() -> None:
    console = _console()
    model = ModelManager(typical_address_book())
    view = PersonListView(console)
    view.attach(model)
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Carl",)))
    text = console.export_text()
    assert "Carl Kurz" in text
    assert "Kickoff" in text
    assert "Benson Meier" not in text

    view.detach()
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Benson",)))
    assert "Benson Meier" not in console.export_text()


def test_initial_book_uses_sample_data_only_when_file_missing(tmp_path) -> None:
    storage = JsonAddressBookStorage(tmp_path / "book.json")
    assert len(initial_address_book(storage, Settings(load_sample_data=True))) > 0
    assert len(initial_address_book(storage, Settings(load_sample_data=False))) == 0

    (tmp_path / "book.json").write_text("{broken", encoding="utf-8")
    assert len(initial_address_book(storage, Settings(load_sample_data=True))) == 0

    (tmp_path / "book.json").write_bytes(b'{"persons": [\xff]}')
    assert len(initial_address_book(storage, Settings(load_sample_data=True))) == 0


def test_run_until_exit(tmp_path, monkeypatch) -> None:
    data_file = tmp_path / "book.json"
    settings = Settings(data_file_path=data_file, load_sample_data=False)
    lines = iter(["add n/Zoe Lim p/81234567 e/zoe@example.com a/1 Main St", "delete 5", "exit"])
    console = _console()
    monkeypatch.setattr(console, "input", lambda prompt="": next(lines))
    run(settings, console=console)

    text = console.export_text()
    assert "New person added: Zoe Lim" in text
    assert "The person index provided is invalid" in text
    assert "Exiting" in text
    assert len(build_logic(settings).model.address_book) == 1


def test_run_stops_at_end_of_input(tmp_path, monkeypatch) -> None:
    settings = Settings(data_file_path=tmp_path / "book.json", load_sample_data=False)
    console = _console()

    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr(console, "input", _eof)
    run(settings, console=console)
    assert "Clients" in console.export_text()
