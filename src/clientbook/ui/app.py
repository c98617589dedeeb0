"""Interactive command loop: wires storage, model, logic and the terminal view."""

import logging

from rich.console import Console

from clientbook.application import (
    AddressBookStorage,
    CommandFailure,
    LogicManager,
    ModelManager,
)
from clientbook.domain import AddressBook
from clientbook.infrastructure import (
    DataLoadingError,
    JsonAddressBookStorage,
    Settings,
    sample_address_book,
)
from clientbook.ui.view import PersonListView

logger = logging.getLogger(__name__)

PROMPT = "clientbook> "


def initial_address_book(storage: AddressBookStorage, settings: Settings) -> AddressBook:
    """Stored data if any; sample data for a first run; an empty book if the file is unreadable."""
    try:
        loaded = storage.load()
    except DataLoadingError as exc:
        logger.warning("%s. Starting with an empty address book.", exc)
        return AddressBook()
    if loaded is not None:
        return loaded
    if settings.load_sample_data:
        logger.info("No data file found. Starting with sample data.")
        return sample_address_book()
    return AddressBook()


def build_logic(settings: Settings) -> LogicManager:
    storage = JsonAddressBookStorage(settings.data_file_path)
    model = ModelManager(initial_address_book(storage, settings))
    return LogicManager(model, storage)


def run(settings: Settings, console: Console | None = None) -> None:
    """Read commands until exit or end of input."""
    console = console or Console()
    logic = build_logic(settings)
    view = PersonListView(console)
    view.render(logic.model)
    view.attach(logic.model)
    logger.info("Clientbook running. Data file: %s", settings.data_file_path)
    try:
        while True:
            try:
                line = console.input(PROMPT)
            except EOFError:
                break
            if not line.strip():
                continue
            result = logic.execute(line)
            if isinstance(result, CommandFailure):
                console.print(result.message, style="red", markup=False, highlight=False)
                continue
            console.print(result.feedback, markup=False, highlight=False)
            if result.exit:
                break
    finally:
        view.detach()
