"""Tests for ModelManager: mutations, derived views and listeners."""

from datetime import date

import pytest

from clientbook.application import ModelManager
from clientbook.domain import AddressBook, DuplicatePersonError, ProgrammerError
from clientbook.domain.predicates import (
    NameContainsKeywordsPredicate,
    by_appointment,
    by_name,
    show_all_persons,
)
from person_builder import (
    ALICE,
    BENSON,
    CARL,
    DANIEL,
    ELLE,
    TYPICAL_PERSONS,
    make_person,
    typical_address_book,
)


def _model() -> ModelManager:
    return ModelManager(typical_address_book())


def _appointment_owners(model: ModelManager) -> list[str]:
    return [s.person.name.value for s in model.get_appointment_list()]


def test_new_model_is_empty() -> None:
    model = ModelManager()
    assert model.get_filtered_person_list() == ()
    assert model.get_appointment_list() == ()
    assert model.address_book == AddressBook()


def test_model_copies_the_given_book() -> None:
    book = typical_address_book()
    model = ModelManager(book)
    book.remove_person(ALICE)
    assert ALICE in model.get_filtered_person_list()


def test_appointments_sorted_by_date_time() -> None:
    model = _model()
    assert _appointment_owners(model) == ["Carl Kurz", "Elle Meyer", "Alice Pauline"]
    items = model.get_appointment_list()
    assert items[0].appointment == CARL.appointment
    assert items[0].person == CARL


def test_appointment_view_is_stable_between_queries() -> None:
    model = _model()
    assert model.get_appointment_list() == model.get_appointment_list()


def test_appointment_view_follows_filter() -> None:
    model = _model()
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Alice", "Benson")))
    assert model.get_filtered_person_list() == (ALICE, BENSON)
    assert _appointment_owners(model) == ["Alice Pauline"]


def test_filter_returns_exact_subset_in_sort_order() -> None:
    model = _model()
    model.sort_filtered_person_list(by_name)
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Meier",)))
    assert model.get_filtered_person_list() == (BENSON, DANIEL)


def test_add_person_resets_filter() -> None:
    model = _model()
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Carl",)))
    newcomer = make_person(name="Zed Zee", appointment=("Intro", "01-01-2027 09:00"))
    model.add_person(newcomer)
    assert len(model.get_filtered_person_list()) == 6
    assert _appointment_owners(model)[0] == "Zed Zee"


def test_add_duplicate_fails_without_mutation() -> None:
    model = _model()
    with pytest.raises(DuplicatePersonError):
        model.add_person(make_person(name="carl kurz"))
    assert model.get_filtered_person_list() == tuple(TYPICAL_PERSONS)


def test_delete_person_updates_appointments() -> None:
    model = _model()
    model.delete_person(CARL)
    assert CARL not in model.get_filtered_person_list()
    assert _appointment_owners(model) == ["Elle Meyer", "Alice Pauline"]


def test_set_person_updates_views() -> None:
    model = _model()
    edited = BENSON.with_appointment(CARL.appointment)
    model.set_person(BENSON, edited)
    assert model.get_filtered_person_list()[1] == edited
    assert "Benson Meier" in _appointment_owners(model)


def test_clear_appointments() -> None:
    model = _model()
    model.clear_appointments(date(2027, 1, 10))
    assert _appointment_owners(model) == ["Carl Kurz"]
    assert not model.has_appointment_with_date(date(2027, 1, 10))


def test_set_address_book_replaces_everything() -> None:
    model = _model()
    model.set_address_book(AddressBook([ELLE]))
    assert model.get_filtered_person_list() == (ELLE,)
    assert _appointment_owners(model) == ["Elle Meyer"]


def test_sort_by_name_and_back_to_insertion_order() -> None:
    model = ModelManager(AddressBook([CARL, ALICE, BENSON]))
    model.sort_filtered_person_list(by_name)
    assert model.get_filtered_person_list() == (ALICE, BENSON, CARL)
    model.sort_filtered_person_list(None)
    assert model.get_filtered_person_list() == (CARL, ALICE, BENSON)


def test_sort_does_not_change_appointment_order() -> None:
    model = _model()
    before = model.get_appointment_list()
    model.sort_filtered_person_list(by_name)
    assert model.get_appointment_list() == before


def test_sort_by_appointment_puts_unscheduled_last() -> None:
    model = _model()
    model.sort_filtered_person_list(by_appointment)
    names = [p.name.value for p in model.get_filtered_person_list()]
    assert names == ["Carl Kurz", "Elle Meyer", "Alice Pauline", "Benson Meier", "Daniel Meier"]


def test_listeners_are_notified_until_unsubscribed() -> None:
    model = _model()
    calls = []
    unsubscribe = model.subscribe(lambda m: calls.append(len(m.get_filtered_person_list())))
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Alice",)))
    model.update_filtered_person_list(show_all_persons)
    assert calls == [1, 5]
    unsubscribe()
    model.delete_person(ALICE)
    assert calls == [1, 5]


def test_none_arguments_are_programmer_errors() -> None:
    model = _model()
    with pytest.raises(ProgrammerError):
        model.add_person(None)
    with pytest.raises(ProgrammerError):
        model.update_filtered_person_list(None)
    with pytest.raises(ProgrammerError):
        model.set_person(ALICE, None)


def test_equality() -> None:
    assert _model() == _model()
    other = _model()
    other.update_filtered_person_list(NameContainsKeywordsPredicate(("Alice",)))
    assert _model() != other
