"""Tests for field value objects: validation rules, messages and value equality."""

import dataclasses
import time

import pytest

from clientbook.domain import (
    Address,
    AppointmentName,
    Email,
    FinancialPlan,
    Name,
    NextOfKinName,
    NextOfKinPhone,
    Phone,
    ProgrammerError,
    Remark,
    Tag,
    ValidationError,
)


@pytest.mark.parametrize("raw", ["peter jack", "12345", "peter the 2nd", "Capital Tan", "David Roger Jackson Ray Jr 2nd"])
def test_name_valid(raw) -> None:
    assert Name.is_valid(raw)
    assert Name(raw).value == raw


@pytest.mark.parametrize("raw", ["", " ", "^", "peter*", " peter"])
def test_name_invalid_raises_with_constraints(raw) -> None:
    assert not Name.is_valid(raw)
    with pytest.raises(ValidationError) as exc:
        Name(raw)
    assert str(exc.value) == Name.MESSAGE_CONSTRAINTS


@pytest.mark.parametrize("raw", ["911", "93121534", "124293842033123"])
def test_phone_valid(raw) -> None:
    assert Phone.is_valid(raw)


@pytest.mark.parametrize("raw", ["", " ", "91", "phone", "9011p041", "9312 1534"])
def test_phone_invalid(raw) -> None:
    assert not Phone.is_valid(raw)
    with pytest.raises(ValidationError, match="at least 3 digits"):
        Phone(raw)


@pytest.mark.parametrize(
    "raw",
    [
        "PeterJack_1190@example.com",
        "a@bc",
        "test@localhost",
        "a1+be.d@example1.com",
        "peter_jack@very-very-very-long-example.com",
        "e1234567@u.nus.edu",
    ],
)
def test_email_valid(raw) -> None:
    assert Email.is_valid(raw)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "@example.com",
        "peterjack@",
        "peterjackexample.com",
        "peter jack@example.com",
        "peterjack@example_com",
        "-peterjack@example.com",
        "peterjack-@example.com",
        "peterjack@example.c",
        "peterjack@-example.com",
        "peterjack@example.com-",
    ],
)
def test_email_invalid(raw) -> None:
    assert not Email.is_valid(raw)
    with pytest.raises(ValidationError):
        Email(raw)


def test_email_with_long_invalid_domain_is_rejected_quickly() -> None:
    raw = "a@" + "a" * 40 + "!"
    start = time.perf_counter()
    assert not Email.is_valid(raw)
    with pytest.raises(ValidationError):
        Email(raw)
    assert time.perf_counter() - start < 1.0


def test_email_last_label_length() -> None:
    assert Email.is_valid("a@bc")
    assert Email.is_valid("a@b.cd-ef")
    assert not Email.is_valid("a@bc.d")


def test_address_rules() -> None:
    assert Address.is_valid("Blk 456, Den Road, #01-355")
    assert Address.is_valid("-")
    assert not Address.is_valid("")
    assert not Address.is_valid(" ")


def test_remark_accepts_anything() -> None:
    assert Remark.is_valid("")
    assert Remark.is_valid("  likes to swim  ")
    assert Remark("").value == ""


def test_tag_rules() -> None:
    assert Tag.is_valid("friends")
    assert Tag.is_valid("owesMoney2")
    assert not Tag.is_valid("")
    assert not Tag.is_valid("best friend")
    assert not Tag.is_valid("friend#")


def test_financial_plan_rules() -> None:
    assert FinancialPlan.is_valid("Retirement Plan 2")
    assert not FinancialPlan.is_valid("")
    assert not FinancialPlan.is_valid("Plan!")


def test_next_of_kin_fields_have_own_messages() -> None:
    with pytest.raises(ValidationError) as name_exc:
        NextOfKinName("")
    assert str(name_exc.value) == NextOfKinName.MESSAGE_CONSTRAINTS
    with pytest.raises(ValidationError) as phone_exc:
        NextOfKinPhone("12")
    assert str(phone_exc.value) == NextOfKinPhone.MESSAGE_CONSTRAINTS
    assert NextOfKinName("Jane Doe").value == "Jane Doe"


def test_appointment_name_rules() -> None:
    assert AppointmentName.is_valid("Annual review")
    assert not AppointmentName.is_valid("")


def test_value_equality_and_hashing() -> None:
    assert Name("Alice") == Name("Alice")
    assert Name("Alice") != Name("alice")
    assert len({Tag("a"), Tag("a"), Tag("b")}) == 2
    assert Name("Alice") != NextOfKinName("Alice")


def test_fields_are_immutable() -> None:
    name = Name("Alice")
    with pytest.raises(dataclasses.FrozenInstanceError):
        name.value = "Bob"


def test_none_is_a_programmer_error() -> None:
    with pytest.raises(ProgrammerError):
        Name(None)


def test_str_forms() -> None:
    assert str(Name("Alice")) == "Alice"
    assert str(Tag("friends")) == "[friends]"
    assert str(FinancialPlan("Health")) == "[Health]"
