# -*- coding: utf-8 -*-
"""
Tests for FormController: two-phase edit (set_field) and validate.
"""
import pytest

from controllers.form_controller import FormController
from models.address import AddressDraft
from models.customer import CustomerDraft


@pytest.fixture
def customer_form(qapp):
    return FormController.for_customer()


def fill_customer(form, **overrides):
    values = {"first_name": "Jo", "last_name": "Lee", "phone_number": "9999999999", "email": ""}
    values.update(overrides)
    for name, value in values.items():
        form.set_field(name, value)


def test_defaults(qapp):
    assert FormController.for_customer().draft == CustomerDraft()
    assert FormController.for_address().draft.is_primary is True
    assert FormController.for_address(is_primary=False).draft.is_primary is False


def test_clean_draft_validates(customer_form):
    fill_customer(customer_form)

    assert customer_form.validate() is True
    assert customer_form.errors == {}


def test_validate_replaces_error_mapping(customer_form):
    fill_customer(customer_form, phone_number="0123", email="nope")
    assert customer_form.validate() is False
    assert set(customer_form.errors) == {"phone_number", "email"}

    customer_form.set_field("phone_number", "9876543210")
    customer_form.set_field("email", "jo@example.com")
    assert customer_form.validate() is True
    assert customer_form.errors == {}


def test_set_field_clears_only_that_error(customer_form):
    customer_form.validate()
    assert "first_name" in customer_form.errors
    assert "last_name" in customer_form.errors

    # Still invalid, but the stale error is dropped until the next validate()
    customer_form.set_field("first_name", "J")

    assert "first_name" not in customer_form.errors
    assert "last_name" in customer_form.errors


def test_set_field_does_not_validate(customer_form):
    customer_form.set_field("phone_number", "0123")
    assert customer_form.errors == {}


def test_unknown_field(customer_form):
    with pytest.raises(ValueError):
        customer_form.set_field("nickname", "JJ")


def test_reset_with_draft_copies_it(qapp):
    form = FormController.for_address()
    draft = AddressDraft("12 MG Road", "Pune", "Maharashtra", "411001", False)

    form.reset(draft)
    form.set_field("city", "Mumbai")

    assert draft.city == "Pune"
    assert form.value("city") == "Mumbai"
    assert form.value("is_primary") is False


def test_reset_to_defaults_clears_errors(customer_form):
    fill_customer(customer_form, phone_number="0")
    customer_form.validate()

    customer_form.reset()

    assert customer_form.draft == CustomerDraft()
    assert not customer_form.has_errors


def test_signals(qtbot, customer_form):
    with qtbot.waitSignal(customer_form.field_changed) as blocker:
        customer_form.set_field("first_name", "Jo")
    assert blocker.args == ["first_name", "Jo"]

    with qtbot.waitSignal(customer_form.errors_changed) as blocker:
        customer_form.validate()
    assert "phone_number" in blocker.args[0]


def test_snapshot_is_request_body(customer_form):
    fill_customer(customer_form, email="jo@example.com")
    assert customer_form.snapshot() == {
        "first_name": "Jo",
        "last_name": "Lee",
        "phone_number": "9999999999",
        "email": "jo@example.com",
    }
