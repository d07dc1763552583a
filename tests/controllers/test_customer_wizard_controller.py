# -*- coding: utf-8 -*-
"""
Tests for the customer wizard: gated stages and the two-call submission.
"""
import pytest

from app.config import Config
from controllers.base_controller import ErrorKind, Severity
from controllers.customer_wizard_controller import CustomerWizardController, WizardStage

from conftest import network_error, server_error

CUSTOMER = {"first_name": "Jo", "last_name": "Lee", "phone_number": "9999999999", "email": ""}
ADDRESS = {"address_details": "12 MG Road", "city": "Pune", "state": "Maharashtra", "pin_code": "411001"}


@pytest.fixture
def wizard(qapp, fake_api):
    controller = CustomerWizardController(api=fake_api)
    controller.start_new()
    return controller


def fill(wizard, values):
    for name, value in values.items():
        wizard.set_field(name, value)


def to_review(wizard):
    fill(wizard, CUSTOMER)
    assert wizard.advance()
    fill(wizard, ADDRESS)
    assert wizard.advance()
    assert wizard.stage == WizardStage.REVIEW


class TestNavigation:

    def test_starts_at_customer_info(self, wizard):
        assert wizard.stage == WizardStage.CUSTOMER_INFO
        assert wizard.address_form.draft.is_primary is True

    def test_invalid_phone_blocks_advance(self, wizard):
        fill(wizard, dict(CUSTOMER, phone_number="0123"))

        assert wizard.advance() is False
        assert wizard.stage == WizardStage.CUSTOMER_INFO
        assert wizard.customer_form.errors["phone_number"] == "Invalid phone number format"

    def test_validation_failed_signal(self, qtbot, wizard):
        with qtbot.waitSignal(wizard.validation_failed) as blocker:
            wizard.advance()
        assert blocker.args[0] == WizardStage.CUSTOMER_INFO
        assert "first_name" in blocker.args[1]

    def test_address_stage_is_gated(self, wizard):
        fill(wizard, CUSTOMER)
        wizard.advance()
        fill(wizard, dict(ADDRESS, pin_code="012345"))

        assert wizard.advance() is False
        assert wizard.stage == WizardStage.ADDRESS_INFO
        assert wizard.address_form.errors == {"pin_code": "PIN code must be 6 digits"}

    def test_back_is_unconditional(self, wizard):
        fill(wizard, CUSTOMER)
        wizard.advance()
        wizard.set_field("city", "P")  # invalid, but going back does not validate

        assert wizard.back() is True
        assert wizard.stage == WizardStage.CUSTOMER_INFO
        assert wizard.back() is False

    def test_fields_route_to_active_stage(self, wizard):
        fill(wizard, CUSTOMER)
        wizard.advance()
        wizard.set_field("city", "Pune")

        assert wizard.address_form.value("city") == "Pune"
        with pytest.raises(ValueError):
            wizard.set_field("first_name", "Other")

    def test_review_is_read_only(self, wizard):
        to_review(wizard)
        with pytest.raises(RuntimeError):
            wizard.set_field("city", "Mumbai")
        assert wizard.advance() is False

    def test_submit_outside_review(self, wizard, fake_api):
        result = wizard.submit()

        assert not result.success
        assert result.kind == ErrorKind.VALIDATION
        assert fake_api.calls == []


class TestCreate:

    def test_create_then_add_address(self, wizard, fake_api):
        to_review(wizard)

        result = wizard.submit()

        assert result.success
        assert result.message == "Customer and address created successfully"
        assert fake_api.call_names() == ["create_customer", "add_address"]
        new_id = result.data
        add_args = fake_api.calls[1][1]
        assert add_args[0] == new_id
        assert add_args[1]["is_primary"] is True
        assert wizard.is_completed
        assert wizard.last_outcome.severity == Severity.SUCCESS

    def test_create_failure_skips_address(self, wizard, fake_api):
        fake_api.failures["create_customer"] = server_error("Phone number already exists", 409)
        to_review(wizard)

        result = wizard.submit()

        assert not result.success
        assert result.kind == ErrorKind.REMOTE
        assert result.message == "Phone number already exists"
        assert fake_api.call_names() == ["create_customer"]
        assert wizard.stage == WizardStage.REVIEW
        assert wizard.last_outcome.severity == Severity.ERROR

    def test_address_failure_is_partial(self, wizard, fake_api, monkeypatch):
        monkeypatch.setattr(Config, "COMPENSATE_FAILED_ADDRESS", False)
        fake_api.failures["add_address"] = network_error()
        to_review(wizard)

        result = wizard.submit()

        assert not result.success
        assert result.is_partial
        assert result.kind == ErrorKind.PARTIAL
        assert result.message.startswith("Customer was created, but the address could not be saved")
        assert result.data is not None
        assert fake_api.call_names() == ["create_customer", "add_address"]
        assert result.data in fake_api.customers
        assert wizard.last_outcome.severity == Severity.WARNING

    def test_address_failure_with_compensation(self, wizard, fake_api, monkeypatch):
        monkeypatch.setattr(Config, "COMPENSATE_FAILED_ADDRESS", True)
        fake_api.failures["add_address"] = server_error("Invalid PIN", 400)
        to_review(wizard)

        result = wizard.submit()

        assert result.is_partial
        assert fake_api.call_names() == ["create_customer", "add_address", "delete_customer"]
        assert result.data is None
        assert "The customer was not created" in result.message

    def test_stale_draft_routes_to_customer_info(self, wizard, fake_api):
        to_review(wizard)
        # Address draft goes stale behind the controller's back
        wizard.address_form.draft.pin_code = "0"

        result = wizard.submit()

        assert result.kind == ErrorKind.VALIDATION
        assert wizard.stage == WizardStage.CUSTOMER_INFO
        assert "pin_code" in result.errors
        assert fake_api.calls == []


class TestEdit:

    def test_load_customer_prefills_form(self, qapp, fake_api):
        wizard = CustomerWizardController(api=fake_api)

        result = wizard.load_customer(1)

        assert result.success
        assert wizard.is_editing
        assert wizard.customer_form.value("first_name") == "Asha"
        assert wizard.stage == WizardStage.CUSTOMER_INFO

    def test_load_missing_customer(self, qapp, fake_api):
        wizard = CustomerWizardController(api=fake_api)

        result = wizard.load_customer(999)

        assert not result.success
        assert result.message == "Customer not found"
        assert not wizard.is_editing

    def test_edit_submits_single_update(self, qapp, fake_api):
        wizard = CustomerWizardController(api=fake_api)
        wizard.load_customer(1)
        wizard.set_field("first_name", "Ashwini")
        wizard.advance()
        fill(wizard, ADDRESS)
        wizard.advance()

        result = wizard.submit()

        assert result.success
        assert result.message == "Customer updated successfully"
        assert fake_api.call_names() == ["get_customer", "update_customer"]
        assert fake_api.customers[1]["first_name"] == "Ashwini"

    def test_start_new_leaves_edit_mode(self, qapp, fake_api):
        wizard = CustomerWizardController(api=fake_api)
        wizard.load_customer(1)

        wizard.start_new()

        assert not wizard.is_editing
        assert wizard.customer_form.value("first_name") == ""

    def test_failed_load_discards_previous_session(self, qapp, fake_api):
        wizard = CustomerWizardController(api=fake_api)
        wizard.load_customer(1)
        wizard.set_field("first_name", "Changed")
        fake_api.failures["get_customer"] = network_error()

        result = wizard.load_customer(2)

        assert not result.success
        assert wizard.customer_id is None
        assert not wizard.is_editing
        assert wizard.customer_form.value("first_name") == ""
        assert wizard.stage == WizardStage.CUSTOMER_INFO


class TestDuplicateSubmit:

    def test_second_submit_while_saving_is_refused(self, wizard, fake_api):
        to_review(wizard)
        original = fake_api.create_customer
        nested = []

        def create_customer(data):
            nested.append(wizard.submit())
            return original(data)

        fake_api.create_customer = create_customer

        result = wizard.submit()

        assert result.success
        assert len(nested) == 1
        assert not nested[0].success
        assert nested[0].kind == ErrorKind.VALIDATION
        assert nested[0].message == "A submission is already in progress"
        assert fake_api.call_names() == ["create_customer", "add_address"]
        assert not wizard.is_submitting
