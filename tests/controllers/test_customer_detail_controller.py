# -*- coding: utf-8 -*-
"""
Tests for the customer detail controller (addresses of one customer).
"""
import pytest

from controllers.base_controller import ErrorKind
from controllers.customer_detail_controller import CustomerDetailController

from conftest import make_address, server_error


@pytest.fixture
def controller(qapp, fake_api):
    fake_api.addresses[11] = make_address(11, 1, city="Mumbai", is_primary=False)
    fake_api.addresses[12] = make_address(12, 2, city="Delhi")
    detail = CustomerDetailController(api=fake_api)
    detail.load(1)
    fake_api.calls.clear()
    return detail


def fill_address(form, **overrides):
    values = {"address_details": "7 Park Street", "city": "Kolkata", "state": "West Bengal",
              "pin_code": "700016"}
    values.update(overrides)
    for name, value in values.items():
        form.set_field(name, value)


def test_load(controller):
    assert controller.customer.full_name == "Asha Rao"
    assert [a.id for a in controller.addresses] == [10, 11]


def test_load_requires_customer(qapp, fake_api):
    with pytest.raises(ValueError):
        CustomerDetailController(api=fake_api).load()


def test_load_failure(qapp, fake_api):
    fake_api.failures["get_addresses"] = server_error("")

    result = CustomerDetailController(api=fake_api).load(1)

    assert not result.success
    assert result.message == "Failed to load customer data"


def test_new_address_defaults_to_secondary(controller):
    controller.begin_add_address()
    assert controller.address_form.value("is_primary") is False
    assert controller.editing_address is None


def test_add_address(controller, fake_api):
    controller.begin_add_address()
    fill_address(controller.address_form)

    result = controller.save_address()

    assert result.success
    assert result.message == "Address added successfully"
    assert fake_api.call_names() == ["add_address", "get_customer", "get_addresses"]
    assert len(controller.addresses) == 3


def test_invalid_address_is_not_sent(controller, fake_api):
    controller.begin_add_address()
    fill_address(controller.address_form, pin_code="0700")

    result = controller.save_address()

    assert result.kind == ErrorKind.VALIDATION
    assert result.errors == {"pin_code": "PIN code must be 6 digits"}
    assert fake_api.calls == []


def test_edit_address(controller, fake_api):
    address = controller.addresses[1]
    controller.begin_edit_address(address)
    assert controller.address_form.value("city") == "Mumbai"

    controller.address_form.set_field("city", "Thane")
    result = controller.save_address()

    assert result.message == "Address updated successfully"
    assert fake_api.calls[0][0] == "update_address"
    assert fake_api.calls[0][1][0] == 11
    assert fake_api.addresses[11]["city"] == "Thane"


def test_save_failure_keeps_form(controller, fake_api):
    fake_api.failures["add_address"] = server_error("Address limit reached", 422)
    controller.begin_add_address()
    fill_address(controller.address_form)

    result = controller.save_address()

    assert result.kind == ErrorKind.REMOTE
    assert result.message == "Address limit reached"
    assert controller.address_form.value("city") == "Kolkata"
    assert controller.last_outcome.message == "Address limit reached"


def test_delete_address(controller, fake_api):
    result = controller.delete_address(11)

    assert result.success
    assert 11 not in fake_api.addresses
    assert [a.id for a in controller.addresses] == [10]


def test_delete_customer(qtbot, controller, fake_api):
    with qtbot.waitSignal(controller.customer_deleted) as blocker:
        result = controller.delete_customer()

    assert result.success
    assert blocker.args == [1]
    assert 1 not in fake_api.customers
