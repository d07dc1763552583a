# -*- coding: utf-8 -*-
"""
Tests for the customer list page loading.
"""
import threading

import pytest

from controllers.customer_list_controller import CustomerListController
from ui.pages.customer_list_page import CustomerListPage

from conftest import make_customer, server_error, wait_for_workers


@pytest.fixture
def page(qtbot, fake_api):
    view = CustomerListPage(CustomerListController(api=fake_api))
    qtbot.addWidget(view)
    yield view
    wait_for_workers(qtbot, view)


def shown_ids(page):
    model = page.table_model
    return [model.get_item(row).id for row in range(model.rowCount())]


def test_slow_older_load_does_not_replace_newer(qtbot, page, fake_api):
    release = threading.Event()
    original = fake_api.get_customers

    def get_customers(params):
        response = original(params)
        if params["city"] == "P":
            release.wait(5)
            response["data"] = [make_customer(1, city="Pune")]
        else:
            response["data"] = [make_customer(7, city="Pune")]
        return response

    fake_api.get_customers = get_customers

    try:
        page._set_filter("city", "P", delay=False)
        page._set_filter("city", "Pune", delay=False)
        qtbot.waitUntil(lambda: shown_ids(page) == [7])
    finally:
        release.set()

    wait_for_workers(qtbot, page)
    qtbot.wait(50)

    assert page.controller.query.city == "Pune"
    assert shown_ids(page) == [7]
    assert page.controller.page_result.items[0].id == 7
    assert page.content.isEnabled()


def test_failed_load_reports_message(qtbot, page, fake_api):
    fake_api.failures["get_customers"] = server_error("")

    page.refresh()

    qtbot.waitUntil(lambda: page.count_label.text() == "Failed to load customers")
    assert page.content.isEnabled()
