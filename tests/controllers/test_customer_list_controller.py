# -*- coding: utf-8 -*-
"""
Tests for the customer list controller: query state, paging and reports.
"""
import pytest

from app.config import Config
from controllers.base_controller import ErrorKind
from controllers.customer_list_controller import CustomerListController, CustomerQuery

from conftest import make_customer, server_error


@pytest.fixture
def controller(qapp, fake_api):
    return CustomerListController(api=fake_api)


class TestQueryState:

    def test_defaults(self, controller):
        query = controller.query
        assert (query.search, query.city, query.state, query.pin_code) == ("", "", "", "")
        assert query.sort_by == "created_at"
        assert query.sort_order == "DESC"
        assert query.page == 1
        assert query.page_size == Config.DEFAULT_PAGE_SIZE

    def test_city_resets_page(self, controller):
        controller.set_page(5)

        controller.set_filter("city", "Pune")

        assert controller.query.city == "Pune"
        assert controller.query.page == 1

    def test_sort_resets_page(self, controller):
        controller.set_page(3)
        controller.set_filter("sort_by", "last_name")
        assert controller.query.page == 1

        controller.set_page(2)
        controller.set_filter("sort_order", "asc")
        assert controller.query.sort_order == "ASC"
        assert controller.query.page == 1

    def test_set_page_keeps_filters(self, controller):
        controller.set_filter("search", "asha")
        controller.set_page(4)
        assert controller.query.search == "asha"
        assert controller.query.page == 4

    @pytest.mark.parametrize("name, value", [
        ("sort_by", "email"),
        ("sort_order", "SIDEWAYS"),
        ("nickname", "x"),
    ])
    def test_rejects_bad_filters(self, controller, name, value):
        with pytest.raises(ValueError):
            controller.set_filter(name, value)

    def test_rejects_bad_paging(self, controller):
        with pytest.raises(ValueError):
            controller.set_page(0)
        with pytest.raises(ValueError):
            controller.set_page_size(0)

    def test_page_size_resets_page(self, controller):
        controller.set_page(3)
        controller.set_page_size(25)
        assert controller.query.page == 1
        assert controller.query.page_size == 25

    def test_clear_restores_defaults(self, controller):
        controller.set_filter("search", "asha")
        controller.set_filter("state", "Goa")
        controller.set_filter("sort_by", "first_name")
        controller.set_filter("sort_order", "ASC")
        controller.set_page(7)

        controller.clear()

        assert controller.query == CustomerQuery()

    def test_request_params(self, controller):
        controller.set_filter("pin_code", "411001")
        controller.set_page(2)

        assert controller.build_request_params() == {
            "page": 2,
            "limit": Config.DEFAULT_PAGE_SIZE,
            "search": "",
            "city": "",
            "state": "",
            "pin_code": "411001",
            "sortBy": "created_at",
            "sortOrder": "DESC",
        }


class TestLoading:

    def test_load_uses_server_totals(self, controller, fake_api):
        fake_api.pagination = {"currentPage": 2, "totalPages": 9, "totalItems": 87}
        controller.set_page(2)

        result = controller.load_customers()

        assert result.success
        page = result.data
        assert page.total_items == 87
        assert page.total_pages == 9
        assert page.current_page == 2
        assert page.has_next and page.has_previous
        assert page.items[0].full_name == "Asha Rao"
        assert fake_api.calls[0] == ("get_customers", (controller.build_request_params(),))

    def test_load_failure(self, controller, fake_api):
        fake_api.failures["get_customers"] = server_error("")

        result = controller.load_customers()

        assert not result.success
        assert result.kind == ErrorKind.REMOTE
        assert result.message == "Failed to load customers"

    def test_outdated_response_is_not_kept(self, controller, fake_api):
        original = fake_api.get_customers

        def get_customers(params):
            # The operator types again while the request is in flight
            controller.set_filter("city", "Pune")
            return original(params)

        fake_api.get_customers = get_customers
        controller.set_filter("city", "P")

        result = controller.load_customers()

        assert result.success
        assert controller.page_result is None

        fake_api.get_customers = original
        controller.load_customers()
        assert controller.page_result is not None

    def test_delete_customer(self, qtbot, controller, fake_api):
        with qtbot.waitSignal(controller.customer_deleted):
            result = controller.delete_customer(1)

        assert result.success
        assert result.message == "Customer deleted successfully"
        assert 1 not in fake_api.customers

    def test_reports(self, controller, fake_api):
        fake_api.report_rows = [make_customer(1, address_count=3), make_customer(2, address_count=2)]

        result = controller.load_customers_with_multiple_addresses()

        assert result.success
        assert [c.address_count for c in result.data] == [3, 2]
        assert fake_api.call_names() == ["get_customers_with_multiple_addresses"]

        controller.load_customers_with_single_address()
        assert fake_api.call_names()[-1] == "get_customers_with_single_address"
