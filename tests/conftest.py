# -*- coding: utf-8 -*-
"""
Shared test fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from services.api_client import reset_api_client
from services.exceptions import ApiException, NetworkException


def make_customer(customer_id=1, **overrides):
    row = {
        "id": customer_id,
        "first_name": "Asha",
        "last_name": "Rao",
        "phone_number": "+919876543210",
        "email": "asha@example.com",
        "address_count": 1,
        "has_only_one_address": True,
        "created_at": "2024-03-01T10:00:00Z",
    }
    row.update(overrides)
    return row


def make_address(address_id=10, customer_id=1, **overrides):
    row = {
        "id": address_id,
        "customer_id": customer_id,
        "address_details": "12 MG Road",
        "city": "Pune",
        "state": "Maharashtra",
        "pin_code": "411001",
        "is_primary": True,
        "first_name": "Asha",
        "last_name": "Rao",
        "phone_number": "+919876543210",
    }
    row.update(overrides)
    return row


class FakeApiClient:
    """
    In-memory stand-in for CustomerApiClient.

    Every call is recorded in `calls` as (method name, args). Set
    `failures[method name]` to an exception to make that call raise it.
    """

    def __init__(self):
        self.calls = []
        self.failures = {}
        self.customers = {1: make_customer(1)}
        self.addresses = {10: make_address(10, 1)}
        self.next_customer_id = 100
        self.next_address_id = 500
        self.pagination = None
        self.search_results = [make_address(10, 1)]
        self.report_rows = [make_customer(1)]

    def _call(self, name, *args):
        self.calls.append((name, args))
        error = self.failures.get(name)
        if error is not None:
            raise error

    def call_names(self):
        return [name for name, _ in self.calls]

    # Customers

    def get_customers(self, params):
        self._call("get_customers", params)
        rows = list(self.customers.values())
        pagination = self.pagination or {
            "currentPage": params.get("page", 1),
            "totalPages": 1,
            "totalItems": len(rows),
        }
        return {"data": rows, "pagination": pagination}

    def get_customer(self, customer_id):
        self._call("get_customer", customer_id)
        if customer_id not in self.customers:
            raise ApiException("Not Found", status_code=404,
                               response_data={"error": "Customer not found"})
        return dict(self.customers[customer_id])

    def create_customer(self, data):
        self._call("create_customer", data)
        customer_id = self.next_customer_id
        self.next_customer_id += 1
        self.customers[customer_id] = make_customer(customer_id, **data)
        return customer_id

    def update_customer(self, customer_id, data):
        self._call("update_customer", customer_id, data)
        self.customers[customer_id].update(data)
        return {"message": "Customer updated successfully"}

    def delete_customer(self, customer_id):
        self._call("delete_customer", customer_id)
        self.customers.pop(customer_id, None)
        return True

    def get_customers_with_multiple_addresses(self):
        self._call("get_customers_with_multiple_addresses")
        return list(self.report_rows)

    def get_customers_with_single_address(self):
        self._call("get_customers_with_single_address")
        return list(self.report_rows)

    # Addresses

    def get_addresses(self, customer_id):
        self._call("get_addresses", customer_id)
        return [dict(a) for a in self.addresses.values() if a["customer_id"] == customer_id]

    def add_address(self, customer_id, data):
        self._call("add_address", customer_id, data)
        address_id = self.next_address_id
        self.next_address_id += 1
        self.addresses[address_id] = make_address(address_id, customer_id, **data)
        return {"id": address_id}

    def update_address(self, address_id, data):
        self._call("update_address", address_id, data)
        self.addresses[address_id].update(data)
        return {"message": "Address updated successfully"}

    def delete_address(self, address_id):
        self._call("delete_address", address_id)
        self.addresses.pop(address_id, None)
        return True

    def search_addresses(self, params):
        self._call("search_addresses", params)
        return list(self.search_results)

    def health_check(self):
        self._call("health_check")
        return True


def server_error(message="Something broke", status_code=500):
    return ApiException(
        f"{status_code} Server Error", status_code=status_code,
        response_data={"error": message}
    )


def network_error():
    return NetworkException("Connection refused", original_error=ConnectionError("refused"))


@pytest.fixture
def fake_api():
    """Fresh in-memory API."""
    return FakeApiClient()


@pytest.fixture(autouse=True)
def _reset_shared_client():
    reset_api_client()
    yield
    reset_api_client()


def wait_for_workers(qtbot, widget):
    """Block until every background worker under `widget` has finished."""
    from PyQt5.QtCore import QThread
    qtbot.waitUntil(
        lambda: all(worker.isFinished() for worker in widget.findChildren(QThread)),
        timeout=5000
    )
