# -*- coding: utf-8 -*-
"""
Tests for the customer API client (HTTP mocked at requests.request).
"""
import pytest
import requests

from services import api_client as api_module
from services.api_client import ApiConfig, CustomerApiClient, get_api_client
from services.error_mapper import CONNECTION_ERROR, TIMEOUT_ERROR, map_exception
from services.exceptions import ApiException, NetworkException


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.text = "" if payload is None else "body"

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def recorder(monkeypatch):
    """Capture outgoing requests and answer with queued responses."""
    state = {"requests": [], "responses": []}

    def fake_request(method, url, json=None, params=None, headers=None, timeout=None, verify=None):
        state["requests"].append({"method": method, "url": url, "json": json, "params": params})
        response = state["responses"].pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(api_module.requests, "request", fake_request)
    return state


@pytest.fixture
def client():
    return CustomerApiClient(ApiConfig(base_url="http://api.test/api/", timeout=5, verify_ssl=True))


def test_list_customers_sends_query(recorder, client):
    recorder["responses"].append(FakeResponse(200, {"data": [], "pagination": {"totalItems": 0}}))
    params = {"page": 2, "limit": 10, "city": "Pune"}

    payload = client.get_customers(params)

    sent = recorder["requests"][0]
    assert sent["method"] == "GET"
    assert sent["url"] == "http://api.test/api/customers"
    assert sent["params"] == params
    assert payload["pagination"]["totalItems"] == 0


def test_create_customer_reads_nested_id(recorder, client):
    recorder["responses"].append(FakeResponse(201, {"message": "created", "data": {"id": 42}}))

    assert client.create_customer({"first_name": "Jo"}) == 42
    assert recorder["requests"][0]["json"] == {"first_name": "Jo"}


def test_create_customer_without_id_is_an_error(recorder, client):
    recorder["responses"].append(FakeResponse(201, {"message": "created"}))

    with pytest.raises(ApiException):
        client.create_customer({"first_name": "Jo"})


def test_get_customer_unwraps_data(recorder, client):
    recorder["responses"].append(FakeResponse(200, {"data": {"id": 7, "first_name": "Asha"}}))

    assert client.get_customer(7) == {"id": 7, "first_name": "Asha"}
    assert recorder["requests"][0]["url"].endswith("/customers/7")


def test_address_endpoints(recorder, client):
    recorder["responses"].extend([
        FakeResponse(201, {"id": 3}),
        FakeResponse(200, {"message": "ok"}),
        FakeResponse(200, None),
    ])

    client.add_address(7, {"city": "Pune"})
    client.update_address(3, {"city": "Mumbai"})
    assert client.delete_address(3) is True

    urls = [(r["method"], r["url"]) for r in recorder["requests"]]
    assert urls == [
        ("POST", "http://api.test/api/customers/7/addresses"),
        ("PUT", "http://api.test/api/customers/addresses/3"),
        ("DELETE", "http://api.test/api/customers/addresses/3"),
    ]


def test_search_accepts_bare_list(recorder, client):
    recorder["responses"].append(FakeResponse(200, [{"id": 1, "city": "Pune"}]))

    rows = client.search_addresses({"city": "Pune", "state": "", "pin_code": ""})

    assert rows == [{"id": 1, "city": "Pune"}]
    assert recorder["requests"][0]["url"].endswith("/addresses/search")


def test_http_error_carries_server_message(recorder, client):
    recorder["responses"].append(FakeResponse(409, {"error": "Phone number already exists"}))

    with pytest.raises(ApiException) as info:
        client.create_customer({"phone_number": "9999999999"})

    assert info.value.status_code == 409
    assert map_exception(info.value, "Failed to save customer") == "Phone number already exists"


def test_http_error_without_message_uses_fallback(recorder, client):
    recorder["responses"].append(FakeResponse(500, None))

    with pytest.raises(ApiException) as info:
        client.delete_customer(1)

    assert map_exception(info.value, "Failed to delete customer") == "Failed to delete customer"


def test_connection_error_is_network_exception(recorder, client):
    recorder["responses"].append(requests.exceptions.ConnectionError("refused"))

    with pytest.raises(NetworkException) as info:
        client.get_addresses(1)

    assert map_exception(info.value, "Failed to load customer data") == CONNECTION_ERROR


def test_timeout_message(recorder, client):
    recorder["responses"].append(requests.exceptions.Timeout("read timed out"))

    with pytest.raises(NetworkException) as info:
        client.get_customer(1)

    assert map_exception(info.value, "x") == TIMEOUT_ERROR


def test_health_check(recorder, client):
    recorder["responses"].extend([
        FakeResponse(200, {"status": "ok"}),
        requests.exceptions.ConnectionError("refused"),
    ])

    assert client.health_check() is True
    assert client.health_check() is False


def test_shared_client_is_reused():
    assert get_api_client() is get_api_client()
