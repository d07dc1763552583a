# -*- coding: utf-8 -*-
"""
Customer API Client
===================

Thin client for the remote customer/address REST API.
All business rules live on the server; this module only maps calls to
HTTP requests and responses back to Python structures.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
import urllib3

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    API connection settings.

    Unset values are read from Config (which reads from .env).

    Example .env:
        API_BASE_URL=http://localhost:5000/api
        API_TIMEOUT=30
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class CustomerApiClient:
    """
    Client for the customer API.

    Usage:
        client = CustomerApiClient(ApiConfig(base_url="http://localhost:5000/api"))
        payload = client.get_customers({"page": 1, "limit": 10})
    """

    def __init__(self, config: ApiConfig):
        self.config = config
        self.base_url = config.base_url.rstrip('/')

        if not config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/customers")
            json_data: JSON payload
            params: Query parameters

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ApiException: the server answered with an error status
            NetworkException: the server could not be reached
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.debug(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            if result is not None:
                res_str = json.dumps(result, ensure_ascii=False, default=str)
                if len(res_str) > 1000:
                    logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
                else:
                    logger.debug(f"[API RES] Body: {res_str}")

            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {}
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )

    @staticmethod
    def _unwrap_list(payload: Any) -> List[Dict[str, Any]]:
        """Accept either a bare list or a `{data: [...]}` envelope."""
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict):
            return payload.get("data") or []
        return []

    # ==================== Customers ====================

    def get_customers(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        List customers for one page.

        Args:
            params: page, limit, search, city, state, pin_code, sortBy, sortOrder

        Returns:
            {"data": [...], "pagination": {"currentPage", "totalPages", "totalItems"}}
        """
        return self._request("GET", "/customers", params=params) or {}

    def get_customer(self, customer_id) -> Dict[str, Any]:
        """Get one customer by id."""
        payload = self._request("GET", f"/customers/{customer_id}") or {}
        return payload.get("data", payload)

    def create_customer(self, customer_data: Dict[str, Any]):
        """
        Create a customer.

        Returns:
            The new customer's id
        """
        payload = self._request("POST", "/customers", json_data=customer_data) or {}
        customer_id = payload.get("id")
        if customer_id is None and isinstance(payload.get("data"), dict):
            customer_id = payload["data"].get("id")
        if customer_id is None:
            raise ApiException(
                message="Create customer response did not include an id",
                response_data=payload
            )
        logger.info(f"Created customer {customer_id}")
        return customer_id

    def update_customer(self, customer_id, customer_data: Dict[str, Any]) -> Any:
        """Update a customer."""
        return self._request("PUT", f"/customers/{customer_id}", json_data=customer_data)

    def delete_customer(self, customer_id) -> bool:
        """Delete a customer."""
        self._request("DELETE", f"/customers/{customer_id}")
        logger.info(f"Deleted customer {customer_id}")
        return True

    def get_customers_with_multiple_addresses(self) -> List[Dict[str, Any]]:
        """Customers that have more than one address."""
        return self._unwrap_list(self._request("GET", "/customers/multiple-addresses"))

    def get_customers_with_single_address(self) -> List[Dict[str, Any]]:
        """Customers that have exactly one address."""
        return self._unwrap_list(self._request("GET", "/customers/single-address"))

    # ==================== Addresses ====================

    def get_addresses(self, customer_id) -> List[Dict[str, Any]]:
        """List the addresses of one customer."""
        return self._unwrap_list(self._request("GET", f"/customers/{customer_id}/addresses"))

    def add_address(self, customer_id, address_data: Dict[str, Any]) -> Any:
        """Add an address to a customer."""
        return self._request(
            "POST", f"/customers/{customer_id}/addresses", json_data=address_data
        )

    def update_address(self, address_id, address_data: Dict[str, Any]) -> Any:
        """Update an address."""
        return self._request(
            "PUT", f"/customers/addresses/{address_id}", json_data=address_data
        )

    def delete_address(self, address_id) -> bool:
        """Delete an address."""
        self._request("DELETE", f"/customers/addresses/{address_id}")
        return True

    def search_addresses(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Search addresses by city, state and/or PIN code.

        Each result carries the owning customer's name and phone.
        """
        return self._unwrap_list(self._request("GET", "/addresses/search", params=params))

    # ==================== Health ====================

    def health_check(self) -> bool:
        """Check whether the API answers."""
        try:
            self._request("GET", "/health")
            return True
        except (ApiException, NetworkException):
            return False


# ==================== Singleton Instance ====================

_api_client_instance: Optional[CustomerApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> CustomerApiClient:
    """
    Get the shared API client.

    Args:
        config: API settings (only used on first call)
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = CustomerApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Reset the shared API client (for tests)."""
    global _api_client_instance
    _api_client_instance = None
