# -*- coding: utf-8 -*-
"""
Customer List Controller
========================
Controller for the customer list screen and the address-count reports.

Handles:
- Filter, sort and page state (CustomerQuery)
- Projection of that state to API query parameters
- Loading a page of customers and deleting customers
- Customers with multiple addresses / a single address
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController, OperationResult
from models.customer import Customer
from models.page_result import PageResult
from utils.logger import get_logger

logger = get_logger(__name__)

SORT_FIELDS = ("first_name", "last_name", "phone_number", "created_at")
SORT_ORDERS = ("ASC", "DESC")
FILTER_FIELDS = ("search", "city", "state", "pin_code")


@dataclass
class CustomerQuery:
    """Filter, sort and paging criteria for the customer list."""
    search: str = ""
    city: str = ""
    state: str = ""
    pin_code: str = ""
    sort_by: str = "created_at"
    sort_order: str = "DESC"
    page: int = 1
    page_size: int = field(default_factory=lambda: Config.DEFAULT_PAGE_SIZE)


class CustomerListController(BaseController):
    """
    Controller for listing, searching and deleting customers.

    Paging totals always come from the server response.
    """

    # Signals
    query_changed = pyqtSignal(object)  # CustomerQuery
    page_loaded = pyqtSignal(object)  # PageResult
    customer_deleted = pyqtSignal(object)  # customer id
    report_loaded = pyqtSignal(str, list)  # report name, customers

    def __init__(self, api=None, parent=None):
        super().__init__(parent)
        if api is None:
            from services.api_client import get_api_client
            api = get_api_client()
        self.api = api

        self._query = CustomerQuery()
        self._page_result: Optional[PageResult[Customer]] = None

    # ==================== Properties ====================

    @property
    def query(self) -> CustomerQuery:
        return self._query

    @property
    def page_result(self) -> Optional[PageResult[Customer]]:
        """Last page received from the server."""
        return self._page_result

    @property
    def customers(self) -> List[Customer]:
        return self._page_result.items if self._page_result else []

    # ==================== Query state ====================

    def set_filter(self, name: str, value: Any):
        """
        Update a filter or sort field and go back to the first page.

        Raises:
            ValueError: unknown field or unsupported sort value
        """
        if name in FILTER_FIELDS:
            value = "" if value is None else str(value)
        elif name == "sort_by":
            if value not in SORT_FIELDS:
                raise ValueError(f"Unsupported sort field: {value}")
        elif name == "sort_order":
            value = str(value).upper()
            if value not in SORT_ORDERS:
                raise ValueError(f"Unsupported sort order: {value}")
        else:
            raise ValueError(f"Unknown filter: {name}")

        setattr(self._query, name, value)
        self._query.page = 1
        self.query_changed.emit(self._query)

    def set_page(self, page: int):
        """Change the current page only."""
        if page < 1:
            raise ValueError(f"Page must be >= 1, got {page}")
        self._query.page = page
        self.query_changed.emit(self._query)

    def set_page_size(self, page_size: int):
        """Change the page size and go back to the first page."""
        if page_size <= 0:
            raise ValueError(f"Page size must be > 0, got {page_size}")
        self._query.page_size = page_size
        self._query.page = 1
        self.query_changed.emit(self._query)

    def clear(self):
        """Reset filters, sort and page to their defaults."""
        self._query = CustomerQuery(page_size=self._query.page_size)
        self.query_changed.emit(self._query)

    def build_request_params(self) -> Dict[str, Any]:
        """Query parameters for GET /customers."""
        q = self._query
        return {
            "page": q.page,
            "limit": q.page_size,
            "search": q.search,
            "city": q.city,
            "state": q.state,
            "pin_code": q.pin_code,
            "sortBy": q.sort_by,
            "sortOrder": q.sort_order,
        }

    # ==================== API operations ====================

    def load_customers(self) -> OperationResult[PageResult[Customer]]:
        """Fetch the page described by the current query."""
        params = self.build_request_params()
        self._log_operation("load_customers", params=params)

        result = self.execute_with_error_handling(
            "load_customers", self.api.get_customers, params,
            fallback="Failed to load customers"
        )
        if not result.success:
            return result

        page = PageResult.from_response(
            result.data, Customer.from_dict, requested_page=params["page"]
        )
        if params != self.build_request_params():
            # The query moved on while this request was in flight
            logger.debug(f"Discarding customers page for outdated query {params}")
            return OperationResult.ok(data=page)

        self._page_result = page
        logger.info(
            f"Loaded {len(page.items)} customers "
            f"(page {page.current_page}/{page.total_pages}, total {page.total_items})"
        )
        self.page_loaded.emit(page)
        return OperationResult.ok(data=page)

    def delete_customer(self, customer_id) -> OperationResult[bool]:
        """Delete a customer; the caller reloads the page."""
        self._log_operation("delete_customer", customer_id=customer_id)

        result = self.execute_with_error_handling(
            "delete_customer", self.api.delete_customer, customer_id,
            fallback="Failed to delete customer"
        )
        if result.success:
            result.message = "Customer deleted successfully"
            self.customer_deleted.emit(customer_id)
        return self.publish(result)

    def load_customers_with_multiple_addresses(self) -> OperationResult[List[Customer]]:
        return self._load_report(
            "multiple_addresses", self.api.get_customers_with_multiple_addresses
        )

    def load_customers_with_single_address(self) -> OperationResult[List[Customer]]:
        return self._load_report(
            "single_address", self.api.get_customers_with_single_address
        )

    def _load_report(self, name: str, fetch) -> OperationResult[List[Customer]]:
        result = self.execute_with_error_handling(
            f"load_{name}", fetch, fallback="Failed to load customers"
        )
        if not result.success:
            return result

        customers = [Customer.from_dict(row) for row in result.data]
        self.report_loaded.emit(name, customers)
        return OperationResult.ok(data=customers)
