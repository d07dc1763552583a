# -*- coding: utf-8 -*-
"""
Address Search Controller
=========================
Search addresses by city, state and/or PIN code.

At least one criterion is required; an empty search is rejected locally
without calling the API.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, ErrorKind, OperationResult
from models.address import Address
from utils.logger import get_logger

logger = get_logger(__name__)

EMPTY_SEARCH_ERROR = "Please provide at least one search parameter"


@dataclass
class AddressSearchCriteria:
    city: str = ""
    state: str = ""
    pin_code: str = ""

    def is_empty(self) -> bool:
        return not (self.city.strip() or self.state.strip() or self.pin_code.strip())


class AddressSearchController(BaseController):
    """Controller for the address search screen."""

    results_changed = pyqtSignal(list)  # addresses
    error_changed = pyqtSignal(str)  # "" when cleared

    def __init__(self, api=None, parent=None):
        super().__init__(parent)
        if api is None:
            from services.api_client import get_api_client
            api = get_api_client()
        self.api = api

        self._criteria = AddressSearchCriteria()
        self._results: List[Address] = []
        self._has_searched = False

    @property
    def criteria(self) -> AddressSearchCriteria:
        return self._criteria

    @property
    def results(self) -> List[Address]:
        return list(self._results)

    @property
    def has_searched(self) -> bool:
        return self._has_searched

    def set_criterion(self, name: str, value: Any):
        """Update one criterion; a pending error is cleared."""
        if name not in ("city", "state", "pin_code"):
            raise ValueError(f"Unknown search field: {name}")
        setattr(self._criteria, name, "" if value is None else str(value))
        if self._last_error:
            self._last_error = ""
            self.error_changed.emit("")

    def build_request_params(self) -> Dict[str, str]:
        return asdict(self._criteria)

    def search(self) -> OperationResult[List[Address]]:
        """Run the search, or report a local error when no criterion is set."""
        if self._criteria.is_empty():
            self._set_error(EMPTY_SEARCH_ERROR)
            self.error_changed.emit(EMPTY_SEARCH_ERROR)
            return OperationResult.fail(EMPTY_SEARCH_ERROR, kind=ErrorKind.VALIDATION)

        params = self.build_request_params()
        self._log_operation("search", params=params)
        self._has_searched = True

        result = self.execute_with_error_handling(
            "search_addresses", self.api.search_addresses, params,
            fallback="Failed to search addresses"
        )
        if not result.success:
            self._results = []
            self.error_changed.emit(result.message)
            self.results_changed.emit([])
            return result

        self._results = [Address.from_dict(row) for row in result.data]
        logger.info(f"Address search returned {len(self._results)} results")
        self.results_changed.emit(self.results)
        return OperationResult.ok(data=self.results)

    def clear(self):
        """Reset criteria, results and error."""
        self._criteria = AddressSearchCriteria()
        self._results = []
        self._has_searched = False
        self._last_error = ""
        self.error_changed.emit("")
        self.results_changed.emit([])
