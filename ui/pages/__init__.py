# -*- coding: utf-8 -*-
"""
Customer Desk UI Pages
"""

from .customer_list_page import CustomerListPage
from .customer_detail_page import CustomerDetailPage
from .address_search_page import AddressSearchPage
from .address_report_page import AddressReportPage

__all__ = [
    "CustomerListPage",
    "CustomerDetailPage",
    "AddressSearchPage",
    "AddressReportPage",
]
