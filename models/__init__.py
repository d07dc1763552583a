# -*- coding: utf-8 -*-
"""
Customer Desk Data Models
"""

from .customer import Customer, CustomerDraft
from .address import Address, AddressDraft
from .page_result import PageResult

__all__ = [
    "Customer",
    "CustomerDraft",
    "Address",
    "AddressDraft",
    "PageResult",
]
