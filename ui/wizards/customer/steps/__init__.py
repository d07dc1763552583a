# -*- coding: utf-8 -*-
"""
Customer Wizard Steps Package.
"""

from .customer_info_step import CustomerInfoStep
from .address_info_step import AddressInfoStep
from .review_step import ReviewStep

__all__ = [
    'CustomerInfoStep',
    'AddressInfoStep',
    'ReviewStep'
]
