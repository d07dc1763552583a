# -*- coding: utf-8 -*-
"""
Customer Wizard Package.

Add or edit a customer in three steps:
- Step 1: Customer information
- Step 2: First address
- Step 3: Review & save
"""

from .customer_wizard import CustomerWizard

__all__ = [
    'CustomerWizard'
]
