# -*- coding: utf-8 -*-
"""
Customer Desk UI Components
"""

from .toast import Toast
from .base_table_model import BaseTableModel
from .empty_state import EmptyState
from .page_header import PageHeader
from .input_field import InputField
from .form_field import FormField, FormCheckBox
from .sidebar import Sidebar

__all__ = [
    "Toast",
    "BaseTableModel",
    "EmptyState",
    "PageHeader",
    "InputField",
    "FormField",
    "FormCheckBox",
    "Sidebar",
]
