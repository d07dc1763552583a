# -*- coding: utf-8 -*-
"""
Wizard Framework - Unified Wizard System for Customer Desk.

Provides base classes for multi-step wizards whose navigation and
validation are owned by a controller.
"""

from .base_wizard import BaseWizard
from .base_step import BaseStep

__all__ = [
    'BaseWizard',
    'BaseStep',
]
