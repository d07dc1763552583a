# -*- coding: utf-8 -*-
"""
Customer Desk Controllers
=========================
Controller layer between the UI (pages) and the remote API.

Controllers provide:
- Form state and validation
- Standardized error handling via OperationResult
- Qt signals for UI updates
- The last operation outcome (Notification) for toasts

Usage:
    from controllers import CustomerListController

    controller = CustomerListController(api)
    controller.set_filter("city", "Pune")
    result = controller.load_customers()
    if result.success:
        print(result.data.total_items)
    else:
        print(result.message)
"""

from controllers.base_controller import (
    BaseController,
    ErrorKind,
    Notification,
    OperationResult,
    Severity,
)

from controllers.form_controller import FormController

from controllers.customer_wizard_controller import (
    CustomerWizardController,
    WizardStage,
)

from controllers.customer_list_controller import (
    CustomerListController,
    CustomerQuery,
)

from controllers.address_search_controller import (
    AddressSearchController,
    AddressSearchCriteria,
)

from controllers.customer_detail_controller import CustomerDetailController

__all__ = [
    # Base
    "BaseController",
    "ErrorKind",
    "Notification",
    "OperationResult",
    "Severity",

    # Forms
    "FormController",

    # Wizard
    "CustomerWizardController",
    "WizardStage",

    # Lists
    "CustomerListController",
    "CustomerQuery",
    "AddressSearchController",
    "AddressSearchCriteria",

    # Detail
    "CustomerDetailController",
]
