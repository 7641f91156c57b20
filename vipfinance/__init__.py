"""Mini README: Core package initializer for VIP Finance.

The package tracks income, expenses, employee advances, field-worker daily
salaries and outstanding customer debts for a small business. Subpackages:
``records`` (generic CRUD store), ``salaries`` (monthly salary grid),
``persistence`` (storage backends), ``reports`` (dashboard figures) and
``interface`` (REST API). Only lightweight helpers are re-exported here so
importing the package does not pull in the web framework.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
