"""Mini README: Deterministic sample documents for the mock API backend.

``demo_documents`` returns fresh copies of the sample income, expense,
advance and outstanding-customer collections so the dashboard has something
to show before the first real entry is recorded. Salary tables start empty
and are synthesised per month on first view.
"""

from __future__ import annotations

from typing import Any, Dict, List


def demo_documents() -> Dict[str, Any]:
    """Return the seed documents keyed by collection name."""

    income: List[Dict[str, Any]] = [
        {"id": 1, "amount": 25000, "description": "Monthly receipt - client A", "category": "Monthly summary", "date": "2025-06-01"},
        {"id": 2, "amount": 3500, "description": "One-off job", "category": "Daily summary", "date": "2025-06-05"},
        {"id": 3, "amount": 18000, "description": "Renovation project", "category": "Monthly summary", "date": "2025-06-10"},
        {"id": 4, "amount": 5500, "description": "Cleaning job", "category": "Daily summary", "date": "2025-06-15"},
        {"id": 5, "amount": 33000, "description": "Monthly contract - client B", "category": "Monthly summary", "date": "2025-06-20"},
    ]
    expenses: List[Dict[str, Any]] = [
        {"id": 1, "amount": 12000, "description": "Office staff salaries", "category": "Salaries", "date": "2025-06-01"},
        {"id": 2, "amount": 3200, "description": "Cleaning materials", "category": "Materials and equipment", "date": "2025-06-04"},
        {"id": 3, "amount": 1500, "description": "Online campaign", "category": "Marketing and development", "date": "2025-06-09"},
        {"id": 4, "amount": 900, "description": "Fuel refunds", "category": "Refunds", "date": "2025-06-12"},
        {"id": 5, "amount": 2100, "description": "Office rent share", "category": "Office expenses", "date": "2025-06-18"},
    ]
    advances: List[Dict[str, Any]] = [
        {"id": 1, "employee": "Tzach", "amount": 2500, "description": "Salary advance", "method": "Cash", "date": "2025-06-05"},
        {"id": 2, "employee": "Ben", "amount": 1800, "description": "Advance payment", "method": "Bank transfer", "date": "2025-06-10"},
        {"id": 3, "employee": "Roi", "amount": 3000, "description": "Bonus advance", "method": "Cheque", "date": "2025-06-15"},
        {"id": 4, "employee": "Orel", "amount": 2000, "description": "Monthly advance", "method": "Credit", "date": "2025-06-20"},
    ]
    outstanding: List[Dict[str, Any]] = [
        {"id": 1, "name": "Mediterranean Hotel", "amount": 12500, "description": "Special cleaning services", "due_date": "2025-07-15"},
        {"id": 2, "name": "Ofek Offices", "amount": 4800, "description": "Maintenance balance", "due_date": "2025-07-10"},
        {"id": 3, "name": "Ramat Aviv Mall", "amount": 8750, "description": "Monthly cleaning services", "due_date": "2025-07-25"},
        {"id": 4, "name": "Herzliya Pituach Offices", "amount": 6200, "description": "Special works", "due_date": "2025-08-05"},
    ]
    return {
        "income": income,
        "expenses": expenses,
        "advances": advances,
        "outstandingCustomers": outstanding,
        "fieldWorkerSalaries": {},
    }
