"""Mini README: Request bodies accepted by the REST interface.

Structure:
    * IncomePayload / ExpensePayload / AdvancePayload / OutstandingCustomerPayload
      - form fields for each record collection.
    * PAYLOAD_MODELS - collection name to payload model.
    * SalaryTablePayload / WorkerPayload / CellPayload - salary grid edits.

These models enforce what the original forms enforced before calling the
store: text fields must be non-empty and amounts numeric. Salary cell amounts
stay permissive and are coerced to zero by the grid.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Type

from pydantic import BaseModel, Field


class FormPayload(BaseModel):
    class Config:
        str_strip_whitespace = True

    def as_fields(self) -> Dict[str, Any]:
        """Return JSON-ready record fields (dates as ISO strings)."""

        return self.model_dump(mode="json")


class IncomePayload(FormPayload):
    amount: float
    description: str = Field(..., min_length=1)
    category: str = Field("Daily summary", min_length=1)
    date: dt.date


class ExpensePayload(FormPayload):
    amount: float
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    date: dt.date


class AdvancePayload(FormPayload):
    employee: str = Field(..., min_length=1)
    amount: float
    description: str = Field(..., min_length=1)
    method: str = Field("Cash", min_length=1)
    date: dt.date


class OutstandingCustomerPayload(FormPayload):
    name: str = Field(..., min_length=1)
    amount: float
    description: str = Field(..., min_length=1)
    due_date: dt.date


PAYLOAD_MODELS: Dict[str, Type[FormPayload]] = {
    "income": IncomePayload,
    "expenses": ExpensePayload,
    "advances": AdvancePayload,
    "outstandingCustomers": OutstandingCustomerPayload,
}


class SalaryTablePayload(BaseModel):
    workers: List[str] = Field(default_factory=list)
    data: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


class WorkerPayload(BaseModel):
    name: str


class CellPayload(BaseModel):
    date: str
    worker: str
    amount: Any = None
