"""Mini README: Operation outcomes handed to UI consumers.

Structure:
    * OperationStatus - pending, success or failed.
    * OperationOutcome - status plus the value or a user-facing message.
    * run_operation - execute a store call and capture its final outcome.

The store only ever finishes with success or an exception. ``PENDING`` exists
so a UI can show an in-flight state before calling ``run_operation``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..errors import NotFoundError, PersistenceError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class OperationStatus(str, Enum):
    """Lifecycle states of a store operation as seen by the UI."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(slots=True)
class OperationOutcome:
    """Final (or in-flight) state of a single store operation."""

    status: OperationStatus
    value: Any = None
    message: Optional[str] = None

    @classmethod
    def pending(cls) -> "OperationOutcome":
        return cls(OperationStatus.PENDING)

    @property
    def succeeded(self) -> bool:
        return self.status is OperationStatus.SUCCESS


def run_operation(operation: Callable[[], Any], *, description: str = "operation") -> OperationOutcome:
    """Run ``operation`` and convert domain failures into a failed outcome.

    Only ``NotFoundError``, ``PersistenceError`` and ``ValueError`` are
    captured; anything else is a programming error and propagates.
    """

    try:
        value = operation()
    except NotFoundError as error:
        LOGGER.warning("%s failed: %s", description, error)
        return OperationOutcome(OperationStatus.FAILED, message=str(error))
    except (PersistenceError, ValueError) as error:
        LOGGER.error("%s failed: %s", description, error)
        return OperationOutcome(OperationStatus.FAILED, message=str(error))
    return OperationOutcome(OperationStatus.SUCCESS, value=value)
