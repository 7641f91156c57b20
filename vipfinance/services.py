"""Mini README: Wiring of the store, grid and summary around one adapter.

Structure:
    * DashboardServices - the objects shared by the API and the CLI.
    * build_services - construct them from settings.

One adapter backs both the record store and the salary grid. The services
object is created once per process and passed by reference to whoever needs
it; there is no module-level data singleton.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .configuration import VipFinanceSettings, get_settings
from .logging_utils import get_logger
from .persistence import REGISTRY
from .records import RecordStore
from .reports import FinanceSummary
from .salaries import SalaryGrid

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class DashboardServices:
    """Long-lived service objects for one running application."""

    store: RecordStore
    grid: SalaryGrid
    summary: FinanceSummary


def build_services(settings: Optional[VipFinanceSettings] = None) -> DashboardServices:
    """Create the adapter named in settings and the services on top of it."""

    settings = settings or get_settings()
    adapter = REGISTRY.create(settings.storage_backend, settings)
    store = RecordStore(adapter, id_strategy=settings.id_strategy)
    grid = SalaryGrid(adapter, settings.default_roster)
    LOGGER.info(
        "Services ready (backend=%s, ids=%s, roster=%s workers)",
        settings.storage_backend,
        settings.id_strategy,
        len(grid.roster),
    )
    return DashboardServices(store=store, grid=grid, summary=FinanceSummary(store, grid))
