"""Mini README: Tests for settings validation and service wiring.

Confirms that settings select the storage backend and id strategy, that
invalid values are rejected, and that both the record store and the salary
grid share one adapter.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vipfinance.configuration import DEFAULT_ROSTER, VipFinanceSettings
from vipfinance.persistence import LocalStorageAdapter
from vipfinance.services import build_services


def test_local_backend_services_share_storage(tmp_path) -> None:
    settings = VipFinanceSettings(
        data_directory=tmp_path / "store",
        storage_backend="local",
        id_strategy="token",
        default_roster=["Avi", " Meir "],
    )

    services = build_services(settings)
    record = services.store.create("income", {"amount": 10, "date": "2025-06-01"})
    services.grid.save(services.grid.get_table(2025, 6))

    assert settings.data_directory.is_dir()
    assert record["id"].startswith("inc-")
    assert services.grid.roster == ["Avi", "Meir"]
    assert (settings.data_directory / "vip-finance-income.json").exists()
    assert (settings.data_directory / "vip-finance-fieldWorkerSalaries.json").exists()
    assert services.store.backend_metadata()["backend"] == LocalStorageAdapter.backend_name


def test_memory_backend_is_seeded_by_default(tmp_path) -> None:
    services = build_services(VipFinanceSettings(data_directory=tmp_path))

    assert len(services.store.list("advances")) == 4
    assert services.grid.roster == DEFAULT_ROSTER


def test_invalid_settings_are_rejected(tmp_path) -> None:
    with pytest.raises(ValidationError):
        VipFinanceSettings(data_directory=tmp_path, id_strategy="uuid")
    with pytest.raises(ValidationError):
        VipFinanceSettings(data_directory=tmp_path, default_roster=["Avi", "Avi"])
