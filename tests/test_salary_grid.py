"""Mini README: Tests for the field-worker salary grid.

Covers the totals and their equivalence, roster changes, permissive amount
coercion, calendar handling for placeholder months and the save/load round
trip through a persistence adapter.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from vipfinance.errors import PersistenceError
from vipfinance.persistence import MemoryAdapter
from vipfinance.salaries import (
    DOCUMENT_KEY,
    SalaryGrid,
    SalaryTable,
    add_worker,
    coerce_amount,
    days_in_month,
    grand_total,
    period_dates,
    placeholder_table,
    set_amount,
    table_summary,
    total_for_date,
    total_for_worker,
)


def _june_table() -> SalaryTable:
    return SalaryTable.from_document(
        2025,
        6,
        {
            "workers": ["A", "B"],
            "data": {
                "2025-06-01": {"A": 100, "B": 50},
                "2025-06-02": {"A": 0, "B": 0},
            },
        },
    )


def _assert_totals_agree(table: SalaryTable) -> None:
    by_worker = sum((total_for_worker(table, worker) for worker in table.workers), Decimal(0))
    by_date = sum((total_for_date(table, day) for day in table.dates), Decimal(0))
    assert grand_total(table) == by_worker == by_date


def test_totals_for_reference_month() -> None:
    """Worker, date and grand totals match the worked example."""

    table = _june_table()

    assert total_for_worker(table, "A") == 100
    assert total_for_worker(table, "B") == 50
    assert total_for_date(table, "2025-06-01") == 150
    assert total_for_date(table, "2025-06-02") == 0
    assert grand_total(table) == 150
    _assert_totals_agree(table)


def test_totals_agree_with_fractional_amounts() -> None:
    """Decimal cells keep worker and date totals exactly equal."""

    table = placeholder_table(2025, 3, ["A", "B", "C"])
    for index, day in enumerate(table.dates):
        table = set_amount(table, day, "B", f"{index}.1")
        table = set_amount(table, day, "C", 0.7)

    _assert_totals_agree(table)
    assert total_for_worker(table, "C") == Decimal("0.7") * 31


def test_days_in_month_handles_leap_years() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
    assert days_in_month(1900, 2) == 28
    assert days_in_month(2000, 2) == 29
    assert len(period_dates(2025, 4)) == 30
    with pytest.raises(ValueError):
        days_in_month(2025, 13)


def test_placeholder_table_covers_every_day_and_worker() -> None:
    table = placeholder_table(2024, 2, ["Avi", "Meir"])

    assert table.dates == period_dates(2024, 2)
    for row in table.data.values():
        assert set(row) == {"Avi", "Meir"}
        assert all(250 <= amount <= 310 for amount in row.values())
    _assert_totals_agree(table)


def test_get_table_synthesises_stable_default_without_saving() -> None:
    """An unsaved month shows the default roster and is not written."""

    adapter = MemoryAdapter()
    grid = SalaryGrid(adapter, ["Shlomo", "Avi"])

    first = grid.get_table(2025, 6)
    second = grid.get_table(2025, 6)

    assert first.workers == ("Shlomo", "Avi")
    assert len(first.data) == 30
    assert first == second
    assert adapter.get(DOCUMENT_KEY) is None


def test_set_amount_is_pure_and_coerces_bad_input() -> None:
    table = _june_table()

    blank = set_amount(table, "2025-06-01", "A", "")
    garbage = set_amount(table, "2025-06-01", "A", "abc")
    decimal = set_amount(table, "2025-06-02", "B", "120.5")

    assert table.data["2025-06-01"]["A"] == 100
    assert blank.data["2025-06-01"]["A"] == 0
    assert garbage.data["2025-06-01"]["A"] == 0
    assert decimal.data["2025-06-02"]["B"] == Decimal("120.5")
    assert grand_total(decimal) == Decimal("270.5")


def test_set_amount_fills_a_missing_date_row() -> None:
    table = set_amount(_june_table(), "2025-06-15", "B", 80)

    assert table.data["2025-06-15"] == {"A": 0, "B": 80}
    _assert_totals_agree(table)


def test_set_amount_rejects_cells_outside_the_grid() -> None:
    table = _june_table()

    with pytest.raises(ValueError):
        set_amount(table, "2025-07-01", "A", 10)
    with pytest.raises(ValueError):
        set_amount(table, "2025-06-01", "Zed", 10)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, Decimal(0)),
        ("", Decimal(0)),
        ("  ", Decimal(0)),
        ("n/a", Decimal(0)),
        (float("nan"), Decimal(0)),
        ("Infinity", Decimal(0)),
        (True, Decimal(0)),
        ("1,250", Decimal(1250)),
        (0.1, Decimal("0.1")),
        (300, Decimal(300)),
        ("0.005", Decimal("0.01")),
        ("1e5000", Decimal(0)),
        ("12345678901234567.89", Decimal(0)),
        (-1e13, Decimal(0)),
    ],
)
def test_coerce_amount_is_permissive(raw, expected) -> None:
    assert coerce_amount(raw) == expected


def test_add_worker_backfills_zero_on_every_date() -> None:
    table = add_worker(_june_table(), "  Shaked ")

    assert table.workers == ("A", "B", "Shaked")
    assert all(row["Shaked"] == 0 for row in table.data.values())
    _assert_totals_agree(table)


def test_add_worker_rejects_duplicate_and_blank_names() -> None:
    table = _june_table()

    with pytest.raises(ValueError):
        add_worker(table, "A")
    with pytest.raises(ValueError):
        add_worker(table, "   ")


def test_add_worker_then_get_table_shows_zero_entries() -> None:
    grid = SalaryGrid(MemoryAdapter(), ["Shlomo"])
    grid.save(add_worker(grid.get_table(2025, 6), "Mai"))

    reloaded = grid.get_table(2025, 6)

    assert reloaded.workers == ("Shlomo", "Mai")
    assert all(row["Mai"] == 0 for row in reloaded.data.values())


def test_save_then_get_table_round_trips() -> None:
    """Saved tables come back equal with the same roster order."""

    grid = SalaryGrid(MemoryAdapter())
    table = set_amount(_june_table(), "2025-06-02", "B", "33.25")
    table = set_amount(table, "2025-06-03", "A", "999999999999.99")
    table = set_amount(table, "2025-06-04", "A", "12345678901234567.89")

    grid.save(table)
    reloaded = grid.get_table(2025, 6)

    assert reloaded == table
    assert reloaded.workers == ("A", "B")
    assert reloaded.data["2025-06-03"]["A"] == Decimal("999999999999.99")
    assert reloaded.data["2025-06-04"]["A"] == 0


def test_save_replaces_only_its_own_period() -> None:
    grid = SalaryGrid(MemoryAdapter(), ["A"])
    may = placeholder_table(2025, 5, ["A"])
    grid.save(may)
    grid.save(_june_table())

    replacement = SalaryTable.from_document(2025, 6, {"workers": ["C"], "data": {"2025-06-03": {"C": 5}}})
    grid.save(replacement)

    assert grid.get_table(2025, 5) == may
    assert grid.get_table(2025, 6) == replacement
    assert set(grid.load_document()["2025"]) == {"5", "6"}


def test_failed_save_keeps_previous_table() -> None:
    adapter = MemoryAdapter()
    grid = SalaryGrid(adapter)
    original = _june_table()
    grid.save(original)
    adapter.fail_writes = True

    with pytest.raises(PersistenceError):
        grid.save(add_worker(original, "C"))

    adapter.fail_writes = False
    assert grid.get_table(2025, 6) == original


def test_from_document_restores_invariants() -> None:
    """Absent cells become zero and unknown workers are dropped."""

    table = SalaryTable.from_document(
        2025,
        6,
        {"workers": ["A", "B", "A"], "data": {"2025-06-01": {"A": "40", "Ghost": 99}}},
    )

    assert table.workers == ("A", "B")
    assert table.data == {"2025-06-01": {"A": Decimal(40), "B": Decimal(0)}}
    with pytest.raises(ValueError):
        SalaryTable.from_document(2025, 6, {"workers": ["A"], "data": {"2025-05-31": {"A": 1}}})


def test_replace_document_normalises_and_stores() -> None:
    adapter = MemoryAdapter()
    grid = SalaryGrid(adapter)

    stored = grid.replace_document(
        {"2025": {"6": {"workers": ["A"], "data": {"2025-06-01": {"A": 12.5}, "2025-06-02": {}}}}}
    )

    assert stored == {"2025": {"6": {"workers": ["A"], "data": {"2025-06-01": {"A": 12.5}, "2025-06-02": {"A": 0}}}}}
    assert grid.get_table(2025, 6).data["2025-06-02"] == {"A": 0}


def test_table_summary_reports_all_totals() -> None:
    payload = table_summary(_june_table())

    assert payload["worker_totals"] == {"A": 100, "B": 50}
    assert payload["date_totals"] == {"2025-06-01": 150, "2025-06-02": 0}
    assert payload["grand_total"] == 150
    assert payload["workers"] == ["A", "B"]


def test_documents_of_the_wrong_shape_are_rejected() -> None:
    with pytest.raises(ValueError):
        SalaryTable.from_document(2025, 6, {"workers": ["A"], "data": [["2025-06-01", 5]]})
    with pytest.raises(ValueError):
        SalaryTable.from_document(2025, 6, {"workers": ["A"], "data": {"2025-06-01": [5]}})
    with pytest.raises(ValueError):
        SalaryGrid(MemoryAdapter()).replace_document({"2025": [{"workers": ["A"]}]})


def test_corrupt_stored_periods_raise_persistence_errors() -> None:
    stored = {"2025": {"6": {"workers": ["A"], "data": [["2025-06-01", 5]]}}}
    grid = SalaryGrid(MemoryAdapter({DOCUMENT_KEY: stored}))

    with pytest.raises(PersistenceError):
        grid.get_table(2025, 6)
    assert grid.get_table(2025, 5).workers == tuple(grid.roster)

    broken_year = SalaryGrid(MemoryAdapter({DOCUMENT_KEY: {"2025": ["6"]}}))
    with pytest.raises(PersistenceError):
        broken_year.get_table(2025, 6)
