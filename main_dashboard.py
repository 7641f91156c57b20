"""Mini README: Entry point CLI for the VIP Finance dashboard back end.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port and production flags, and offers a few bookkeeping
commands (list and delete records, print a month's salary totals and the
dashboard figures) that run directly against the configured storage backend.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import typer
import uvicorn

from vipfinance.configuration import get_settings
from vipfinance.logging_utils import configure_root_logger
from vipfinance.records import COLLECTIONS, run_operation
from vipfinance.salaries import coerce_amount, grand_total, total_for_date, total_for_worker
from vipfinance.services import DashboardServices, build_services
from vipfinance.utils import (
    current_month,
    format_currency,
    format_grid_date,
    format_percentage,
    month_range,
    parse_year_month,
)

cli = typer.Typer(help="Run and inspect the VIP Finance dashboard back end.")


def _services(backend: Optional[str]) -> DashboardServices:
    settings = get_settings()
    if backend:
        settings = settings.model_copy(update={"storage_backend": backend})
    return build_services(settings)


def _check_collection(collection: str) -> None:
    if collection not in COLLECTIONS:
        typer.echo(f"Unknown collection '{collection}'. Choose from: {', '.join(COLLECTIONS)}", err=True)
        raise typer.Exit(code=2)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    # Browsers cannot open the 0.0.0.0 sentinel, so point at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting VIP Finance API on {effective_host}:{effective_port} "
        f"using the '{settings.storage_backend}' backend.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "vipfinance.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command("list-records")
def list_records(
    collection: str = typer.Argument(..., help="income, expenses, advances or outstandingCustomers."),
    backend: Optional[str] = typer.Option(None, help="Override the configured storage backend."),
) -> None:
    """Print a collection in display order."""

    _check_collection(collection)
    services = _services(backend)
    spec = COLLECTIONS[collection]
    for record in services.store.list_for_display(collection):
        label = record.get("description") or record.get("name") or ""
        day = record.get(spec.date_field) or "-"
        amount = format_currency(coerce_amount(record.get("amount")))
        typer.echo(f"{str(record.get('id', '-')):>6}  {str(day):<10}  {amount:>12}  {label}")


@cli.command("delete-record")
def delete_record(
    collection: str = typer.Argument(..., help="Collection holding the record."),
    record_id: str = typer.Argument(..., help="Identifier of the record to delete."),
    backend: Optional[str] = typer.Option(None, help="Override the configured storage backend."),
) -> None:
    """Delete one record, reporting failures without a traceback."""

    _check_collection(collection)
    services = _services(backend)
    outcome = run_operation(
        lambda: services.store.delete(collection, record_id),
        description=f"delete {collection}/{record_id}",
    )
    if not outcome.succeeded:
        typer.echo(f"Delete failed: {outcome.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Deleted {collection} record {record_id}.")


@cli.command("salary-report")
def salary_report(
    year: int = typer.Option(date.today().year, help="Salary year."),
    month: int = typer.Option(date.today().month, min=1, max=12, help="Salary month."),
    backend: Optional[str] = typer.Option(None, help="Override the configured storage backend."),
) -> None:
    """Print daily and per-worker salary totals for a month."""

    services = _services(backend)
    table = services.grid.get_table(year, month)
    for day in table.dates:
        typer.echo(f"{format_grid_date(day)}  {format_currency(total_for_date(table, day)):>10}")
    typer.echo("-" * 24)
    for worker in table.workers:
        typer.echo(f"{worker:<12}{format_currency(total_for_worker(table, worker)):>12}")
    typer.echo(f"{'Total':<12}{format_currency(grand_total(table)):>12}")


@cli.command("summary")
def summary(
    period: Optional[str] = typer.Option(None, help="Period as YYYY-MM; defaults to the current month."),
    backend: Optional[str] = typer.Option(None, help="Override the configured storage backend."),
) -> None:
    """Print a month's income, expenses and expense category shares."""

    period = period or current_month()
    try:
        year, month = parse_year_month(period)
    except ValueError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=2) from error
    first_day, last_day = month_range(period)
    snapshot = _services(backend).summary.snapshot(year, month)
    typer.echo(f"{format_grid_date(first_day)} - {format_grid_date(last_day)}")
    for label in ("income", "expenses", "net"):
        typer.echo(f"{label.capitalize():<12}{format_currency(snapshot[label]):>12}")
    typer.echo(f"{'Outstanding':<12}{format_currency(snapshot['outstanding_total']):>12}")
    for entry in snapshot["expense_breakdown"]:
        typer.echo(f"  {entry['name']:<30}{format_percentage(entry['value']):>8}")


if __name__ == "__main__":
    cli()
